import time
import json
import os
import threading
import config

class ReconstructionTracker:
    def __init__(self, log_file=None):
        self.log_file = log_file or config.Config.RECONSTRUCTION_LOGS
        self.lock = threading.Lock()
        self.logs = self._load_logs()

    def _load_logs(self):
        if os.path.exists(self.log_file):
            with open(self.log_file, "r") as f:
                return json.load(f)
        return {}

    def _save_logs(self):
        directory = os.path.dirname(self.log_file)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(self.log_file, "w") as f:
            json.dump(self.logs, f, indent=2)

    def log_reconstruction_start(self, reconstruction_id, n=None, k=None):
        with self.lock:
            self.logs[reconstruction_id] = {
                "start_time": time.time(),
                "status": "initiated",
                "n": n,
                "k": k,
                "events": [{"time": time.time(), "event": "reconstruction_started"}]
            }
            self._save_logs()

    def log_reconstruction_success(self, reconstruction_id, secret, commitment):
        with self.lock:
            if reconstruction_id in self.logs:
                log = self.logs[reconstruction_id]
                log["status"] = "success"
                log["end_time"] = time.time()
                log["secret"] = str(secret)  # Decimal text keeps full precision in JSON
                log["commitment"] = commitment
                log["events"].append({
                    "time": time.time(),
                    "event": "reconstruction_success"
                })
                self._save_logs()

    def log_reconstruction_failure(self, reconstruction_id, error):
        with self.lock:
            if reconstruction_id in self.logs:
                log = self.logs[reconstruction_id]
                log["status"] = "failed"
                log["end_time"] = time.time()
                log["error"] = {
                    "error_type": getattr(error, "error_type", type(error).__name__),
                    "message": str(error)
                }
                log["events"].append({
                    "time": time.time(),
                    "event": "reconstruction_failed"
                })
                self._save_logs()

    def get_log(self, reconstruction_id):
        return self.logs.get(reconstruction_id)

    def count(self):
        return len(self.logs)
