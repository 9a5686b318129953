import os
from flask import Flask, jsonify, request
from flask_cors import CORS
from recovery.crypto import create_commitment
from recovery.entities import ProblemInstance
from recovery.errors import MalformedProblem, ReconstructionError
from service.reconstruction_tracker import ReconstructionTracker
import config

app = Flask(__name__)
CORS(app)
tracker = ReconstructionTracker()

def _strict_flag():
    value = request.args.get("strict")
    if value is None:
        return config.Config.STRICT_INTEGRAL
    return value.lower() not in ("0", "false", "no")

@app.route('/reconstruct', methods=['POST'])
def reconstruct():
    data = request.get_json(silent=True)
    reconstruction_id = os.urandom(8).hex()
    keys = data.get("keys") if isinstance(data, dict) else None
    if isinstance(keys, dict):
        tracker.log_reconstruction_start(reconstruction_id, keys.get("n"), keys.get("k"))
    else:
        tracker.log_reconstruction_start(reconstruction_id)

    try:
        if data is None:
            raise MalformedProblem("Request body must be a JSON problem record")
        problem = ProblemInstance.from_dict(data)
        secret = problem.solve(strict=_strict_flag())
    except ReconstructionError as e:
        print(f"[Service] Reconstruction {reconstruction_id} failed: {e.error_type}: {e}")
        tracker.log_reconstruction_failure(reconstruction_id, e)
        return jsonify({
            "reconstruction_id": reconstruction_id,
            "error": str(e),
            "error_type": e.error_type
        }), 400

    commitment = create_commitment(secret)
    tracker.log_reconstruction_success(reconstruction_id, secret, commitment)
    print(f"[Service] Reconstruction {reconstruction_id} succeeded (k={problem.k})")
    return jsonify({
        "reconstruction_id": reconstruction_id,
        "secret": str(secret),  # Decimal string, JSON numbers lose precision
        "commitment": commitment,
        "n": problem.n,
        "k": problem.k
    })

@app.route('/audit/<reconstruction_id>', methods=['GET'])
def reconstruction_audit(reconstruction_id):
    log = tracker.get_log(reconstruction_id)
    if log:
        return jsonify(log)
    return jsonify({"error": "Reconstruction not found"}), 404

@app.route('/status', methods=['GET'])
def status():
    return jsonify({
        "status": "active",
        "reconstructions": tracker.count()
    })

if __name__ == '__main__':
    app.run(
        host=config.Config.SERVICE_HOST,
        port=config.Config.SERVICE_PORT,
        threaded=True
    )
