import sys
import json
import os
import requests
import config
from tabulate import tabulate

class ReconstructionClient:
    def __init__(self, service_url=None):
        self.service_url = service_url or config.Config.service_url()

    def reconstruct(self, problem: dict, strict=True) -> dict:
        """Send one problem record; returns the service's JSON answer"""
        response = requests.post(
            f"{self.service_url}/reconstruct",
            json=problem,
            params={} if strict else {"strict": "false"},
            timeout=config.Config.REQUEST_TIMEOUT
        )
        result = response.json()
        if response.status_code == 200:
            result["secret"] = int(result["secret"])
        return result

    def reconstruct_file(self, path, strict=True) -> dict:
        with open(path, "r", encoding="utf-8") as f:
            problem = json.load(f)
        return self.reconstruct(problem, strict=strict)

    def audit(self, reconstruction_id):
        response = requests.get(
            f"{self.service_url}/audit/{reconstruction_id}",
            timeout=config.Config.REQUEST_TIMEOUT
        )
        if response.status_code == 200:
            return response.json()
        return None

    def run(self, paths, strict=True):
        rows = []
        for path in paths:
            name = os.path.basename(path)
            # RequestException subclasses OSError, so it is matched first
            try:
                result = self.reconstruct_file(path, strict=strict)
            except requests.exceptions.JSONDecodeError as e:
                rows.append([name, "-", "-", f"❌ Invalid service response: {e}"])
                continue
            except requests.exceptions.RequestException as e:
                print(f"\n❌ ERROR: Could not reach service at {self.service_url}: {e}")
                raise
            except (OSError, ValueError) as e:
                rows.append([name, "-", "-", f"❌ {e}"])
                continue

            if "error" in result:
                rows.append([name, "-", "-", f"❌ {result['error_type']}: {result['error']}"])
            else:
                rows.append([name, result["n"], result["k"], result["secret"]])

        print(tabulate(rows, headers=["Test case", "n", "k", "Secret"]))
        return rows

def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    strict = True
    if "--lenient" in args:
        args.remove("--lenient")
        strict = False

    client = ReconstructionClient()
    client.run(args or config.Config.TEST_CASES, strict=strict)

if __name__ == "__main__":
    main()
