# ----- runner.py -----
import os
import config
from recovery.crypto import create_commitment
from recovery.entities import ProblemInstance
from recovery.errors import ReconstructionError

# --- Helper Functions ---
def print_header(title, rule="="):
    print("\n" + rule*50)
    print(f"{title}")
    print(rule*50)

def print_runner(message):
    print(f"[Runner] {message}")


def process_test_case(path, strict=None) -> int:
    """Load one test case, report every decoded point and return the secret."""
    if strict is None:
        strict = config.Config.STRICT_INTEGRAL
    print_header(f"📂 Processing: {os.path.basename(path)}")

    problem = ProblemInstance.from_file(path)
    print(f"🔑 n = {problem.n} (roots provided), k = {problem.k} (roots needed)")
    print(f"📐 Polynomial degree = {problem.degree}")

    for share, encoding in zip(problem.shares, problem.encodings):
        print(f"  Point x={share.x}: base {encoding.base}, "
              f"encoded=\"{encoding.value}\" → decoded y={share.y}")

    print(f"\n🔢 Using first {problem.k} points for interpolation...")
    secret = problem.solve(strict=strict)

    print(f"\n✅ SECRET (constant term f(0)) = {secret}")
    print(f"   Commitment: {create_commitment(secret)}")
    print("="*50)
    return secret


def run_test_cases(paths, strict=None) -> dict:
    """
    Process every test case independently. A failing case is reported
    and recorded as its exception; the remaining cases still run.
    """
    results = {}
    for path in paths:
        try:
            results[path] = process_test_case(path, strict=strict)
        except ReconstructionError as e:
            print_runner(f"❌ {e.error_type}: {e}")
            results[path] = e
        except OSError as e:
            print_runner(f"❌ Could not read {path}: {e}")
            results[path] = e
    return results


def print_summary(results):
    print_header("🎯 FINAL ANSWERS:", rule="★")
    for i, (path, outcome) in enumerate(results.items(), 1):
        name = os.path.basename(path)
        if isinstance(outcome, Exception):
            error_type = getattr(outcome, "error_type", type(outcome).__name__)
            print(f"   Test Case {i} ({name}) FAILED: {error_type}")
        else:
            print(f"   Test Case {i} ({name}) Secret = {outcome}")
    print("★"*50)
