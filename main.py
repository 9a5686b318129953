# ----- main.py -----
import sys
import config
from recovery.runner import run_test_cases, print_summary

USAGE = "Usage: python main.py [--lenient] [TESTCASE.json ...]"

def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    strict = config.Config.STRICT_INTEGRAL
    if "--lenient" in args:
        args.remove("--lenient")
        strict = False

    paths = args or config.Config.TEST_CASES
    results = run_test_cases(paths, strict=strict)
    print_summary(results)

    failed = [path for path, outcome in results.items() if isinstance(outcome, Exception)]
    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
