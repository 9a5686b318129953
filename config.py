# Global configuration for the secret recovery toolkit
import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

class Config:
    # Service settings
    SERVICE_HOST = "localhost"
    SERVICE_PORT = 5000
    REQUEST_TIMEOUT = 10

    # Decoding parameters
    MIN_BASE = 2
    MAX_BASE = 36

    # Interpolation parameters
    STRICT_INTEGRAL = True  # Reject secrets that do not collapse to an integer

    # Paths
    DATA_DIR = os.environ.get("RECOVERY_DATA_DIR", "data")
    RECONSTRUCTION_LOGS = os.path.join(DATA_DIR, "reconstruction_logs.json")
    TEST_CASE_DIR = os.path.join(BASE_DIR, "testcases")
    TEST_CASES = [
        os.path.join(TEST_CASE_DIR, "testcase1.json"),
        os.path.join(TEST_CASE_DIR, "testcase2.json"),
    ]

    # Research parameters
    PERFORMANCE_SAMPLES = 100  # For benchmarking
    COEFFICIENT_RANGE = (1, 2**64)  # Fixture polynomials only, not secure

    @classmethod
    def service_url(cls):
        return f"http://{cls.SERVICE_HOST}:{cls.SERVICE_PORT}"
