# ----- crypto.py -----
import hmac
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.backends import default_backend


def create_commitment(secret: int) -> str:
    """SHA-256 commitment over the decimal text of a recovered secret"""
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(str(secret).encode("ascii"))
    return digest.finalize().hex()


def verify_commitment(secret: int, commitment: str) -> bool:
    return hmac.compare_digest(create_commitment(secret), commitment.lower())
