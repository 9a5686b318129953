import random
import config
from recovery.encoding import encode_value
from recovery.entities import Share
from recovery.errors import InsufficientShares
from recovery.interpolation import evaluate_at_zero

class ShamirSecretSharing:
    """Shamir's scheme over the integers, for fixtures and benchmarks.

    Coefficients come from `random`, not a secure source.
    """

    def __init__(self, threshold: int, total_shares: int):
        if threshold < 1 or threshold > total_shares:
            raise ValueError(f"Invalid threshold {threshold} for {total_shares} shares")
        self.threshold = threshold
        self.total_shares = total_shares

    @staticmethod
    def _evaluate_polynomial(coefficients: list, x: int) -> int:
        """Evaluate polynomial at x"""
        result = 0
        for coefficient in reversed(coefficients):
            result = result * x + coefficient
        return result

    def split_secret(self, secret: int, coefficients: list = None) -> list:
        """Split secret into shares at x = 1..total_shares"""
        if coefficients is None:
            low, high = config.Config.COEFFICIENT_RANGE
            coefficients = [
                random.randint(low, high)
                for _ in range(self.threshold - 1)
            ]
        elif len(coefficients) != self.threshold - 1:
            raise ValueError(
                f"Need {self.threshold - 1} coefficients, got {len(coefficients)}"
            )

        coefficients = [secret] + list(coefficients)
        return [
            Share(x, self._evaluate_polynomial(coefficients, x))
            for x in range(1, self.total_shares + 1)
        ]

    def recover_secret(self, shares: list, strict: bool = True) -> int:
        """Recover secret from shares using Lagrange interpolation"""
        if len(shares) < self.threshold:
            raise InsufficientShares(f"Not enough shares. Need {self.threshold}, got {len(shares)}")
        return evaluate_at_zero(shares, self.threshold, strict=strict)

    def to_problem_dict(self, shares: list, bases: list) -> dict:
        """Render shares as a test-case record, one base per share"""
        if len(bases) != len(shares):
            raise ValueError("Need one base per share")
        data = {"keys": {"n": len(shares), "k": self.threshold}}
        for (x, y), base in zip(shares, bases):
            data[str(x)] = {"base": str(base), "value": encode_value(y, base)}
        return data
