# ----- errors.py -----

class ReconstructionError(ValueError):
    """Base class for every failure while recovering a secret."""
    error_type = "ReconstructionError"


class InvalidBase(ReconstructionError):
    error_type = "InvalidBase"


class InvalidDigit(ReconstructionError):
    error_type = "InvalidDigit"


class DuplicateShareIndex(ReconstructionError):
    error_type = "DuplicateShareIndex"


class InsufficientShares(ReconstructionError):
    error_type = "InsufficientShares"


class NonIntegralResult(ReconstructionError):
    """The interpolated value at zero is a fraction, not an integer.

    Raised when the shares do not lie on one integer polynomial of the
    stated degree (wrong shares, too few shares, or corrupted values).
    """
    error_type = "NonIntegralResult"

    def __init__(self, numerator, denominator):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"Result is not an exact integer: {numerator}/{denominator}"
        )


class MalformedProblem(ReconstructionError):
    error_type = "MalformedProblem"
