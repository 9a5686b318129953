# ----- entities.py -----
import json
from typing import NamedTuple
from recovery.encoding import decode_value, parse_integer
from recovery.errors import InsufficientShares, MalformedProblem
from recovery.interpolation import evaluate_at_zero


class Share(NamedTuple):
    """One (x, y) point of the secret polynomial."""
    x: int
    y: int


class Encoding(NamedTuple):
    """How a share's value was written in the input record."""
    base: int
    value: str


class ProblemInstance:
    """
    A recovery problem: `n` shares were handed out, any `k` of them
    determine the polynomial. Only the first `k` shares, in the order
    they were supplied, take part in the reconstruction.

    `encodings`, when known, holds the (base, digits) each share was
    decoded from, aligned with `shares`.
    """

    def __init__(self, n: int, k: int, shares, encodings=None):
        self.n = parse_integer(n, MalformedProblem, "n")
        self.k = parse_integer(k, MalformedProblem, "k")
        self.shares = tuple(shares)
        self.encodings = tuple(encodings) if encodings is not None else None

        if self.k < 1:
            raise InsufficientShares(f"Threshold k must be at least 1, got {self.k}")
        if self.k > self.n:
            raise InsufficientShares(f"Threshold k={self.k} exceeds the number of shares n={self.n}")
        if len(self.shares) < self.k:
            raise InsufficientShares(
                f"Not enough shares. Need {self.k}, got {len(self.shares)}"
            )

    @property
    def degree(self) -> int:
        return self.k - 1

    @classmethod
    def from_dict(cls, data: dict) -> "ProblemInstance":
        """Build an instance from the parsed JSON test-case record."""
        if not isinstance(data, dict):
            raise MalformedProblem("Problem record must be a JSON object")

        keys = data.get("keys")
        if not isinstance(keys, dict):
            raise MalformedProblem("Missing 'keys' record")
        for name in ("n", "k"):
            if name not in keys:
                raise MalformedProblem(f"'keys' record is missing {name!r}")
        n = parse_integer(keys["n"], MalformedProblem, "'keys.n'")
        k = parse_integer(keys["k"], MalformedProblem, "'keys.k'")

        shares = []
        encodings = []
        for label, record in data.items():
            if label == "keys":
                continue
            share, encoding = cls._parse_share(label, record)
            shares.append(share)
            encodings.append(encoding)

        return cls(n, k, shares, encodings)

    @staticmethod
    def _parse_share(label, record):
        x = parse_integer(label, MalformedProblem, f"Share label {label!r}")
        if x < 1:
            raise MalformedProblem(f"Share index must be at least 1, got {x}")

        if not isinstance(record, dict) or "base" not in record or "value" not in record:
            raise MalformedProblem(f"Share {label!r} needs 'base' and 'value'")

        digits = str(record["value"])
        y = decode_value(record["base"], digits)
        # decode_value has already rejected a base that is not an integer
        return Share(x, y), Encoding(int(record["base"]), digits)

    @classmethod
    def from_file(cls, path) -> "ProblemInstance":
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedProblem(f"Invalid JSON in {path}: {e}")
        return cls.from_dict(data)

    def selected_shares(self):
        return self.shares[:self.k]

    def solve(self, strict: bool = True) -> int:
        return evaluate_at_zero(self.selected_shares(), self.k, strict=strict)
