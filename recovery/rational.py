# ----- rational.py -----
from math import gcd
from recovery.errors import NonIntegralResult


class Fraction:
    """
    Exact rational number kept in normalized form: the denominator is
    positive and shares no factor with the numerator. Instances are
    immutable; build them through normalize().
    """
    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise ZeroDivisionError("Fraction with zero denominator")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = gcd(numerator, denominator)  # gcd(0, d) == d
        object.__setattr__(self, "_numerator", numerator // g)
        object.__setattr__(self, "_denominator", denominator // g)

    def __setattr__(self, name, value):
        raise AttributeError("Fraction is immutable")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return add(self, other)

    __radd__ = __add__

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return multiply(self, other)

    __rmul__ = __mul__

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return (self._numerator, self._denominator) == (other._numerator, other._denominator)

    def __hash__(self):
        return hash((self._numerator, self._denominator))

    def __repr__(self):
        return f"Fraction({self._numerator}, {self._denominator})"

    def __str__(self):
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def is_integral(self) -> bool:
        return self._denominator == 1

    def to_int(self) -> int:
        """Collapse to an int, refusing anything with a non-unit denominator"""
        if not self.is_integral():
            raise NonIntegralResult(self._numerator, self._denominator)
        return self._numerator

    def truncate(self) -> int:
        """Integer part, rounded toward zero"""
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient


def _coerce(value):
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value)
    return NotImplemented


ZERO = Fraction(0)


def normalize(numerator: int, denominator: int) -> Fraction:
    return Fraction(numerator, denominator)


def add(f1: Fraction, f2: Fraction) -> Fraction:
    return normalize(
        f1.numerator * f2.denominator + f2.numerator * f1.denominator,
        f1.denominator * f2.denominator
    )


def multiply(f1: Fraction, f2: Fraction) -> Fraction:
    return normalize(f1.numerator * f2.numerator, f1.denominator * f2.denominator)
