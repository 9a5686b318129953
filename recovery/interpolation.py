# ----- interpolation.py -----
from recovery.encoding import parse_integer
from recovery.errors import DuplicateShareIndex, InsufficientShares, MalformedProblem
from recovery.rational import ZERO, Fraction, add, multiply, normalize


def _as_point(point):
    x, y = point
    return (
        parse_integer(x, MalformedProblem, "Share index x"),
        parse_integer(y, MalformedProblem, "Share value y"),
    )


def evaluate_at_zero(points, count: int, strict: bool = True) -> int:
    """
    Value at x=0 of the polynomial through the first `count` points.

    Formula: f(0) = sum_i y_i * prod_{j != i} (0 - x_j) / (x_i - x_j)

    Every term is kept as an exact fraction. With strict=True a result
    that does not reduce to an integer raises NonIntegralResult; with
    strict=False a warning is printed and the value is truncated toward
    zero.
    """
    count = parse_integer(count, InsufficientShares, "Share count")
    if count < 1:
        raise InsufficientShares(f"At least one share is required, got count={count}")

    selected = [_as_point(point) for point in list(points)[:count]]
    if len(selected) < count:
        raise InsufficientShares(f"Not enough shares. Need {count}, got {len(selected)}")

    seen = set()
    for x, _ in selected:
        if x in seen:
            raise DuplicateShareIndex(f"Share index x={x} appears more than once")
        seen.add(x)

    result = ZERO
    for i, (x_i, y_i) in enumerate(selected):
        numerator = 1
        denominator = 1
        for j, (x_j, _) in enumerate(selected):
            if i == j:
                continue
            numerator *= -x_j
            denominator *= x_i - x_j

        basis = normalize(numerator, denominator)
        term = multiply(Fraction(y_i), basis)
        result = add(result, term)

    if strict:
        return result.to_int()

    if not result.is_integral():
        print(f"⚠️  Result {result} is not an exact integer, check the input! Truncating.")
    return result.truncate()
