import re
from typing import Optional

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


class InvalidOperandError(ValueError):
    """Raised when a query operand is missing or is not a usable integer."""

    def __init__(self, name: str, raw: Optional[str], reason: str):
        self.name = name
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid operand {name}={raw!r}: {reason}")


def parse_operand(
    name: str,
    raw: Optional[str],
    minimum: int = INT64_MIN,
    maximum: int = INT64_MAX,
) -> int:
    """
    Parse a base-10 integer operand.

    Only an optional sign followed by ASCII digits is accepted, so inputs
    like " 5", "1_000" or "٣" that int() would take are rejected.

    Args:
        name: Query parameter name, used in the error
        raw: Raw parameter value, None when the parameter is absent
        minimum: Smallest accepted value
        maximum: Largest accepted value

    Returns:
        The parsed integer
    """
    if raw is None:
        raise InvalidOperandError(name, raw, "missing")
    if not raw:
        raise InvalidOperandError(name, raw, "empty")
    if _DECIMAL_INTEGER.fullmatch(raw) is None:
        raise InvalidOperandError(name, raw, "not a decimal integer")
    value = int(raw, 10)
    if value < minimum or value > maximum:
        raise InvalidOperandError(
            name, raw, f"out of range [{minimum}, {maximum}]"
        )
    return value


def add(a: int, b: int) -> int:
    # Python ints are unbounded, the sum of two int64 operands never wraps.
    return a + b
