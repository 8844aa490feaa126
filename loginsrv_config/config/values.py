"""
Literal parsing for directive arguments: booleans, integers and durations.

Durations use the compact form ``[-+]?(<number><unit>)+`` (for example
``24h``, ``23h23m`` or ``1.5s``) with units ns, us, µs, ms, s, m and h.
"""

import re
from datetime import timedelta
from decimal import Decimal

# Duration units in nanoseconds
DURATION_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

NS_PER_US = 1_000

# Largest duration a signed 64-bit nanosecond count holds (about 2562047h)
MAX_DURATION_NS = 2**63 - 1

_UNIT_PATTERN = "|".join(sorted((re.escape(u) for u in DURATION_UNITS), key=len, reverse=True))
_COMPONENT_RE = re.compile(rf"(\d+\.?\d*|\.\d+)({_UNIT_PATTERN})", re.ASCII)
_DURATION_RE = re.compile(rf"[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:{_UNIT_PATTERN}))+", re.ASCII)
_INT_RE = re.compile(r"[-+]?\d+", re.ASCII)

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(text: str) -> bool:
    """
    Parse a boolean literal.

    Raises:
        ValueError: If text is not one of the accepted literals
    """
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def parse_int(text: str) -> int:
    """
    Parse a plain decimal integer with an optional sign.

    Raises:
        ValueError: If text is not of the form [-+]?digits
    """
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration literal such as ``42h`` or ``23h23m``.

    A bare ``0`` is accepted as zero; any other number needs a unit.
    The value must be a whole number of microseconds and at most
    MAX_DURATION_NS in magnitude.

    Raises:
        ValueError: If text is not a valid duration
    """
    if text in ("0", "+0", "-0"):
        return timedelta(0)

    if not _DURATION_RE.fullmatch(text):
        raise ValueError(f"invalid duration: {text!r}")

    nanos = Decimal(0)
    for number, unit in _COMPONENT_RE.findall(text.lstrip("+-")):
        nanos += Decimal(number) * DURATION_UNITS[unit]

    if nanos > MAX_DURATION_NS:
        raise ValueError(f"duration out of range: {text!r}")
    if nanos % NS_PER_US:
        raise ValueError(f"duration finer than a microsecond: {text!r}")

    micros = int(nanos) // NS_PER_US
    return timedelta(microseconds=-micros if text.startswith("-") else micros)


def format_duration(value: timedelta) -> str:
    """Format a timedelta back into the compact duration form."""
    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    hours, micros = divmod(micros, DURATION_UNITS["h"] // NS_PER_US)
    minutes, micros = divmod(micros, DURATION_UNITS["m"] // NS_PER_US)
    seconds, micros = divmod(micros, DURATION_UNITS["s"] // NS_PER_US)

    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or micros:
        if micros:
            parts.append(f"{seconds}.{micros:06d}".rstrip("0") + "s")
        else:
            parts.append(f"{seconds}s")

    return sign + "".join(parts)
