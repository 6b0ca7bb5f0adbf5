"""Parse and format byte and bit quantities with kilo/mega/giga/tera suffixes."""

from __future__ import annotations

import re

KILO_UNIT = 1024.0
MEGA_UNIT = 1024.0 * 1024.0
GIGA_UNIT = 1024.0 * 1024.0 * 1024.0
TERA_UNIT = 1024.0 * 1024.0 * 1024.0 * 1024.0

KILO_RATE_UNIT = 1000.0
MEGA_RATE_UNIT = 1000.0 * 1000.0
GIGA_RATE_UNIT = 1000.0 * 1000.0 * 1000.0
TERA_RATE_UNIT = 1000.0 * 1000.0 * 1000.0 * 1000.0

UNIT_LEN = 32

_BINARY_FACTORS = {"k": KILO_UNIT, "m": MEGA_UNIT, "g": GIGA_UNIT, "t": TERA_UNIT}
_DECIMAL_FACTORS = {
    "k": KILO_RATE_UNIT,
    "m": MEGA_RATE_UNIT,
    "g": GIGA_RATE_UNIT,
    "t": TERA_RATE_UNIT,
}

_BYTE_LABELS = ("Byte", "KByte", "MByte", "GByte", "TByte")
_BIT_LABELS = ("bit", "Kbit", "Mbit", "Gbit", "Tbit")
_FIXED_LEVELS = {"B": 0, "K": 1, "M": 2, "G": 3, "T": 4}
_TOP_LEVEL = len(_BYTE_LABELS) - 1

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _scan(s: str, factors: dict[str, float]) -> float:
    if s is None:
        raise TypeError("expected a string, got None")
    match = _NUMBER.match(s)
    if match is None:
        raise ValueError(f"no number found in {s!r}")
    value = float(match.group(1))
    suffix = s[match.end():match.end() + 1].lower()
    return value * factors.get(suffix, 1.0)


def unit_atof(s: str) -> float:
    """Parse a number with an optional binary (1024-based) [KMGT] suffix."""
    return _scan(s, _BINARY_FACTORS)


def unit_atof_rate(s: str) -> float:
    """Parse a number with an optional decimal (1000-based) [KMGT] suffix."""
    return _scan(s, _DECIMAL_FACTORS)


def unit_atoi(s: str) -> int:
    """Like unit_atof, truncated to an integer."""
    return int(unit_atof(s))


def unit_format(num: float, fmt: str) -> str:
    """Format a byte count as bytes (upper-case fmt) or bits (lower-case fmt).

    B/K/M/G/T select a fixed unit; A, or any other character, picks the
    largest unit that keeps the number at least 1.
    """
    if not isinstance(fmt, str) or len(fmt) != 1:
        raise ValueError(f"format must be a single character, got {fmt!r}")
    as_bytes = fmt.isupper()
    if not as_bytes:
        num *= 8
    base = 1024.0 if as_bytes else 1000.0

    level = _FIXED_LEVELS.get(fmt.upper())
    if level is None:
        level = 0
        scaled = num
        while scaled >= base and level < _TOP_LEVEL:
            scaled /= base
            level += 1

    num /= base ** level
    label = (_BYTE_LABELS if as_bytes else _BIT_LABELS)[level]

    if num < 9.995:
        text = f"{num:4.2f} {label}"
    elif num < 99.95:
        text = f"{num:4.1f} {label}"
    else:
        text = f"{num:4.0f} {label}"
    return text