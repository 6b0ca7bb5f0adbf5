import math

import pytest
from hypothesis import given, strategies as st

from throughput.units import (
    GIGA_RATE_UNIT,
    GIGA_UNIT,
    KILO_RATE_UNIT,
    KILO_UNIT,
    MEGA_RATE_UNIT,
    MEGA_UNIT,
    TERA_RATE_UNIT,
    TERA_UNIT,
    unit_atof,
    unit_atof_rate,
    unit_atoi,
    unit_format,
)


@pytest.mark.parametrize(
    "text, factor",
    [
        ("3k", KILO_UNIT),
        ("3K", KILO_UNIT),
        ("3m", MEGA_UNIT),
        ("3M", MEGA_UNIT),
        ("3g", GIGA_UNIT),
        ("3G", GIGA_UNIT),
        ("3t", TERA_UNIT),
        ("3T", TERA_UNIT),
        ("3", 1.0),
        ("3x", 1.0),
    ],
)
def test_unit_atof_suffixes(text, factor):
    assert unit_atof(text) == 3 * factor


@pytest.mark.parametrize(
    "text, factor",
    [
        ("2.5k", KILO_RATE_UNIT),
        ("2.5M", MEGA_RATE_UNIT),
        ("2.5g", GIGA_RATE_UNIT),
        ("2.5T", TERA_RATE_UNIT),
        ("2.5", 1.0),
    ],
)
def test_unit_atof_rate_suffixes(text, factor):
    assert unit_atof_rate(text) == 2.5 * factor


def test_suffix_must_follow_number_directly():
    assert unit_atof("5 K") == 5.0


def test_leading_whitespace_is_skipped():
    assert unit_atof("  7K") == 7 * KILO_UNIT


def test_exponent_is_parsed():
    assert unit_atof_rate("1e3k") == 1e3 * KILO_RATE_UNIT


def test_unit_atoi_truncates():
    assert unit_atoi("1.5K") == int(1.5 * KILO_UNIT)
    assert unit_atoi("2.9") == 2


def test_unparseable_raises():
    with pytest.raises(ValueError):
        unit_atof("abc")
    with pytest.raises(ValueError):
        unit_atof_rate("")


@given(st.integers(min_value=0, max_value=10**6), st.sampled_from("kKmMgGtT"))
def test_rate_never_exceeds_binary(n, suffix):
    text = f"{n}{suffix}"
    assert unit_atof_rate(text) <= unit_atof(text)


def test_format_fixed_kbyte():
    assert unit_format(1024, "K") == "1.00 KByte"


def test_format_fixed_kbit():
    assert unit_format(125, "k") == "1.00 Kbit"


def test_format_plain_bytes_label():
    assert unit_format(5, "B").endswith(" Byte")


@pytest.mark.parametrize(
    "num, fmt, label",
    [
        (2048, "A", "KByte"),
        (3 * MEGA_UNIT, "A", "MByte"),
        (3 * GIGA_UNIT, "A", "GByte"),
        (3 * TERA_UNIT, "A", "TByte"),
        (5000 * TERA_UNIT, "A", "TByte"),
        (500, "a", "Kbit"),
        (10, "a", "bit"),
        (3 * GIGA_RATE_UNIT, "a", "Gbit"),
    ],
)
def test_adaptive_labels(num, fmt, label):
    assert unit_format(num, fmt).split(" ")[1] == label


def test_unknown_format_is_adaptive():
    assert unit_format(2048, "Z") == unit_format(2048, "A")
    assert unit_format(2048, "z") == unit_format(2048, "a")


def test_large_fixed_value_keeps_all_digits():
    text = unit_format(5000, "B")
    assert text.split(" ")[0] == "5000"


def test_bad_format_length_raises():
    with pytest.raises(ValueError):
        unit_format(1, "KB")


@given(st.floats(min_value=0, max_value=1e6, allow_nan=False))
def test_width_at_least_four(num):
    number = unit_format(num, "B").split(" ")[0] if num >= 10 else unit_format(num, "B")[:4]
    assert len(number) >= 4