import pytest

from optkit.coercion import coerce_int64, coerce_uint64, coerce_value, is_uint
from optkit.exceptions import InvalidUsageError, OptionRangeError
from optkit.option_type import OptionType


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0", 0),
        ("42", 42),
        ("-42", -42),
        ("+7", 7),
        ("007", 7),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_coerce_int64(value, expected):
    assert coerce_int64(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "12abc", " 12", "1_000", "0x10", "4.2", "-"])
def test_coerce_int64_invalid(value):
    with pytest.raises(InvalidUsageError):
        coerce_int64(value)


@pytest.mark.parametrize("value", ["9223372036854775808", "-9223372036854775809"])
def test_coerce_int64_out_of_range(value):
    with pytest.raises(OptionRangeError):
        coerce_int64(value)


def test_coerce_uint64():
    assert coerce_uint64("0") == 0
    assert coerce_uint64("9223372036854775808") == 9223372036854775808
    assert coerce_uint64("18446744073709551615") == 2**64 - 1


@pytest.mark.parametrize("value", ["", "-22", "+1", "abc", "1e3", "٣"])
def test_coerce_uint64_rejects_non_digits_as_usage(value):
    with pytest.raises(InvalidUsageError):
        coerce_uint64(value)


def test_coerce_uint64_out_of_range():
    with pytest.raises(OptionRangeError):
        coerce_uint64("18446744073709551616")


def test_is_uint():
    assert is_uint("0123")
    assert is_uint("")
    assert not is_uint("-1")
    assert not is_uint("1 ")


def test_coerce_value_dispatch():
    assert coerce_value("12", OptionType.INT64) == 12
    assert coerce_value("12", OptionType.UINT64) == 12
    assert coerce_value("a=b", OptionType.STRING) == "a=b"
    with pytest.raises(ValueError):
        coerce_value("x", OptionType.BOOL)
