from __future__ import annotations

import math
from decimal import Decimal
from pathlib import Path

import numpy as np
import pytest

from pycmdline import InvalidArgumentFormatError, coerce


def test_text_is_identity():
    assert coerce(str, " -odd text ") == " -odd text "


@pytest.mark.parametrize(
    "value_type, text, expected",
    [
        (int, "42", 42),
        (int, "-7", -7),
        (int, "+3", 3),
        (int, "123456789012345678901234567890", 123456789012345678901234567890),
        (np.int8, "-128", -128),
        (np.int16, "32767", 32767),
        (np.uint8, "255", 255),
        (np.uint64, "18446744073709551615", 18446744073709551615),
        (np.longlong, "-9223372036854775808", -9223372036854775808),
        (np.ulonglong, "18446744073709551615", 18446744073709551615),
        (np.intc, "-5", -5),
    ],
)
def test_integers(value_type, text, expected):
    value = coerce(value_type, text)
    assert value == expected
    assert type(value) is value_type


@pytest.mark.parametrize(
    "value_type, text",
    [
        (int, "notanumber"),
        (int, "4.2"),
        (int, ""),
        (int, " 42"),
        (int, "42 "),
        (int, "1_000"),
        (np.int8, "128"),
        (np.int32, "2147483648"),
        (np.uint16, "-1"),
        (np.uint32, "4294967296"),
        (np.longlong, "99999999999999999999999"),
        (np.ulonglong, "-1"),
        (np.ulonglong, "18446744073709551616"),
    ],
)
def test_integer_failures(value_type, text):
    with pytest.raises(InvalidArgumentFormatError) as excinfo:
        coerce(value_type, text)
    assert excinfo.value.token == text
    assert text in str(excinfo.value)


def test_floats():
    assert coerce(float, "2.5") == 2.5
    assert coerce(float, "-1e3") == -1000.0
    assert isinstance(coerce(np.float32, "0.5"), np.float32)
    assert math.isinf(coerce(float, "-inf"))
    assert math.isnan(coerce(np.float64, "nan"))


@pytest.mark.parametrize(
    "value_type, text",
    [
        (float, "abc"),
        (float, ""),
        (float, " 1.0"),
        (float, "1e400"),
        (float, "1_000"),
        (np.float64, "1_0.5"),
        (np.float16, "70000"),
        (np.float32, "1e39"),
    ],
)
def test_float_failures(value_type, text):
    with pytest.raises(InvalidArgumentFormatError):
        coerce(value_type, text)


@pytest.mark.parametrize("text, expected", [("true", True), ("No", False), ("1", True), ("off", False)])
def test_bools(text, expected):
    assert coerce(bool, text) is expected


def test_bool_failure():
    with pytest.raises(InvalidArgumentFormatError):
        coerce(bool, "maybe")


def test_other_types_are_constructed_from_text():
    assert coerce(Path, "out/file.txt") == Path("out/file.txt")
    assert coerce(complex, "1+2j") == complex(1, 2)
    with pytest.raises(InvalidArgumentFormatError):
        coerce(complex, "not complex")


def test_decimal():
    assert coerce(Decimal, "12.50") == Decimal("12.50")
    with pytest.raises(InvalidArgumentFormatError, match="invalid argument format: abc"):
        coerce(Decimal, "abc")


class Port(int):
    def __new__(cls, text):
        value = super().__new__(cls, text)
        if not 0 < value < 65536:
            raise OverflowError(f"port out of range: {text}")
        return value


def test_constructor_arithmetic_errors_become_format_errors():
    assert coerce(Port, "8080") == 8080
    with pytest.raises(InvalidArgumentFormatError) as excinfo:
        coerce(Port, "70000")
    assert excinfo.value.token == "70000"


def test_numpy_scalar_constructors_go_through_range_checks():
    with pytest.raises(InvalidArgumentFormatError):
        coerce(np.longlong, "1e3")
    assert type(coerce(np.float16, "0.25")) is np.float16
