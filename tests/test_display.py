import math

import pytest

from core.display import append_token, format_number, parse_float, parse_int


@pytest.mark.parametrize("token", ["7", ".", "+", "sin", "(", "3.141592653589793"])
def test_fresh_display_is_replaced(token):
    assert append_token("0", token) == token
    assert append_token("Error", token) == token


@pytest.mark.parametrize("display", ["5", "12+", "0.", "NaN", "-0.5", "sin("])
def test_other_displays_are_extended(display):
    assert append_token(display, "3") == display + "3"


def test_no_validation_at_input_time():
    assert append_token("2++", "×") == "2++×"


def test_parse_float_reads_numeric_prefix():
    assert parse_float("2+3") == 2.0
    assert parse_float("  -.5x") == -0.5
    assert parse_float("1e3") == 1000.0
    assert parse_float("1e") == 1.0
    assert parse_float("5.") == 5.0
    assert parse_float("-Infinity") == -math.inf


@pytest.mark.parametrize("text", ["", "abc", "Error", "-", "NaN", "×2"])
def test_parse_float_nan_without_number(text):
    assert math.isnan(parse_float(text))


def test_parse_int_stops_at_fraction():
    assert parse_int("4.7") == 4.0
    assert parse_int("-3") == -3.0
    assert parse_int("12abc") == 12.0
    assert math.isnan(parse_int("Infinity"))
    assert math.isnan(parse_int(".5"))


def test_format_integral_values():
    assert format_number(4.0) == "4"
    assert format_number(-5.0) == "-5"
    assert format_number(-0.0) == "0"
    assert format_number(1e20) == "100000000000000000000"
    assert format_number(2.0 ** 60) == "1152921504606847000"


def test_format_fractions_use_shortest_digits():
    assert format_number(0.1 + 0.2) == "0.30000000000000004"
    assert format_number(0.5) == "0.5"
    assert format_number(1e-6) == "0.000001"
    assert format_number(1e-5) == "0.00001"


def test_format_exponent_range():
    assert format_number(1e21) == "1e+21"
    assert format_number(1.5e22) == "1.5e+22"
    assert format_number(1e-7) == "1e-7"
    assert format_number(-2.5e-8) == "-2.5e-8"


def test_format_non_finite():
    assert format_number(math.nan) == "NaN"
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"
