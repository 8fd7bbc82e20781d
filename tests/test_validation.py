import pytest

from trafficflow.validation import (
    KeyRejected,
    check_cell_key,
    check_float_key,
    check_integer_key,
    check_period_key,
    validate_cell,
    validate_unsigned,
)


@pytest.mark.parametrize("key", list("0123456789") + ["\b", "\x03", "\x16", "\x01", "\x18", "\x1a"])
def test_integer_key_accepted(key):
    assert check_integer_key(key) == key


def test_integer_key_rejected():
    with pytest.raises(KeyRejected) as info:
        check_integer_key("a")
    assert info.value.message == "'a' - Недопустимый символ для целого числа!"


def test_float_key_comma():
    assert check_float_key(",", "12") == ","
    with pytest.raises(KeyRejected) as info:
        check_float_key(",", "1,2")
    assert info.value.message == "Повторная запятая недопустима!"


def test_float_key_rejected():
    with pytest.raises(KeyRejected) as info:
        check_float_key(".", "1")
    assert info.value.message == "'.' - Недопустимый символ для числа с плавающей запятой!"


def test_delta_t_leading_zero():
    with pytest.raises(KeyRejected) as info:
        check_period_key("delta_t", "0", "1", "5", "")
    assert info.value.message == "Поле ΔT не может быть равно 0!"
    assert check_period_key("delta_t", "0", "1", "5", "1") == "0"


def test_tmax_zero_depends_on_delta_t_field():
    with pytest.raises(KeyRejected) as info:
        check_period_key("tmax", "0", "", "", "")
    assert info.value.message == "Поле Tmax не может быть равно 0!"


def test_tmax_preview_accepted():
    assert check_period_key("tmax", "0", "5", "1", "1") == "0"
    assert check_period_key("tmax", "3", "5", "", "1") == "3"


def test_tmax_preview_rejected():
    with pytest.raises(KeyRejected) as info:
        check_period_key("tmax", "2", "50", "1", "1")
    assert info.value.message == "Значение Tmax должно быть больше T0!"


def test_t0_preview_rejected():
    with pytest.raises(KeyRejected):
        check_period_key("t0", "5", "1", "15", "1")


def test_period_bad_character():
    with pytest.raises(KeyRejected) as info:
        check_period_key("t0", "x", "1", "15", "1")
    assert info.value.message == "'x' - Недопустимый символ для целого числа!"


def test_period_unknown_field():
    with pytest.raises(ValueError):
        check_period_key("other", "1", "", "", "")


def test_cell_key_by_column():
    assert check_cell_key(1, "7", "") == "7"
    assert check_cell_key(3, ",", "1") == ","
    with pytest.raises(KeyRejected):
        check_cell_key(1, ",", "")
    with pytest.raises(KeyRejected) as info:
        check_cell_key(0, "1", "")
    assert info.value.message == ""


@pytest.mark.parametrize(
    "text, expected",
    [("", True), ("123", True), ("4294967295", True), ("4294967296", False), ("-1", False), ("1,5", False)],
)
def test_validate_unsigned(text, expected):
    assert validate_unsigned(text) is expected


@pytest.mark.parametrize(
    "col, value, expected",
    [(1, "12", True), (1, "1,5", False), (2, "1,5", True), (3, "", True), (4, "abc", False), (5, "1", False), (0, "", False)],
)
def test_validate_cell(col, value, expected):
    assert validate_cell(col, value) is expected