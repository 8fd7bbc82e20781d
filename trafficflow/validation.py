"""Checks of keys typed into the form and of edited values."""

from __future__ import annotations

import re

from .model import UINT32_MAX, parse_float, parse_int

DIGITS = frozenset("0123456789")
# Backspace and the clipboard / select-all / undo shortcuts.
CONTROL_KEYS = frozenset("\b\x01\x03\x16\x18\x1a")

PERIOD_FIELDS = frozenset({"t0", "tmax", "delta_t"})

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class KeyRejected(Exception):
    """Raised when a typed key is not accepted; carries the status text."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


def check_integer_key(key: str) -> str:
    """Return the key if it may be typed into an integer field."""
    if key not in DIGITS and key not in CONTROL_KEYS:
        raise KeyRejected(f"'{key}' - Недопустимый символ для целого числа!")
    return key


def check_float_key(key: str, current_text: str) -> str:
    """Return the key if it may be typed into a decimal field."""
    if key not in DIGITS and key != "," and key not in CONTROL_KEYS:
        raise KeyRejected(
            f"'{key}' - Недопустимый символ для числа с плавающей запятой!"
        )
    if key == "," and "," in current_text:
        raise KeyRejected("Повторная запятая недопустима!")
    return key


def check_period_key(
    field: str, key: str, t0_text: str, tmax_text: str, delta_t_text: str
) -> str:
    """Return the key if it may be typed into the T0, Tmax or ΔT field."""
    if field not in PERIOD_FIELDS:
        raise ValueError(f"unknown field: {field!r}")
    check_integer_key(key)

    if field == "delta_t" and key == "0" and not delta_t_text:
        raise KeyRejected("Поле ΔT не может быть равно 0!")
    if field == "tmax" and key == "0" and not delta_t_text:
        raise KeyRejected("Поле Tmax не может быть равно 0!")

    if field in ("t0", "tmax"):
        try:
            t0 = parse_int(t0_text)
            tmax = parse_int(tmax_text)
            if field == "tmax":
                tmax = parse_int(tmax_text + key)
            else:
                t0 = parse_int(t0_text + key)
        except ValueError:
            # The value is incomplete for now; nothing to compare yet.
            return key
        if tmax <= t0:
            raise KeyRejected("Значение Tmax должно быть больше T0!")
    return key


def check_cell_key(col: int, key: str, current_text: str) -> str:
    """Return the key if it may be typed into a cell of the given column."""
    if col == 1:
        return check_integer_key(key)
    if col in (2, 3, 4):
        return check_float_key(key, current_text)
    raise KeyRejected("")


def validate_unsigned(text: str) -> bool:
    """Whether the text is empty or an unsigned 32-bit integer."""
    if not text:
        return True
    stripped = text.strip()
    return bool(_UNSIGNED_RE.fullmatch(stripped)) and int(stripped) <= UINT32_MAX


def validate_cell(col: int, value: str) -> bool:
    """Whether an edited cell of the initial data holds a usable value."""
    if col == 1:
        return validate_unsigned(value)
    if col in (2, 3, 4):
        if not value:
            return True
        try:
            parse_float(value)
        except ValueError:
            return False
        return True
    return False