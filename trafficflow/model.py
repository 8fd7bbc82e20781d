"""Traffic flow growth model: input data, parsing and the calculation."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass, field
from typing import Iterable, Sequence

DECIMAL_SEPARATOR = ","
RESULT_HEADER = ("№", "N1", "ΔN1", "a", "b \\ T")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:[.,][0-9]*)?|[.,][0-9]+)(?:[eE][+-]?[0-9]+)?"
)


class ValidationError(ValueError):
    """Raised when the input data cannot be used for a calculation."""


@dataclass
class InputRow:
    """One set of initial data: the traffic N1 and growth coefficients."""

    number: int
    n1: int
    delta_n1: float
    a: float
    b: float


@dataclass
class Project:
    """The period of the forecast and the sets of initial data."""

    t0: int
    tmax: int
    delta_t: int
    rows: list[InputRow] = field(default_factory=list)


@dataclass
class ResultRow:
    """Initial data of one set together with its forecast values."""

    number: int
    n1: int
    delta_n1: float
    a: float
    b: float
    values: list[int] = field(default_factory=list)


@dataclass
class ResultTable:
    """The forecast for every set, one value per year."""

    years: list[int] = field(default_factory=list)
    rows: list[ResultRow] = field(default_factory=list)

    def header(self) -> list[str]:
        """Column titles: the fixed columns followed by the years."""
        return [*RESULT_HEADER, *(str(year) for year in self.years)]

    def to_cells(self) -> list[list[str]]:
        """The table as text cells, header row first."""
        cells = [self.header()]
        for row in self.rows:
            cells.append(
                [
                    str(row.number),
                    str(row.n1),
                    format_float(row.delta_n1),
                    format_float(row.a),
                    format_float(row.b),
                    *(str(value) for value in row.values),
                ]
            )
        return cells


def _f32(value: float) -> float:
    """Round a value to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except (OverflowError, struct.error) as exc:
        raise ValueError(f"{value!r} does not fit a single precision value") from exc


def format_float(value: float) -> str:
    """Format a value with three decimals and a decimal comma."""
    return f"{value:.3f}".replace(".", DECIMAL_SEPARATOR)


def parse_int(text: str) -> int:
    """Parse a 32-bit signed integer; raise ValueError if the text is not one."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        raise ValueError(f"'{text}' is not a valid integer value")
    value = int(stripped)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"'{text}' is not a valid integer value")
    return value


def parse_float(text: str) -> float:
    """Parse a finite number written with a decimal comma or point."""
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        raise ValueError(f"'{text}' is not a valid floating point value")
    value = float(stripped.replace(",", "."))
    if not math.isfinite(value):
        raise ValueError(f"'{text}' is not a valid floating point value")
    return value


def _parse_period_field(text: str, name: str, upper: int) -> int:
    try:
        value = parse_int(text)
    except ValueError:
        raise ValidationError(f"Ошибка: Некорректные данные в поле {name}.") from None
    if not 0 <= value <= upper:
        raise ValidationError(f"Ошибка: Некорректные данные в поле {name}.")
    return value


def parse_project(
    t0_text: str,
    tmax_text: str,
    delta_t_text: str,
    cells: Iterable[Sequence[str]],
) -> Project:
    """Build a project from the text of the form.

    Each row of cells holds the set number, N1, ΔN1, a and b.
    """
    rows = [list(row) for row in cells]

    for index, row in enumerate(rows, start=1):
        if len(row) < 5 or any(not cell.strip() for cell in row[1:5]):
            raise ValidationError(
                f"Ошибка: Заполните все данные в строке {index} таблицы."
            )

    values = []
    for index, row in enumerate(rows, start=1):
        try:
            n1 = parse_int(row[1])
            delta_n1 = parse_float(row[2])
            a = parse_float(row[3])
            b = parse_float(row[4])
            if not 0 <= n1 <= UINT32_MAX:
                raise ValueError(f"'{row[1]}' is out of range")
            values.append((n1, _f32(delta_n1), _f32(a), _f32(b)))
        except ValueError:
            raise ValidationError(
                f"Ошибка: Некорректные данные в строке {index}"
            ) from None

    t0 = _parse_period_field(t0_text, "T0", UINT16_MAX)
    tmax = _parse_period_field(tmax_text, "Tmax", UINT16_MAX)
    delta_t = _parse_period_field(delta_t_text, "ΔT", UINT8_MAX)
    if delta_t == 0:
        raise ValidationError("Поле ΔT не может быть равно 0!")

    project_rows = []
    for index, (row, (n1, delta_n1, a, b)) in enumerate(zip(rows, values), start=1):
        try:
            number = parse_int(row[0])
        except ValueError as exc:
            raise ValidationError(
                f"Ошибка обработки данных в наборе {index}: {exc}"
            ) from None
        project_rows.append(InputRow(number, n1, delta_n1, a, b))

    return Project(t0, tmax, delta_t, project_rows)


def _next_count(count: int, year: int, row: InputRow, growth: float) -> int:
    if year == 1:
        rate = _f32(row.delta_n1)
    elif year < 1:
        raise ValidationError(
            f"Ошибка обработки данных в наборе {row.number}: T = {year}"
        )
    else:
        rate = _f32(growth / math.pow(year - 1, 1.0 / 3.0))
    result = count * (1 + rate / 100.0)
    if not math.isfinite(result) or not 0 <= result <= UINT32_MAX:
        raise ValidationError(
            f"Ошибка обработки данных в наборе {row.number}: "
            f"значение {result} вне допустимого диапазона"
        )
    return int(result)


def compute_series(
    row: InputRow, t0: int, tmax: int, delta_t: int
) -> list[tuple[int, int]]:
    """Forecast the traffic of one set as (year, traffic) pairs."""
    if delta_t <= 0:
        raise ValueError("delta_t must be positive")
    growth = _f32(_f32(row.a) + _f32(row.b))
    points: list[tuple[int, int]] = []
    count = row.n1
    previous = None
    for year in range(t0, tmax + 1, delta_t):
        if previous is not None:
            count = _next_count(count, previous, row, growth)
        points.append((year, count))
        previous = year
    return points


def calculate(project: Project) -> ResultTable:
    """Forecast every set of the project."""
    table = ResultTable()
    if not project.rows:
        return table
    table.years = list(range(project.t0, project.tmax + 1, project.delta_t))
    for row in project.rows:
        series = compute_series(row, project.t0, project.tmax, project.delta_t)
        table.rows.append(
            ResultRow(
                number=row.number,
                n1=row.n1,
                delta_n1=row.delta_n1,
                a=row.a,
                b=row.b,
                values=[value for _, value in series],
            )
        )
    return table