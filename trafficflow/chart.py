"""The forecast chart: one line per set of initial data."""

from __future__ import annotations

import os
from pathlib import Path

from matplotlib.figure import Figure

from .model import ResultTable
from .storage import StorageError

CHART_EXTENSION = ".png"


def series_points(table: ResultTable) -> list[tuple[str, list[tuple[int, int]]]]:
    """Titles and (year, traffic) points of every series of the chart."""
    return [
        (f"Набор {index}", list(zip(table.years, row.values)))
        for index, row in enumerate(table.rows, start=1)
    ]


def save_chart(table: ResultTable, path: str | os.PathLike[str]) -> Path:
    """Draw the chart into a PNG file and return the path written.

    The extension is changed to .png where it is another one.
    """
    target = Path(path)
    if target.suffix.lower() != CHART_EXTENSION:
        target = target.with_suffix(CHART_EXTENSION)

    figure = Figure()
    axes = figure.add_subplot()
    series = series_points(table)
    for title, points in series:
        years = [year for year, _ in points]
        values = [value for _, value in points]
        axes.plot(years, values, label=title)
    if series:
        axes.legend()
    try:
        figure.savefig(target, format="png")
    except OSError as exc:
        raise StorageError(f"Ошибка при сохранении графика: {exc}") from exc
    return target