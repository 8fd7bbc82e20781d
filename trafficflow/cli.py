"""Command line front end: create, show and calculate project files."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from .chart import save_chart
from .grid import InputGrid
from .model import (
    InputRow,
    Project,
    ValidationError,
    calculate,
    format_float,
    parse_float,
    parse_int,
    parse_project,
)
from .storage import StorageError, export_table, format_table, load_project, save_project


def _value_or_zero(text: str, parse: Callable[[str], float]) -> float:
    return parse(text) if text.strip() else 0


def _project_from_form(
    t0_text: str, tmax_text: str, delta_t_text: str, rows: Sequence[Sequence[str]]
) -> Project:
    """Collect the form for saving; empty fields count as zero."""
    try:
        t0 = int(_value_or_zero(t0_text, parse_int))
        tmax = int(_value_or_zero(tmax_text, parse_int))
        delta_t = int(_value_or_zero(delta_t_text, parse_int))
        project_rows = [
            InputRow(
                number,
                int(_value_or_zero(n1, parse_int)),
                float(_value_or_zero(delta_n1, parse_float)),
                float(_value_or_zero(a, parse_float)),
                float(_value_or_zero(b, parse_float)),
            )
            for number, (n1, delta_n1, a, b) in enumerate(rows, start=1)
        ]
    except ValueError as exc:
        raise StorageError(f"Ошибка при сохранении данных: {exc}") from exc
    return Project(t0, tmax, delta_t, project_rows)


def _grid_for(project: Project) -> InputGrid:
    return InputGrid(
        [
            str(row.number),
            str(row.n1),
            format_float(row.delta_n1),
            format_float(row.a),
            format_float(row.b),
        ]
        for row in project.rows
    )


def _create(args: argparse.Namespace) -> None:
    project = _project_from_form(args.t0, args.tmax, args.delta_t, args.row)
    save_project(args.path, project)
    print(f"Файл успешно сохранен: {args.path}", file=sys.stderr)


def _show(args: argparse.Namespace) -> None:
    project = load_project(args.path)
    grid = _grid_for(project)
    print(f"T0: {project.t0}")
    print(f"Tmax: {project.tmax}")
    print(f"ΔT: {project.delta_t}")
    sys.stdout.write(format_table([grid.header(), *grid.cells()]))


def _calc(args: argparse.Namespace) -> None:
    project = load_project(args.path)
    grid = _grid_for(project)
    parsed = parse_project(
        str(project.t0), str(project.tmax), str(project.delta_t), grid.cells()
    )
    table = calculate(parsed)
    cells = table.to_cells()
    sys.stdout.write(format_table(cells))
    if args.table:
        export_table(args.table, cells)
        print(f"Таблица успешно сохранена в файл: {args.table}", file=sys.stderr)
    if args.chart:
        written = save_chart(table, args.chart)
        print(f"График успешно сохранен в файл: {written}", file=sys.stderr)
    print("Расчёт завершён успешно.", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trafficflow", description="Forecast of traffic flow growth."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="write a project file")
    create.add_argument("path")
    create.add_argument("--t0", default="")
    create.add_argument("--tmax", default="")
    create.add_argument("--delta-t", dest="delta_t", default="")
    create.add_argument(
        "--row",
        nargs=4,
        action="append",
        default=[],
        metavar=("N1", "DN1", "A", "B"),
        help="one set of initial data; may be repeated",
    )
    create.set_defaults(handler=_create)

    show = commands.add_parser("show", help="print the initial data of a project")
    show.add_argument("path")
    show.set_defaults(handler=_show)

    calc = commands.add_parser("calc", help="calculate the forecast of a project")
    calc.add_argument("path")
    calc.add_argument("--table", help="export the result table to this file")
    calc.add_argument("--chart", help="save the chart to this PNG file")
    calc.set_defaults(handler=_calc)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (ValidationError, StorageError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())