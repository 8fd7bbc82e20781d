"""Binary project files and the text export of the result table."""

from __future__ import annotations

import io
import os
import struct
from typing import BinaryIO, Iterable, Sequence

from .model import InputRow, Project

_HEADER = struct.Struct("<HHBI")
_ROW = struct.Struct("<Ifff")

CELL_SEPARATOR = ";\t"
EXPORT_ENCODING = "cp1251"


class StorageError(Exception):
    """Raised when a project or a table cannot be written or read."""


def write_project(stream: BinaryIO, project: Project) -> None:
    """Write a project in the binary file format."""
    try:
        data = [_HEADER.pack(project.t0, project.tmax, project.delta_t, len(project.rows))]
        data.extend(
            _ROW.pack(row.n1, row.delta_n1, row.a, row.b) for row in project.rows
        )
    except (struct.error, OverflowError) as exc:
        raise StorageError(f"Ошибка при сохранении данных: {exc}") from exc
    stream.write(b"".join(data))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise StorageError("Ошибка при чтении данных: файл повреждён")
    return data


def read_project(stream: BinaryIO) -> Project:
    """Read a project written by write_project; rows are numbered from 1."""
    t0, tmax, delta_t, row_count = _HEADER.unpack(_read_exact(stream, _HEADER.size))
    rows = []
    for number in range(1, row_count + 1):
        n1, delta_n1, a, b = _ROW.unpack(_read_exact(stream, _ROW.size))
        rows.append(InputRow(number, n1, delta_n1, a, b))
    return Project(t0, tmax, delta_t, rows)


def save_project(path: str | os.PathLike[str], project: Project) -> None:
    """Save a project to a file."""
    buffer = io.BytesIO()
    write_project(buffer, project)
    try:
        with open(path, "wb") as file:
            file.write(buffer.getvalue())
    except OSError as exc:
        raise StorageError(f"Ошибка при сохранении файла: {exc}") from exc


def load_project(path: str | os.PathLike[str]) -> Project:
    """Load a project from a file."""
    try:
        with open(path, "rb") as file:
            return read_project(file)
    except OSError as exc:
        raise StorageError(f"Ошибка при открытии файла: {exc}") from exc


def format_table(cells: Iterable[Sequence[str]]) -> str:
    """Lay out table cells as text that a spreadsheet can import."""
    return "".join(CELL_SEPARATOR.join(row) + "\n" for row in cells)


def export_table(path: str | os.PathLike[str], cells: Iterable[Sequence[str]]) -> None:
    """Write table cells to a text file."""
    try:
        with open(
            path, "w", encoding=EXPORT_ENCODING, errors="replace", newline="\r\n"
        ) as file:
            file.write(format_table(cells))
    except OSError as exc:
        raise StorageError(f"Ошибка при сохранении файла: {exc}") from exc