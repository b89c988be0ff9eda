"""Writing a metric field as a plain text table."""

from __future__ import annotations

from os import PathLike
from typing import Protocol, Union


class Grid(Protocol):
    nx: int
    ny: int

    def at(self, i: int, j: int) -> float: ...


def format_metric(field: Grid) -> str:
    """One line per column ``i``, values along ``j`` separated by spaces."""
    return "".join(
        " ".join(f"{field.at(i, j):g}" for j in range(field.ny)) + "\n"
        for i in range(field.nx)
    )


def write_metric(field: Grid, path: Union[str, PathLike]) -> None:
    """Write the field as text to ``path``."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_metric(field))