"""Reading elevation grids in the ESRI ASCII grid format."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

from terrainmetrics.heightfield import Box2, HeightField

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


@dataclass
class AscHeader:
    """Header of an ASCII grid; ``xll``/``yll`` always refer to the lower-left corner."""

    ncols: int = 0
    nrows: int = 0
    xll: float = 0.0
    yll: float = 0.0
    cell_size: float = 0.0
    nodata_value: float = -9999.0
    centered: bool = False


def _value(key: str, words: list[str], kind: type) -> Union[int, float]:
    if len(words) < 2:
        raise ValueError(f"header {key!r} has no value")
    try:
        return kind(words[1])
    except ValueError:
        raise ValueError(f"bad value {words[1]!r} for header {key!r}") from None


def parse_asc(text: str) -> tuple[AscHeader, HeightField]:
    """Parse an ASCII grid into its header and a vertically flipped height field.

    Samples not above the no-data value are set to zero.
    """
    lines = text.splitlines()
    header = AscHeader()
    data_start = len(lines)
    for n, line in enumerate(lines):
        words = line.split()
        if not words:
            continue
        if _NUMBER.match(words[0]):
            data_start = n
            break
        key = words[0].lower()
        if key == "ncols":
            header.ncols = _value(key, words, int)
        elif key == "nrows":
            header.nrows = _value(key, words, int)
        elif key == "xllcorner":
            header.xll = _value(key, words, float)
        elif key == "yllcorner":
            header.yll = _value(key, words, float)
        elif key == "xllcenter":
            header.xll = _value(key, words, float)
            header.centered = True
        elif key == "yllcenter":
            header.yll = _value(key, words, float)
            header.centered = True
        elif key == "cellsize":
            header.cell_size = _value(key, words, float)
        elif key == "nodata_value":
            header.nodata_value = _value(key, words, float)
        else:
            logger.warning("Unrecognized header string %s", words[0])

    if header.centered:
        header.xll -= 0.5 * header.cell_size
        header.yll -= 0.5 * header.cell_size

    ncols, nrows = header.ncols, header.nrows
    if ncols <= 0 or nrows <= 0:
        raise ValueError("grid dimensions missing from header")
    count = ncols * nrows
    tokens = " ".join(lines[data_start:]).split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} samples, found {len(tokens)}")
    samples = [v if v > header.nodata_value else 0.0 for v in map(float, tokens[:count])]

    # The file lists rows from north to south; the field stores south first.
    values: list[float] = []
    for row in reversed(range(nrows)):
        values.extend(samples[row * ncols:(row + 1) * ncols])

    box = Box2(0.0, 0.0, (ncols - 1) * header.cell_size, (nrows - 1) * header.cell_size)
    return header, HeightField(box, ncols, nrows, values)


def read_asc(path: Union[str, PathLike]) -> tuple[AscHeader, HeightField]:
    """Read and parse an ASCII grid file."""
    with open(path, encoding="utf-8") as f:
        return parse_asc(f.read())