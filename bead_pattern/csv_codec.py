"""Tabular text encoding of pattern grids.

Format: one line per grid row, cells separated by commas, no header and no
quoting. A cell is ``TRANSPARENT`` (or empty) for external positions and
``#RRGGBB`` otherwise. The token vocabulary is closed, so commas can never
appear inside a value.

Decoding is all-or-nothing: the first malformed row or field raises and no
partial grid is returned.
"""

import asyncio
import logging
import os
import re
from dataclasses import dataclass
from typing import List, Union

from bead_pattern.errors import (
    CsvReadError,
    EmptyInput,
    InvalidColorToken,
    RowLengthMismatch,
)
from bead_pattern.grid import Cell, Grid
from bead_pattern.types import TRANSPARENT_KEY

logger = logging.getLogger(__name__)

DELIMITER = ","
_TOKEN_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class DecodedGrid:
    grid: Grid
    width: int
    height: int


def encode(grid: Grid) -> str:
    """Serialize ``grid`` to CSV text (no trailing newline)."""
    lines: List[str] = []
    for row in grid.rows:
        lines.append(
            DELIMITER.join(
                TRANSPARENT_KEY if cell.is_external else cell.color.upper()
                for cell in row
            )
        )
    return "\n".join(lines)


def _decode_token(value: str, row: int, col: int) -> Cell:
    if value == TRANSPARENT_KEY or value == "":
        return Cell.external()
    if not _TOKEN_RE.match(value):
        raise InvalidColorToken(row=row, col=col, value=value)
    return Cell.from_hex(value)


def decode(text: str) -> DecodedGrid:
    """Parse CSV text into a validated grid.

    Raises:
        EmptyInput: The text holds no rows.
        RowLengthMismatch: A row's field count differs from the first row's.
        InvalidColorToken: A field is not ``TRANSPARENT``, empty or ``#RRGGBB``.
    """
    stripped = text.strip()
    if not stripped:
        raise EmptyInput()
    lines = stripped.splitlines()

    expected = len(lines[0].split(DELIMITER))
    rows: List[List[Cell]] = []
    for y, line in enumerate(lines):
        fields = line.split(DELIMITER)
        if len(fields) != expected:
            raise RowLengthMismatch(row=y, expected=expected, actual=len(fields))
        rows.append([_decode_token(f.strip(), y, x) for x, f in enumerate(fields)])

    grid = Grid.from_rows(rows)
    logger.debug("Decoded CSV grid %dx%d", grid.width, grid.height)
    return DecodedGrid(grid=grid, width=grid.width, height=grid.height)


# UTF-8 with an optional leading BOM.
ENCODING = "utf-8-sig"


def decode_bytes(data: bytes, source: str = "<bytes>") -> DecodedGrid:
    """Decode raw file contents (UTF-8, optional BOM) and parse them.

    Raises:
        CsvReadError: ``data`` is not UTF-8 text.
        CsvDecodeError: The content is malformed (see :func:`decode`).
    """
    try:
        text = data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise CsvReadError(f"{source} is not UTF-8 text: {e}") from e
    return decode(text)


def _read_bytes(path: Union[str, "os.PathLike[str]"]) -> bytes:
    with open(path, "rb") as f:
        return f.read()


async def import_csv(path: Union[str, "os.PathLike[str]"]) -> DecodedGrid:
    """Read ``path`` off the event loop and decode it.

    Resolves with a fully validated grid or raises exactly once.

    Raises:
        CsvReadError: The file could not be read.
        CsvDecodeError: The content is malformed (see :func:`decode`).
    """
    try:
        data = await asyncio.to_thread(_read_bytes, path)
    except OSError as e:
        raise CsvReadError(f"Failed to read {os.fspath(path)}: {e}") from e
    return decode_bytes(data, source=os.fspath(path))
