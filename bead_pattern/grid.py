"""Immutable pattern grid value objects.

A :class:`Grid` is produced upstream (quantizer, CSV import, editor) and is
only read by this package. Rows are stored as persistent vectors so a grid can
be shared between the CSV and raster paths without defensive copies.

Design notes:

* ``Cell`` validates its own invariant: external cells are always the
    canonical ``TRANSPARENT`` / ``#FFFFFF`` pair, internal cells always carry
    an uppercase ``#RRGGBB`` color.
* ``Grid`` checks that every row has ``width`` cells and that there are
    ``height`` rows. A 0x0 grid is representable; exporters reject it.
* The color tally is a persistent map keyed by cell key, counting internal
    cells only.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from pyrsistent import PMap, PVector, pmap, pvector

from bead_pattern.errors import InputInvalid
from bead_pattern.types import EXTERNAL_COLOR, TRANSPARENT_KEY, HexColor

HEX_COLOR_RE = re.compile(r"^#[0-9A-F]{6}$")


@dataclass(frozen=True)
class Cell:
    """One grid position.

    Attributes:
        key: Color identifier (uppercase), ``TRANSPARENT`` for external cells.
        color: ``#RRGGBB`` uppercase hex.
        is_external: True for background/transparent positions.
    """

    key: str
    color: HexColor
    is_external: bool = False

    def __post_init__(self) -> None:
        if self.is_external:
            if self.key != TRANSPARENT_KEY or self.color != EXTERNAL_COLOR:
                raise InputInvalid(
                    f"External cell must be {TRANSPARENT_KEY}/{EXTERNAL_COLOR}, "
                    f"got {self.key}/{self.color}"
                )
            return
        if not HEX_COLOR_RE.match(self.color):
            raise InputInvalid(f"Invalid cell color: {self.color!r}")
        if not self.key:
            raise InputInvalid("Internal cell has an empty key")

    @classmethod
    def external(cls) -> "Cell":
        return cls(key=TRANSPARENT_KEY, color=EXTERNAL_COLOR, is_external=True)

    @classmethod
    def from_hex(cls, token: str) -> "Cell":
        """Internal cell keyed by its own uppercase hex value."""
        color = token.upper()
        return cls(key=color, color=color)


@dataclass(frozen=True)
class Grid:
    """Rectangular grid of cells, ``rows[y][x]``.

    Attributes:
        rows: Persistent vector of rows, each a persistent vector of cells.
        width: Column count (N).
        height: Row count (M).
    """

    rows: PVector[PVector[Cell]]
    width: int
    height: int

    def __post_init__(self) -> None:
        if len(self.rows) != self.height:
            raise InputInvalid(
                f"Grid declares {self.height} rows but holds {len(self.rows)}"
            )
        for y, row in enumerate(self.rows):
            if len(row) != self.width:
                raise InputInvalid(
                    f"Row {y + 1} has {len(row)} cells, expected {self.width}"
                )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Grid":
        frozen = pvector(pvector(row) for row in rows)
        width = len(frozen[0]) if frozen else 0
        return cls(rows=frozen, width=width, height=len(frozen))

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.rows[y][x]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(x, y, cell)`` in row-major order."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                yield x, y, cell


@dataclass(frozen=True)
class ColorCount:
    count: int
    color: HexColor


ColorTally = PMap[str, ColorCount]


def tally_colors(grid: Grid) -> ColorTally:
    """Count internal cells by key."""
    counts: dict[str, ColorCount] = {}
    for _, _, cell in grid.cells():
        if cell.is_external:
            continue
        prev = counts.get(cell.key)
        counts[cell.key] = ColorCount(
            count=(prev.count if prev else 0) + 1, color=cell.color
        )
    return pmap(counts)


def total_count(tally: ColorTally) -> int:
    return sum(entry.count for entry in tally.values())
