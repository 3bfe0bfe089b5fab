"""bead_pattern
=================

Serialization, rendering and delivery for bead / pixel patterns.

A pattern is an immutable :class:`~bead_pattern.grid.Grid` of color cells
produced elsewhere (image quantizer, editor, CSV import). This package turns
it into two artifacts:

* a round-trippable CSV encoding (:mod:`bead_pattern.csv_codec`), and
* an annotated PNG sheet with axes, group separators and a color legend
    (:mod:`bead_pattern.layout`, :mod:`bead_pattern.renderer`), delivered by
    :mod:`bead_pattern.export`.

Typical use::

    from bead_pattern import RenderOptions, tally_colors
    from bead_pattern.csv_codec import decode
    from bead_pattern.export import FileDownloadPort, export_image
    from bead_pattern.palette import HexResolver

    decoded = decode(text)
    export_image(decoded.grid, tally_colors(decoded.grid), RenderOptions(),
                 "hex", HexResolver(), FileDownloadPort("out"))
"""

from .errors import ExportError, InputInvalid
from .grid import Cell, ColorCount, ColorTally, Grid, tally_colors, total_count
from .options import RenderOptions

__all__ = [
    "Cell",
    "ColorCount",
    "ColorTally",
    "ExportError",
    "Grid",
    "InputInvalid",
    "RenderOptions",
    "tally_colors",
    "total_count",
]
