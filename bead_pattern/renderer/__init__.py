"""Rendering subpackage.

Turns a validated :class:`~bead_pattern.grid.Grid` plus its color tally into
an annotated pattern sheet suitable for manual crafting. The renderer focuses
on:

* A fixed paint order (title bar, axes, cells, separators, border, legend).
* Geometry taken entirely from a precomputed
  :class:`~bead_pattern.layout.LayoutPlan`; the surface is never resized.
* Lightweight Pillow + NumPy drawing, fast enough for grids of a few hundred
  cells per side.

See :mod:`bead_pattern.renderer.pattern` for the drawing routines.
"""
