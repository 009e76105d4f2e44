# tuigeom

Geometry for terminal user interfaces. Screen coordinates are whole,
non-negative cell positions, and every shape works in those terms. All
shapes are immutable dataclasses, so they compare by value and can be
used as dictionary keys.

## Modules

- `tuigeom.errors`: `GeometryError`, a `ValueError` raised when an
  operation cannot be carried out.
- `tuigeom.point`: `Point` (with `zero`, `is_zero`, `scroll`, `clamp`,
  `scroll_within` and `+`) and the `Direction` enum (`UP`, `DOWN`,
  `LEFT`, `RIGHT`). `scroll` saturates at 0 and at 2**32 - 1 instead of
  going out of range.
- `tuigeom.linesegment`: `LineSegment(off, len)` with `far`, `enclose`,
  `carve_start`, `carve_end`, `abuts`, `contains`, `intersects`,
  `intersection` and `split_active`, which divides a segment into
  `(pre, active, post)` parts the way a scrollbar is drawn.
- `tuigeom.shapes`: `Expanse` (a size with no location), `Line` (a
  one-row horizontal line) and `Rect`. `Rect` offers carving
  (`carve_hstart`, `carve_hend`, `carve_vstart`, `carve_vend`),
  `clamp_within`, `contains_point`, `contains_rect`, `inner`, slicing by
  extent (`hslice`, `vslice`, `hextent`, `vextent`), `intersect`,
  `rebase_point`, `rebase_rect`, `shift`, `shift_within`, `line`,
  `is_zero` and `expanse`. Methods that take a point also accept an
  `(x, y)` tuple.
- `tuigeom.partition`: `split_length`, `split_horizontal`,
  `split_vertical` and `split_panes` divide space as evenly as possible,
  larger parts first; `subtract` returns what is left of one rectangle
  after removing another; `search_up`, `search_down`, `search_left`,
  `search_right` and `search` sweep outward from a rectangle, calling a
  function on each point until it returns `True`.
- `tuigeom.frame`: `Frame.new(rect, border)` cuts the four edges and four
  corners of a border from a rectangle; `inner()` gives the space inside
  and `outer()` the rectangle it was built from. A rectangle too small
  for the border yields a frame whose parts are all zero-sized.

Errors are raised by `LineSegment.split_active`, `Rect.clamp_within`,
`Rect.hslice`, `Rect.vslice`, `Rect.rebase_point`, `Rect.rebase_rect`,
`Rect.line` (offset beyond the height) and the splitting functions when
asked for zero parts.

## Installation

```
pip install .
```

## Example

```python
from tuigeom.shapes import Rect
from tuigeom.partition import split_horizontal
from tuigeom.frame import Frame

screen = Rect.new(0, 0, 80, 24)
body, status = screen.carve_vend(1)
left, right = split_horizontal(body, 2)

frame = Frame.new(left, 1)
content = frame.inner()
```

## Notes

`search_down` and `search_right` have no bound other than the largest
coordinate, so the function passed to them should return `True` once it
leaves the area of interest.

## What it does not do

This is a geometry library only. It does not draw to a terminal, read
keys or mouse events, lay out widgets or keep any screen state; it
provides the arithmetic such a program is built on.

## Running the tests

```
pip install .[test]
pytest
```