"""Splitting, subtracting and sweeping searches over rectangles."""

from __future__ import annotations

from typing import Callable, List, Sequence

from .errors import GeometryError
from .point import U32_MAX, Direction, Point
from .shapes import Rect

SearchFn = Callable[[Point], bool]


def split_length(length: int, n: int) -> List[int]:
    """Split ``length`` into ``n`` parts as evenly as possible, larger parts first."""
    if n == 0:
        raise GeometryError("divide by zero")
    base, rem = divmod(length, n)
    return [base + 1 if i < rem else base for i in range(n)]


def split_horizontal(rect: Rect, n: int) -> List[Rect]:
    """Split ``rect`` into ``n`` side-by-side columns of near-equal width."""
    parts = []
    off = rect.tl.x
    for width in split_length(rect.w, n):
        parts.append(Rect.new(off, rect.tl.y, width, rect.h))
        off += width
    return parts


def split_vertical(rect: Rect, n: int) -> List[Rect]:
    """Split ``rect`` into ``n`` stacked rows of near-equal height."""
    parts = []
    off = rect.tl.y
    for height in split_length(rect.h, n):
        parts.append(Rect.new(rect.tl.x, off, rect.w, height))
        off += height
    return parts


def split_panes(rect: Rect, spec: Sequence[int]) -> List[List[Rect]]:
    """Split ``rect`` into columns, each column into ``spec[i]`` rows."""
    columns = []
    x = rect.tl.x
    for width, rows in zip(split_length(rect.w, len(spec)), spec):
        column = []
        y = rect.tl.y
        for height in split_length(rect.h, rows):
            column.append(Rect.new(x, y, width, height))
            y += height
        columns.append(column)
        x += width
    return columns


def subtract(rect: Rect, other: Rect) -> List[Rect]:
    """Subtract ``other`` from ``rect``, returning the non-empty pieces that remain."""
    if other == rect:
        return []
    isec = rect.intersect(other)
    if isec is None:
        return [rect]
    pieces = [
        # Left
        Rect(rect.tl, max(0, isec.tl.x - rect.tl.x), rect.h),
        # Right
        Rect(
            Point(isec.tl.x + isec.w, rect.tl.y),
            max(0, rect.tl.x + rect.w - (isec.tl.x + isec.w)),
            rect.h,
        ),
        # Top
        Rect(Point(isec.tl.x, rect.tl.y), isec.w, max(0, isec.tl.y - rect.tl.y)),
        # Bottom
        Rect(
            Point(isec.tl.x, isec.tl.y + isec.h),
            isec.w,
            max(0, rect.tl.x + rect.h - (isec.tl.y + isec.h)),
        ),
    ]
    return [p for p in pieces if not p.is_zero()]


def search_up(rect: Rect, f: SearchFn) -> None:
    """Sweep upwards from the top of ``rect`` until ``f`` returns True."""
    for y in range(rect.tl.y - 1, -1, -1):
        for x in range(rect.tl.x, rect.tl.x + rect.w):
            if f(Point(x, y)):
                return


def search_down(rect: Rect, f: SearchFn) -> None:
    """Sweep downwards from the bottom of ``rect`` until ``f`` returns True."""
    for y in range(rect.tl.y + rect.h, U32_MAX):
        for x in range(rect.tl.x, rect.tl.x + rect.w):
            if f(Point(x, y)):
                return


def search_left(rect: Rect, f: SearchFn) -> None:
    """Sweep leftwards from the left of ``rect`` until ``f`` returns True."""
    for x in range(rect.tl.x - 1, -1, -1):
        for y in range(rect.tl.y, rect.tl.y + rect.h):
            if f(Point(x, y)):
                return


def search_right(rect: Rect, f: SearchFn) -> None:
    """Sweep rightwards from the right of ``rect`` until ``f`` returns True."""
    for x in range(rect.tl.x + rect.w, U32_MAX):
        for y in range(rect.tl.y, rect.tl.y + rect.h):
            if f(Point(x, y)):
                return


_SEARCHES = {
    Direction.UP: search_up,
    Direction.DOWN: search_down,
    Direction.LEFT: search_left,
    Direction.RIGHT: search_right,
}


def search(rect: Rect, direction: Direction, f: SearchFn) -> None:
    """Sweep away from ``rect`` in ``direction`` until ``f`` returns True."""
    _SEARCHES[direction](rect, f)