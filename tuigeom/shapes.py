"""Sized shapes on the grid: expanses, horizontal lines and rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .errors import GeometryError
from .linesegment import LineSegment
from .point import Point

PointLike = Union[Point, Tuple[int, int]]


def _as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x, y)


@dataclass(frozen=True)
class Expanse:
    """A width and height with no location."""

    w: int = 0
    h: int = 0

    def area(self) -> int:
        """The area of this expanse."""
        return self.w * self.h

    def rect(self) -> Rect:
        """A rectangle of the same size located at the origin."""
        return Rect(Point(), self.w, self.h)

    def contains(self, other: Expanse) -> bool:
        """True if this expanse can completely enclose ``other`` in both dimensions."""
        return self.w >= other.w and self.h >= other.h

    @classmethod
    def from_rect(cls, rect: Rect) -> Expanse:
        """The size of ``rect``, discarding its location."""
        return cls(rect.w, rect.h)


@dataclass(frozen=True)
class Line:
    """A horizontal line, one cell high."""

    tl: Point = field(default_factory=Point)
    w: int = 0

    @classmethod
    def new(cls, x: int, y: int, w: int) -> Line:
        """A line starting at ``(x, y)`` with width ``w``."""
        return cls(Point(x, y), w)

    def rect(self) -> Rect:
        """The rectangle of height one covered by this line."""
        return Rect(self.tl, self.w, 1)


RectLike = Union["Rect", Expanse, Line, Tuple[int, int, int, int]]


def _as_rect(r: RectLike) -> Rect:
    if isinstance(r, Rect):
        return r
    if isinstance(r, Expanse):
        return r.rect()
    if isinstance(r, Line):
        return r.rect()
    x, y, w, h = r
    return Rect.new(x, y, w, h)


@dataclass(frozen=True)
class Rect:
    """A rectangle with a top-left corner, a width and a height."""

    tl: Point = field(default_factory=Point)
    w: int = 0
    h: int = 0

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> Rect:
        """A rectangle with its top left at ``(x, y)``."""
        return cls(Point(x, y), w, h)

    @classmethod
    def zero(cls) -> Rect:
        """A zero-sized rectangle at the origin."""
        return cls(Point(), 0, 0)

    def area(self) -> int:
        """The width times the height."""
        return self.w * self.h

    def at(self, p: PointLike) -> Rect:
        """A rectangle of the same size with its top left at ``p``."""
        return Rect(_as_point(p), self.w, self.h)

    def carve_hstart(self, width: int) -> Tuple[Rect, Rect]:
        """Carve ``width`` columns from the left, returning ``(left, right)``.

        Left is either empty or exactly ``width`` wide.
        """
        head, tail = self.hextent().carve_start(width)
        return self.hslice(head), self.hslice(tail)

    def carve_hend(self, width: int) -> Tuple[Rect, Rect]:
        """Carve ``width`` columns from the right, returning ``(left, right)``.

        Right is either empty or exactly ``width`` wide.
        """
        head, tail = self.hextent().carve_end(width)
        return self.hslice(head), self.hslice(tail)

    def carve_vstart(self, height: int) -> Tuple[Rect, Rect]:
        """Carve ``height`` rows from the top, returning ``(top, bottom)``.

        Top is either empty or exactly ``height`` high.
        """
        head, tail = self.vextent().carve_start(height)
        return self.vslice(head), self.vslice(tail)

    def carve_vend(self, height: int) -> Tuple[Rect, Rect]:
        """Carve ``height`` rows from the bottom, returning ``(top, bottom)``.

        Bottom is either empty or exactly ``height`` high.
        """
        head, tail = self.vextent().carve_end(height)
        return self.vslice(head), self.vslice(tail)

    def clamp_within(self, rect: RectLike) -> Rect:
        """Shift this rectangle so that it lies within ``rect``, keeping its size.

        Raises GeometryError if this rectangle is larger than ``rect``.
        """
        outer = _as_rect(rect)
        if outer.w < self.w or outer.h < self.h:
            raise GeometryError("can't clamp to smaller rectangle")
        bounds = Rect(outer.tl, max(0, outer.w - self.w), max(0, outer.h - self.h))
        return Rect(self.tl.clamp(bounds), self.w, self.h)

    def contains_point(self, p: PointLike) -> bool:
        """Does this rectangle contain the point?"""
        p = _as_point(p)
        if self.is_zero() and p.is_zero():
            return True
        return (
            self.tl.x <= p.x < self.tl.x + self.w
            and self.tl.y <= p.y < self.tl.y + self.h
        )

    def contains_rect(self, other: Rect) -> bool:
        """Does this rectangle completely enclose ``other``?

        A zero-sized rectangle whose origin lies within this one counts as contained.
        """
        if other.is_zero():
            return self.contains_point(other.tl)
        far = Point(
            max(0, other.tl.x + other.w - 1),
            max(0, other.tl.y + other.h - 1),
        )
        return self.contains_point(other.tl) and self.contains_point(far)

    def inner(self, border: int) -> Rect:
        """The rectangle inside a border of the given width, or a zero rect if none fits."""
        if self.w < border * 2 or self.h < border * 2:
            return Rect.zero()
        return Rect.new(
            self.tl.x + border,
            self.tl.y + border,
            self.w - border * 2,
            self.h - border * 2,
        )

    def hslice(self, e: LineSegment) -> Rect:
        """The columns of this rectangle covered by the horizontal segment ``e``."""
        if not self.hextent().contains(e):
            raise GeometryError("extract extent outside rectangle")
        return Rect.new(e.off, self.tl.y, e.len, self.h)

    def hextent(self) -> LineSegment:
        """The horizontal extent of this rectangle."""
        return LineSegment(self.tl.x, self.w)

    def vslice(self, e: LineSegment) -> Rect:
        """The rows of this rectangle covered by the vertical segment ``e``."""
        if not self.vextent().contains(e):
            raise GeometryError("extract extent outside rectangle")
        return Rect.new(self.tl.x, e.off, self.w, e.len)

    def vextent(self) -> LineSegment:
        """The vertical extent of this rectangle."""
        return LineSegment(self.tl.y, self.h)

    def intersect(self, other: Rect) -> Optional[Rect]:
        """The overlap of the two rectangles, or None if they do not overlap."""
        h = self.hextent().intersection(other.hextent())
        if h is None:
            return None
        v = self.vextent().intersection(other.vextent())
        if v is None:
            return None
        return Rect.new(h.off, v.off, h.len, v.len)

    def rebase_point(self, pt: PointLike) -> Point:
        """Express a contained point relative to this rectangle's origin."""
        pt = _as_point(pt)
        if not self.contains_point(pt):
            raise GeometryError("rebase of non-contained point")
        return Point(max(0, pt.x - self.tl.x), max(0, pt.y - self.tl.y))

    def rebase_rect(self, other: Rect) -> Rect:
        """Express a contained rectangle relative to this rectangle's origin."""
        if not self.contains_rect(other):
            raise GeometryError(
                f"rebase of non-contained rect - outer={self!r} inner={other!r}"
            )
        return Rect(self.rebase_point(other.tl), other.w, other.h)

    def shift(self, x: int, y: int) -> Rect:
        """Shift by an offset, saturating instead of under- or overflowing."""
        return Rect(self.tl.scroll(x, y), self.w, self.h)

    def shift_within(self, x: int, y: int, rect: Rect) -> Rect:
        """Shift by an offset, constrained to stay within ``rect``.

        If this rectangle is larger than ``rect``, it is returned unchanged.
        """
        if rect.w < self.w or rect.h < self.h:
            return self
        bounds = Rect(rect.tl, max(0, rect.w - self.w), max(0, rect.h - self.h))
        return Rect(self.tl.scroll_within(x, y, bounds), self.w, self.h)

    def line(self, off: int) -> Line:
        """The line at row offset ``off`` within this rectangle."""
        if off > self.h:
            raise GeometryError("offset exceeds rectangle height")
        return Line(Point(self.tl.x, self.tl.y + off), self.w)

    def is_zero(self) -> bool:
        """Does this rectangle have zero area?"""
        return self.area() == 0

    def expanse(self) -> Expanse:
        """The size of this rectangle, without its location."""
        return Expanse(self.w, self.h)