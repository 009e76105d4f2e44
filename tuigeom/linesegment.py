"""Directionless one-dimensional line segments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import GeometryError


@dataclass(frozen=True)
class LineSegment:
    """A segment starting at ``off`` and extending ``len`` units."""

    off: int = 0
    len: int = 0

    def far(self) -> int:
        """The far limit of the segment."""
        return self.off + self.len

    def enclose(self, other: LineSegment) -> LineSegment:
        """The smallest segment that encloses both this segment and ``other``."""
        off = min(self.off, other.off)
        return LineSegment(off, max(self.far(), other.far()) - off)

    def carve_start(self, n: int) -> Tuple[LineSegment, LineSegment]:
        """Carve ``n`` units from the start, returning ``(head, tail)``.

        If the segment is shorter than ``n``, the head has zero length.
        """
        if self.len < n:
            return LineSegment(self.off, 0), self
        return LineSegment(self.off, n), LineSegment(self.off + n, self.len - n)

    def carve_end(self, n: int) -> Tuple[LineSegment, LineSegment]:
        """Carve ``n`` units from the end, returning ``(head, tail)``.

        If the segment is shorter than ``n``, the tail has zero length.
        """
        if self.len < n:
            return self, LineSegment(self.far(), 0)
        head = LineSegment(self.off, self.len - n)
        return head, LineSegment(head.far(), n)

    def abuts(self, other: LineSegment) -> bool:
        """Are the two segments adjacent but non-overlapping?"""
        return self.far() == other.off or other.far() == self.off

    def contains(self, other: LineSegment) -> bool:
        """Does ``other`` lie completely within this segment?"""
        return self.off <= other.off and self.far() >= other.far()

    def intersects(self, other: LineSegment) -> bool:
        """Do the two segments share a non-empty stretch?"""
        return self.intersection(other) is not None

    def intersection(self, other: LineSegment) -> Optional[LineSegment]:
        """The overlap of the two segments, always of non-zero length, or None."""
        if self.len == 0 or other.len == 0:
            return None
        if self.contains(other):
            return other
        if other.contains(self):
            return self
        if self.off <= other.off < self.far():
            return LineSegment(other.off, self.far() - other.off)
        if other.off <= self.off < other.far():
            return LineSegment(self.off, other.far() - self.off)
        return None

    def split_active(
        self, window: LineSegment, view: LineSegment
    ) -> Tuple[LineSegment, LineSegment, LineSegment]:
        """Split into ``(pre, active, post)`` by the position of ``window`` in ``view``.

        This is what sizes and places the active indicator of a scrollbar.
        """
        if window.len == 0:
            raise GeometryError("window cannot be zero length")
        if not view.contains(window):
            raise GeometryError(f"view {view!r} does not contain window {window!r}")

        pref = (window.off - view.off) / view.len
        postf = (view.far() - window.far()) / view.len
        lenf = float(self.len)

        # The active part is computed first so that its length does not
        # change with position under rounding.
        active = max(0, math.ceil(lenf - pref * lenf - postf * lenf))
        pre = max(0, math.floor(pref * lenf))
        post = max(0, int(lenf - active - pre))

        return (
            LineSegment(self.off, pre),
            LineSegment(self.off + pre, active),
            LineSegment(self.off + pre + active, post),
        )