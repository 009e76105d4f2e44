"""Borders extracted from rectangles."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .shapes import Rect


@dataclass(frozen=True)
class Frame:
    """The edges and corners of a border of fixed width around a rectangle."""

    top: Rect = field(default_factory=Rect.zero)
    bottom: Rect = field(default_factory=Rect.zero)
    left: Rect = field(default_factory=Rect.zero)
    right: Rect = field(default_factory=Rect.zero)
    topleft: Rect = field(default_factory=Rect.zero)
    topright: Rect = field(default_factory=Rect.zero)
    bottomleft: Rect = field(default_factory=Rect.zero)
    bottomright: Rect = field(default_factory=Rect.zero)
    outer_rect: Rect = field(default_factory=Rect.zero)
    border: int = 0

    @classmethod
    def new(cls, rect: Rect, border: int) -> Frame:
        """A frame of width ``border`` around ``rect``.

        If the rectangle is too small for the border, every part is zero-sized.
        """
        if rect.w <= border * 2 or rect.h <= border * 2:
            return dataclasses.replace(cls.zero(), outer_rect=rect, border=border)
        x, y, w, h = rect.tl.x, rect.tl.y, rect.w, rect.h
        return cls(
            top=Rect.new(x + border, y, w - 2 * border, border),
            bottom=Rect.new(x + border, y + h - border, w - 2 * border, border),
            left=Rect.new(x, y + border, border, h - 2 * border),
            right=Rect.new(x + w - border, y + border, border, h - 2 * border),
            topleft=Rect.new(x, y, border, border),
            topright=Rect.new(x + w - border, y, border, border),
            bottomleft=Rect.new(x, y + h - border, border, border),
            bottomright=Rect.new(x + w - border, y + h - border, border, border),
            outer_rect=rect,
            border=border,
        )

    @classmethod
    def zero(cls) -> Frame:
        """A frame with every part zero-sized."""
        return cls()

    def inner(self) -> Rect:
        """The space inside the frame, or a zero rect if the border leaves none."""
        outer, border = self.outer_rect, self.border
        if outer.w <= border * 2 or outer.h <= border * 2:
            return Rect.zero()
        return Rect.new(
            outer.tl.x + border,
            outer.tl.y + border,
            outer.w - 2 * border,
            outer.h - 2 * border,
        )

    def outer(self) -> Rect:
        """The rectangle the frame was built from."""
        return self.outer_rect