"""Points on an unsigned integer grid, and the four cardinal directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

U32_MAX = 2**32 - 1


class Direction(enum.Enum):
    """A cardinal direction on the grid."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class _RectLike(Protocol):
    tl: Point
    w: int
    h: int


def _saturate(value: int) -> int:
    """Constrain a value to the unsigned 32-bit range."""
    return max(0, min(U32_MAX, value))


@dataclass(frozen=True)
class Point:
    """A location on the grid with non-negative coordinates."""

    x: int = 0
    y: int = 0

    @classmethod
    def zero(cls) -> Point:
        """The origin."""
        return cls(0, 0)

    def is_zero(self) -> bool:
        """True if this point is the origin."""
        return self.x == 0 and self.y == 0

    def scroll(self, x: int, y: int) -> Point:
        """Shift the point by an offset, saturating instead of under- or overflowing."""
        return Point(_saturate(self.x + x), _saturate(self.y + y))

    def clamp(self, rect: _RectLike) -> Point:
        """Constrain the point to lie within the bounds of ``rect``, edges inclusive."""
        lo_x, lo_y = rect.tl.x, rect.tl.y
        return Point(
            min(max(self.x, lo_x), lo_x + rect.w),
            min(max(self.y, lo_y), lo_y + rect.h),
        )

    def scroll_within(self, x: int, y: int, rect: _RectLike) -> Point:
        """Like :meth:`scroll`, but constrained within ``rect``."""
        return self.scroll(x, y).clamp(rect)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)