import pytest

from tuigeom.errors import GeometryError
from tuigeom.linesegment import LineSegment
from tuigeom.point import U32_MAX, Point
from tuigeom.shapes import Expanse, Line, Rect


def test_carve():
    r = Rect.new(5, 5, 10, 10)
    assert r.carve_hstart(2) == (Rect.new(5, 5, 2, 10), Rect.new(7, 5, 8, 10))
    assert r.carve_hstart(20) == (Rect.new(5, 5, 0, 10), Rect.new(5, 5, 10, 10))
    assert r.carve_hend(2) == (Rect.new(5, 5, 8, 10), Rect.new(13, 5, 2, 10))
    assert r.carve_hend(20) == (Rect.new(5, 5, 10, 10), Rect.new(15, 5, 0, 10))
    assert r.carve_vstart(2) == (Rect.new(5, 5, 10, 2), Rect.new(5, 7, 10, 8))
    assert r.carve_vstart(20) == (Rect.new(5, 5, 10, 0), Rect.new(5, 5, 10, 10))
    assert r.carve_vend(2) == (Rect.new(5, 5, 10, 8), Rect.new(5, 13, 10, 2))
    assert r.carve_vend(20) == (Rect.new(5, 5, 10, 10), Rect.new(5, 15, 10, 0))


def test_intersect():
    r = Rect.new(10, 10, 10, 10)
    r2 = Rect.new(11, 11, 2, 2)
    assert r.intersect(r2) == r2
    assert r2.intersect(r) == r2
    assert r.intersect(r) == r
    assert r.intersect(Rect.new(9, 9, 3, 3)) == Rect.new(10, 10, 2, 2)
    assert r.intersect(Rect.new(19, 19, 3, 3)) == Rect.new(19, 19, 1, 1)


def test_intersect_disjoint():
    assert Rect.new(0, 0, 5, 5).intersect(Rect.new(10, 10, 5, 5)) is None


def test_inner():
    assert Rect.new(0, 0, 10, 10).inner(1) == Rect.new(1, 1, 8, 8)


def test_inner_too_large_border():
    assert Rect.new(3, 3, 4, 4).inner(3) == Rect.zero()


def test_contains():
    r = Rect.new(10, 10, 10, 10)
    assert r.contains_point((10, 10))
    assert not r.contains_point((9, 10))
    assert not r.contains_point((20, 20))
    assert r.contains_point((19, 19))
    assert not r.contains_point((20, 21))

    assert r.contains_rect(Rect.new(10, 10, 1, 1))
    assert r.contains_rect(Rect.new(10, 10, 0, 0))
    assert r.contains_rect(r)

    assert Rect.new(0, 0, 0, 0).contains_point((0, 0))


def test_contains_rect_partial():
    r = Rect.new(10, 10, 10, 10)
    assert not r.contains_rect(Rect.new(15, 15, 10, 10))


def test_rebase_point():
    r = Rect.new(10, 10, 10, 10)
    assert r.rebase_point((11, 11)) == Point(1, 1)
    assert r.rebase_point((10, 10)) == Point(0, 0)
    with pytest.raises(GeometryError):
        r.rebase_point((9, 9))


def test_rebase_rect():
    r = Rect.new(10, 10, 10, 10)
    assert r.rebase_rect(Rect.new(12, 13, 3, 4)) == Rect.new(2, 3, 3, 4)
    with pytest.raises(GeometryError):
        r.rebase_rect(Rect.new(15, 15, 10, 10))


def test_shift():
    assert Rect.new(5, 5, 10, 10).shift(-10, -10) == Rect.new(0, 0, 10, 10)
    assert Rect.new(U32_MAX - 5, U32_MAX - 5, 10, 10).shift(10, 10) == Rect.new(
        U32_MAX, U32_MAX, 10, 10
    )


def test_clamp_within():
    outer = Rect.new(10, 10, 10, 10)
    assert Rect.new(11, 11, 5, 5).clamp_within(outer) == Rect.new(11, 11, 5, 5)
    assert Rect.new(19, 19, 5, 5).clamp_within(outer) == Rect.new(15, 15, 5, 5)
    assert Rect.new(5, 5, 5, 5).clamp_within(outer) == Rect.new(10, 10, 5, 5)


def test_clamp_within_smaller_raises():
    with pytest.raises(GeometryError):
        Rect.new(0, 0, 10, 10).clamp_within(Rect.new(0, 0, 5, 5))


def test_clamp_within_expanse():
    assert Rect.new(8, 8, 4, 4).clamp_within(Expanse(10, 10)) == Rect.new(6, 6, 4, 4)


def test_shift_within():
    r = Rect.new(10, 10, 5, 5)
    assert r.shift_within(1, 1, Rect.new(10, 10, 10, 10)) == Rect.new(11, 11, 5, 5)
    assert r.shift_within(10, 10, Rect.new(10, 10, 10, 10)) == Rect.new(15, 15, 5, 5)
    assert r.shift_within(1, 1, Rect.new(10, 10, 2, 2)) == r


def test_point_scroll_within():
    p = Point(15, 15)
    bounds = Rect.new(10, 10, 10, 10)
    assert p.scroll_within(-10, -10, bounds) == Point(10, 10)
    assert p.scroll_within(10, 10, bounds) == Point(20, 20)
    assert p.scroll_within(1, 0, bounds) == Point(16, 15)


def test_slices_and_extents():
    r = Rect.new(5, 6, 10, 8)
    assert r.hextent() == LineSegment(5, 10)
    assert r.vextent() == LineSegment(6, 8)
    assert r.hslice(LineSegment(7, 3)) == Rect.new(7, 6, 3, 8)
    assert r.vslice(LineSegment(8, 2)) == Rect.new(5, 8, 10, 2)
    with pytest.raises(GeometryError):
        r.hslice(LineSegment(0, 3))
    with pytest.raises(GeometryError):
        r.vslice(LineSegment(10, 10))


def test_line():
    r = Rect.new(2, 3, 7, 4)
    assert r.line(0) == Line.new(2, 3, 7)
    assert r.line(2) == Line.new(2, 5, 7)
    with pytest.raises(GeometryError):
        r.line(5)


def test_zero_area_at_expanse():
    assert Rect.zero() == Rect.new(0, 0, 0, 0)
    assert Rect.zero().is_zero()
    assert Rect.new(1, 1, 3, 4).area() == 12
    assert not Rect.new(1, 1, 3, 4).is_zero()
    assert Rect.new(1, 1, 3, 4).at((7, 8)) == Rect.new(7, 8, 3, 4)
    assert Rect.new(1, 1, 3, 4).expanse() == Expanse(3, 4)


def test_expanse():
    e = Expanse(4, 5)
    assert e.area() == 20
    assert e.rect() == Rect.new(0, 0, 4, 5)
    assert e.contains(Expanse(4, 5))
    assert e.contains(Expanse(1, 1))
    assert not e.contains(Expanse(5, 1))
    assert Expanse.from_rect(Rect.new(9, 9, 2, 3)) == Expanse(2, 3)
    assert Expanse() == Expanse(0, 0)


def test_line_rect():
    line = Line.new(3, 4, 6)
    assert line.rect() == Rect.new(3, 4, 6, 1)
    assert Line() == Line.new(0, 0, 0)