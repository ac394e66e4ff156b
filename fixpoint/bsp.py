"""Point-in-triangle test by comparing triangle areas."""

from __future__ import annotations

from fixpoint.fixed import _f32
from fixpoint.point import Point


class DegenerateTriangleError(ValueError):
    """Raised when three points do not span a triangle."""


def area_of_triangle(a: Point, b: Point, c: Point) -> float:
    """Area of the triangle abc, computed in single precision."""
    ax, ay = a.x.to_float(), a.y.to_float()
    bx, by = b.x.to_float(), b.y.to_float()
    cx, cy = c.x.to_float(), c.y.to_float()

    side1 = _f32(ax * _f32(by - cy))
    side2 = _f32(bx * _f32(cy - ay))
    side3 = _f32(cx * _f32(ay - by))
    total = _f32(_f32(side1 + side2) + side3)
    return _f32(0.5 * abs(total))


def bsp(a: Point, b: Point, c: Point, point: Point) -> bool:
    """Tell whether ``point`` lies in the triangle abc.

    The point is inside when the three sub-triangles it forms with the
    sides add up exactly to the whole triangle's area.
    """
    area_abc = area_of_triangle(a, b, c)
    if not area_abc:
        raise DegenerateTriangleError("These points do not form a triangle!")

    area_pab = area_of_triangle(point, a, b)
    area_pbc = area_of_triangle(point, b, c)
    area_pca = area_of_triangle(point, c, a)
    return area_abc == _f32(_f32(area_pab + area_pbc) + area_pca)