"""Immutable points in the plane with fixed-point coordinates."""

from __future__ import annotations

from typing import Union

from fixpoint.fixed import Fixed

Coordinate = Union[int, float, Fixed]


class Point:
    """A point whose coordinates are fixed-point numbers and cannot change."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: Coordinate = 0, y: Coordinate = 0) -> None:
        self._x = Fixed(x)
        self._y = Fixed(y)

    @property
    def x(self) -> Fixed:
        """The horizontal coordinate (a copy)."""
        return Fixed(self._x)

    @property
    def y(self) -> Fixed:
        """The vertical coordinate (a copy)."""
        return Fixed(self._y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __str__(self) -> str:
        return f"x  = {self._x.to_float():g} y  = {self._y.to_float():g}"

    def __repr__(self) -> str:
        return f"Point({self._x.to_float():g}, {self._y.to_float():g})"