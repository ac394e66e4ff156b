# fixpoint

Signed fixed-point numbers with 8 fractional bits, a 2-D `Point` built on
them, and a test for whether a point lies inside a triangle. No third-party
libraries are needed.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Fixed-point numbers

`fixpoint.fixed.Fixed` stores its value as an integer count of 1/256 steps.
Build one from an `int`, a `float` or another `Fixed` (a copy). Floats are
first taken to single precision, scaled by 256 and rounded to the nearest
step, halves away from zero. A non-finite float raises `ValueError`; any
other type raises `TypeError`.

```python
from fixpoint.fixed import Fixed

b = Fixed(42.42)
print(b)            # 42.4219
print(b.to_int())   # 42
print(b.raw)        # 10860, the scaled integer

c = Fixed.from_raw(1)   # the smallest step, 1/256
```

- `to_float()` (also `float(x)`) gives the value as a single-precision float;
  `str(x)` prints it in `%g` style.
- `to_int()` (also `int(x)`) gives the integer part, rounded toward negative
  infinity.
- `repr(x)` is `Fixed.from_raw(<raw>)`.

### Comparison and arithmetic

`==`, `!=`, `<`, `<=`, `>`, `>=`, `+`, `-` and `*` work between `Fixed`
values, and with a plain `int` or `float` on the right, which is turned into a
`Fixed` first. They are computed on the single-precision float values, and
arithmetic returns a new `Fixed`. `Fixed` values are hashable.

Division is reversed: `a / b` is `b` divided by `a`.

```python
print(Fixed(2) / Fixed(10))   # 5
```

Dividing by a zero left-hand operand raises `ZeroDivisionError`.

### Stepping

A value can be moved in place by one raw step (1/256):

```python
d = Fixed(0)
d.increment()            # d is now 1/256; returns d itself
old = d.post_increment() # returns a copy of the value before the step
d.decrement()
d.post_decrement()
```

`Fixed.min(x, y)` and `Fixed.max(x, y)` return one of their two arguments;
on a tie they return the first.

## Points and triangles

`fixpoint.point.Point(x, y)` holds two `Fixed` coordinates (given as `int`,
`float` or `Fixed`, default 0) that cannot be changed. The `x` and `y`
properties return copies. Points compare equal when both coordinates do, and
are hashable. `str(Point(2, 1))` is `x  = 2 y  = 1`.

```python
from fixpoint.point import Point
from fixpoint.bsp import area_of_triangle, bsp, DegenerateTriangleError

a, b, c = Point(0, 0), Point(4, 0), Point(2, 3)
print(area_of_triangle(a, b, c))   # 6.0
print(bsp(a, b, c, Point(2, 1)))   # True
print(bsp(a, b, c, Point(5, 5)))   # False
```

`bsp` counts a point as inside when the areas of the three triangles it
forms with the sides add up exactly, in single precision, to the area of the
whole triangle. It raises `DegenerateTriangleError` (a `ValueError`) when the
three corners have zero area.

## Command line

```
fixpoint
```

runs every demonstration in turn: raw bits, conversions, arithmetic and the
point-in-triangle test. One can be chosen by name:

```
fixpoint raw-bits
fixpoint conversions
fixpoint arithmetic
fixpoint bsp
fixpoint all
```

The `bsp` demonstration ends on a degenerate triangle on purpose: it prints
`Error: These points do not form a triangle!` and the command exits with
status 1. The other demonstrations exit with status 0.