"""Command-line demonstrations of fixed-point numbers and the triangle test."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from fixpoint.bsp import DegenerateTriangleError, bsp
from fixpoint.fixed import Fixed
from fixpoint.point import Point


def demo_raw_bits(out: TextIO) -> int:
    """Show that default, copied and assigned numbers share raw bits 0."""
    a = Fixed()
    b = Fixed(a)
    c = Fixed()
    c = Fixed(b)
    for number in (a, b, c):
        print("getRawBits member function called", file=out)
        print(number.raw, file=out)
    return 0


def demo_conversions(out: TextIO) -> int:
    """Show conversions from int and float, and back to float and int."""
    b = Fixed(10)
    c = Fixed(42.42)
    d = Fixed(b)
    a = Fixed(1234.4321)
    named = (("a", a), ("b", b), ("c", c), ("d", d))
    for name, number in named:
        print(f"{name} is {number}", file=out)
    for name, number in named:
        print(f"{name} is {number.to_int()} as integer", file=out)
    return 0


def demo_arithmetic(out: TextIO) -> int:
    """Show comparison, arithmetic, increments and min."""
    a = Fixed(10.02)
    b = Fixed(10.03)
    print("true" if a >= b else "false", file=out)

    c = a + b
    print(f"C == {c}", file=out)

    d = a - b
    print(f"D == {d}", file=out)
    print(f"Pre-increment D == {d.increment()}", file=out)
    print(f"post-increment D == {d.post_increment()}", file=out)

    f = Fixed(5.05) * Fixed(2)
    print(f"F == {f}", file=out)
    print(f"the smallest one is == {Fixed.min(a, f)}", file=out)
    return 0


def demo_bsp(out: TextIO) -> int:
    """Run the triangle test on an inside, an outside and a degenerate case."""
    print("Point inside triangle", file=out)
    a1, b1, c1, p1 = Point(0, 0), Point(4, 0), Point(2, 3), Point(2, 1)
    print(f"The coordinates of the point are {p1}", file=out)
    if bsp(a1, b1, c1, p1):
        print("This point is on the inside of a triangle", file=out)
    else:
        print("This point is on the  outside of a triangle", file=out)

    print("Point outside triangle", file=out)
    a2, b2, c2, p2 = Point(0, 0), Point(4, 0), Point(2, 3), Point(5, 5)
    print(f"The coordinates of the points are {p2}", file=out)
    if bsp(a2, b2, c2, p2):
        print("This point is on the inside of a triangle", file=out)
    else:
        print("This point is on the outside of a triangle", file=out)

    origin = Point(0, 0)
    try:
        inside = bsp(origin, origin, origin, Point(4, 1))
    except DegenerateTriangleError as exc:
        print(f"Error: {exc}", file=out)
        return 1
    return 0 if inside else 1


_DEMOS = {
    "raw-bits": demo_raw_bits,
    "conversions": demo_conversions,
    "arithmetic": demo_arithmetic,
    "bsp": demo_bsp,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one demonstration, or all of them, and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="fixpoint", description="Fixed-point number demonstrations."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)

    selected = list(_DEMOS.values()) if args.demo == "all" else [_DEMOS[args.demo]]
    status = 0
    for demo in selected:
        status = max(status, demo(sys.stdout))
    return status


if __name__ == "__main__":
    raise SystemExit(main())