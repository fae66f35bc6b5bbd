# symmlines

Find the lines of symmetry of a finite set of points in the plane.

A line is a line of symmetry when reflecting each point of the set across it
gives another point of the set. Lines are given in the form
`a*x + b*y + c = 0`. Coordinates are compared with an absolute tolerance of
`1e-9` (`symmlines.util.EPSILON`), which absorbs floating-point rounding.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from symmlines.model import Point
from symmlines.alg import get_lines_of_sym

points = {Point(1.0, 0.0), Point(0.0, 1.0), Point(2.0, 0.0), Point(0.0, 2.0)}
for line in get_lines_of_sym(points, True):
    print(line.a, line.b, line.c)
```

`get_lines_of_sym(points, high_degree_expected=True)` takes any iterable of
`Point` objects and returns a set of `Line` objects.

- Candidate lines are the perpendicular bisectors of pairs of points.
- `high_degree_expected` is a hint about the input, not a switch on the
  result. When it is `True` (or `None`), a rejected candidate line is still
  checked against every point, so the pairs it mirrors are not tried again.
  When it is `False`, checking a candidate stops at the first point whose
  reflection is missing.
- With fewer than two distinct points, the result is an empty set and a
  `UserWarning` is issued through the `warnings` module.
- If no bisector turns out to be a line of symmetry and all the points lie on
  one line, that line is returned.

Other helpers in `symmlines.alg`:

- `get_equidistant_line(p1, p2)` returns the perpendicular bisector of two
  points.
- `get_through_line(p1, p2)` returns the line through two points.

In `symmlines.model`:

- `Point(x, y)` is immutable and raises `ValueError` for NaN or infinite
  coordinates. Points compare equal when both coordinates agree within the
  tolerance; `<`, `<=`, `>`, `>=` order by `x`, then `y`, with the same
  tolerance, and `Point.compare(other)` returns `-1`, `0` or `1`.
- `Line(a, b, c)` is immutable. `Line.reflect(p)` returns the mirror image of
  a point (raising `ValueError` if `a` and `b` are both zero),
  `Line.is_point_on_line(p)` tells whether a point satisfies the equation
  within tolerance, and lines compare equal when their coefficients agree
  within tolerance. The hash rounds coefficients to the tolerance.
- `UnorderedPointPair(p1, p2)` stores two points in ascending order, so the
  pair is the same whichever order the points are given in.

`symmlines.util` holds the tolerant comparisons: `float_cmp_tolerance`,
`floats_equal_toler` and `floats_lt_toler`.

## Command line

```
symmlines
```

The command runs a few built-in sample point sets and prints, for each one,
the points and the lines of symmetry found, with coefficients to four decimal
places. It takes no options other than `-h`/`--help`, and it does not read
points from files or from standard input.