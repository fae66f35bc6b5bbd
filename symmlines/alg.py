"""Finding the lines of symmetry of a finite set of points."""

from __future__ import annotations

import warnings
from collections.abc import Iterable
from itertools import combinations

from symmlines.model import Line, Point, UnorderedPointPair


def get_lines_of_sym(
    points: Iterable[Point], high_degree_expected: bool | None = True
) -> set[Line]:
    """Return every line across which the point set maps onto itself.

    ``high_degree_expected`` says whether many partial symmetries are likely;
    when true, a rejected candidate line is still scanned to its end so that
    the pairs it mirrors need not be tried again. ``None`` means true.
    Fewer than two points yield an empty set and a warning.
    """
    if high_degree_expected is None:
        high_degree_expected = True

    lookup: dict[Point, Point] = {}
    for point in points:
        lookup.setdefault(point, point)
    point_list = list(lookup)

    lines: set[Line] = set()
    if len(point_list) < 2:
        warnings.warn(
            "at least 2 points needed to find lines of symmetry", stacklevel=2
        )
        return lines

    generators = {UnorderedPointPair(p, q) for p, q in combinations(point_list, 2)}
    through_line_possible = True

    while generators:
        pair = generators.pop()
        candidate = get_equidistant_line(pair.p1, pair.p2)
        reflections: dict[Point, Point] = {pair.p1: pair.p2, pair.p2: pair.p1}
        valid = True

        for point in point_list:
            if point in reflections:
                continue
            image = candidate.reflect(point)
            if image == point:
                reflections[point] = point
                continue
            match = lookup.get(image)
            if match is not None:
                reflections[point] = match
                reflections[match] = point
                # This mirror pair is covered whether or not the line is valid.
                generators.discard(UnorderedPointPair(point, match))
            else:
                valid = False
                if not high_degree_expected:
                    break

        if valid:
            through_line_possible = False
            lines.add(candidate)

    # The only symmetry not found above is a line containing every point.
    if through_line_possible:
        first, second, *rest = point_list
        through = get_through_line(first, second)
        if all(through.is_point_on_line(p) for p in rest):
            lines.add(through)

    return lines


def get_equidistant_line(p1: Point, p2: Point) -> Line:
    """Return the perpendicular bisector of ``p1`` and ``p2``."""
    a = p2.x - p1.x
    b = p2.y - p1.y
    c = 0.5 * (p1.x**2 + p1.y**2 - p2.x**2 - p2.y**2)
    return Line(a, b, c)


def get_through_line(p1: Point, p2: Point) -> Line:
    """Return the line passing through ``p1`` and ``p2``."""
    a = p2.y - p1.y
    b = p1.x - p2.x
    c = -(a * p1.x + b * p1.y)
    return Line(a, b, c)