"""Command that prints the lines of symmetry of a few sample point sets."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from symmlines.alg import get_lines_of_sym
from symmlines.model import Point

_SAMPLE_SETS = [
    {Point(1.0, 0.0), Point(0.0, 1.0), Point(2.0, 0.0), Point(0.0, 2.0)},
    {Point(1.0, 0.0), Point(0.0, 1.0), Point(2.0, 1.0), Point(1.0, 2.0)},
    {Point(-2.0, -1.0), Point(-1.0, -0.5), Point(0.0, 0.0), Point(3.0, 1.5)},
    {Point(0.0, 0.0)},
]


def main(argv: Sequence[str] | None = None) -> int:
    """Print each sample set and the lines of symmetry found for it."""
    parser = argparse.ArgumentParser(
        description="Print the lines of symmetry of built-in sample point sets."
    )
    parser.parse_args(argv)

    for number, points in enumerate(_SAMPLE_SETS, start=1):
        lines = get_lines_of_sym(points, True)
        print(f"Test case {number}:")
        print(f"  Points: {points!r}")
        for line in lines:
            print(f"  Line: a = {line.a:.4f}, b = {line.b:.4f}, c = {line.c:.4f}")
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())