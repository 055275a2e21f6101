"""Reading point sets from whitespace-separated text files."""

from __future__ import annotations

import os

from .data import Data
from .point import Point


def parse_file(path: str | os.PathLike[str]) -> Data:
    """Read two numbers per non-blank line and return them as points.

    Raises ``OSError`` when the file cannot be opened and ``ValueError``
    when a line does not start with two numbers.
    """
    points = []
    with open(path, encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            fields = line.split()
            if not fields:
                continue
            try:
                x, y = float(fields[0]), float(fields[1])
            except (IndexError, ValueError) as exc:
                raise ValueError(
                    f"line {line_number}: expected two numbers, got {line.strip()!r}"
                ) from exc
            points.append(Point(x, y))
    return Data(points)