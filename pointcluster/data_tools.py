"""Helpers that turn point coordinates into transformed value lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .data import Data


def convert_x(data: Data, operation: Callable[[float], float]) -> list[float]:
    """Apply ``operation`` to every x coordinate of ``data``."""
    return [operation(value) for value in data.xs()]


def convert_y(data: Data, operation: Callable[[float], float]) -> list[float]:
    """Apply ``operation`` to every y coordinate of ``data``."""
    return [operation(value) for value in data.ys()]


def convert_axis(
    values: Iterable[float], operation: Callable[[float], float]
) -> list[float]:
    """Apply ``operation`` to every value, returning a new list."""
    return [operation(value) for value in values]