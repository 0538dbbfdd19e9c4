"""
Shared element cells.

A `Cell` is a mutable box holding one element value. Arrays never store values
directly; they hold ordered lists of cell references. Views produced by
indexing, slicing or reshaping reuse the *same* cell objects as their source,
so writing a cell's value is visible through every array that holds it.

Cell lifetime is ordinary Python reference counting: a cell is reclaimed when
the last array referencing it is released.
"""

from __future__ import annotations

from typing import Any, Iterable


class Cell:
    """
    Mutable box holding a single scalar element.

    Attributes
    ----------
    value : Any
        The stored element, a NumPy scalar of the owning array's dtype.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


def make_cells(values: Iterable[Any]) -> list[Cell]:
    """Allocate one new cell per value, in order."""
    return [Cell(v) for v in values]


def read_values(cells: Iterable[Cell]) -> list[Any]:
    """Dereference every cell, in order."""
    return [c.value for c in cells]
