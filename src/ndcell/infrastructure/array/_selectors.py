"""
Per-axis selectors used by the slicing protocol.

A slicing call is a sequence of selectors applied left-to-right to successive
axes. Each selector is one of two variants:

- `Index`: a single position; the axis is dropped from the result.
- `Range`: a half-open position range; the axis is kept.

`to_selector` converts the user-facing argument forms (ints, ``(start, end)``
pairs, Python ``slice`` objects) into these variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

import numpy as np

from ...domain._errors import ArrayIndexError


@dataclass(frozen=True)
class Index:
    """Select a single position along an axis."""

    position: int

    def resolve(self, axis_len: int) -> int:
        """
        Resolve a possibly negative position against `axis_len`.

        Raises
        ------
        ArrayIndexError
            If the position lies outside ``[-axis_len, axis_len)``.
        """
        i = self.position
        if i < -axis_len or i >= axis_len:
            raise ArrayIndexError(
                f"index {i} is out of bounds for axis 0 with size {axis_len}"
            )
        return i + axis_len if i < 0 else i


@dataclass(frozen=True)
class Range:
    """
    Select the half-open range ``[start, end)`` along an axis.

    Bounds follow Python slice semantics: negative values count from the end,
    ``None`` means "from the beginning"/"to the end", and out-of-range bounds
    are clamped instead of raising.
    """

    start: Optional[int] = None
    end: Optional[int] = None
    step: Optional[int] = None

    def positions(self, axis_len: int) -> range:
        """Return the selected positions for an axis of length `axis_len`."""
        if self.step == 0:
            raise ArrayIndexError("slice step cannot be zero")
        return range(*slice(self.start, self.end, self.step).indices(axis_len))


Selector = Union[Index, Range]


def _as_int(value: Any, what: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, np.integer)
    ):
        raise ArrayIndexError(f"{what} must be an integer or None, got {value!r}")
    return int(value)


def to_selector(arg: Any) -> Selector:
    """
    Convert one slicing argument into a selector.

    Accepted forms
    --------------
    - ``int`` / NumPy integer / integer rank-0 array -> `Index`
    - ``(start, end)`` pair -> `Range`
    - ``slice(start, stop, step)`` -> `Range`
    - `Index` / `Range` instances pass through

    Raises
    ------
    ArrayIndexError
        For any other argument type (booleans included).
    """
    if isinstance(arg, (Index, Range)):
        return arg
    if isinstance(arg, (bool, np.bool_)):
        raise ArrayIndexError("boolean indices are not supported")
    if isinstance(arg, (int, np.integer)):
        return Index(int(arg))
    if isinstance(arg, slice):
        return Range(
            _as_int(arg.start, "slice start"),
            _as_int(arg.stop, "slice stop"),
            _as_int(arg.step, "slice step"),
        )
    if isinstance(arg, tuple) and len(arg) == 2:
        return Range(_as_int(arg[0], "range start"), _as_int(arg[1], "range end"))
    if hasattr(arg, "__index__"):
        # integer scalar arrays
        return Index(arg.__index__())
    raise ArrayIndexError(
        "only integers, (start, end) pairs and slices are valid indices, "
        f"got {arg!r}"
    )
