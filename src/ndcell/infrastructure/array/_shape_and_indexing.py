"""
Array shape, indexing, slicing and assignment mixin.

This module defines `ArrayShapeAndIndexingMixin`, a cohesive mixin that
implements the structural NDArray methods:

- axis-0 length (``len``/``__len__``)
- single-position indexing (``index``) and multi-axis slicing (``slice``),
  plus the ``[]`` sugar over both
- in-place assignment (``assign``/``__setitem__``)
- ``reshape``

Design notes
------------
- This mixin is intended to be inherited by the concrete `NDArray` class.
- To avoid circular imports, new arrays are constructed via ``type(self)``
  instead of importing `NDArray`.
- Every structural result is a *view*: it owns a fresh shape tuple and cell
  list, but the cells themselves are the source's cells. Mutating a view's
  cells therefore writes through to the source and to every overlapping view.
- Assignment never replaces a cell list; it overwrites cell values.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, Union

from ...domain._array import IArray, Number
from ...domain._errors import (
    ArrayIndexError,
    ArrayTypeError,
    ShapeMismatchError,
    format_shape,
)
from ._broadcast import broadcast_cells, normalize_shape, shape_size
from ._cell import Cell
from ._selectors import Index, Range, Selector, to_selector

logger = logging.getLogger(__name__)


class ArrayShapeAndIndexingMixin:
    """
    Shape and indexing operations for the concrete NDArray implementation.

    Notes
    -----
    Methods assume the host class provides:
        - ``.shape``, ``.ndim``, ``.size``, ``.dtype`` and ``._cells``
        - ``_from_cells(shape, cells, dtype)`` and ``_as_array_like(...)``
    """

    # ----------------------------
    # Length
    # ----------------------------
    def len(self: IArray) -> int:
        """
        Return the length of axis 0.

        Raises
        ------
        ArrayTypeError
            If the array is rank 0.
        """
        if self.ndim == 0:
            raise ArrayTypeError("scalar type has no len()")
        return self.shape[0]

    def __len__(self) -> int:
        return self.len()

    def __iter__(self):
        """Iterate over axis 0, yielding views."""
        for i in range(self.len()):
            yield self.index(i)

    # ----------------------------
    # Selection core
    # ----------------------------
    @staticmethod
    def _selected_shape(
        shape: tuple[int, ...], selectors: Sequence[Selector]
    ) -> tuple[int, ...]:
        """Shape produced by applying `selectors` to an array of `shape`."""
        out: list[int] = []
        for axis, sel in enumerate(selectors):
            if isinstance(sel, Range):
                out.append(len(sel.positions(shape[axis])))
        return tuple(out) + tuple(shape[len(selectors) :])

    @staticmethod
    def _select(
        shape: tuple[int, ...], cells: Sequence[Cell], selectors: Sequence[Selector]
    ) -> tuple[tuple[int, ...], list[Cell]]:
        """
        Resolve `selectors` against ``(shape, cells)``.

        Parameters
        ----------
        shape : tuple[int, ...]
            Shape of the array being selected from.
        cells : Sequence[Cell]
            Its cells, row-major.
        selectors : Sequence[Selector]
            Per-axis selectors, leading axis first. Must not outnumber axes.

        Returns
        -------
        tuple
            ``(result_shape, result_cells)``. The cells are the same objects
            as in `cells`.

        Notes
        -----
        An `Index` narrows to the contiguous block of that position and
        recurses on the remaining axes. A `Range` recurses once per selected
        position and concatenates the resulting cell lists in order.
        """
        if not selectors:
            return tuple(shape), list(cells)
        if not shape:
            raise ArrayIndexError("invalid index to scalar variable")

        head, rest = selectors[0], selectors[1:]
        sub_shape = tuple(shape[1:])
        inner = shape_size(sub_shape)

        if isinstance(head, Index):
            i = head.resolve(shape[0])
            return ArrayShapeAndIndexingMixin._select(
                sub_shape, cells[i * inner : (i + 1) * inner], rest
            )

        positions = head.positions(shape[0])
        out_cells: list[Cell] = []
        for p in positions:
            _, block = ArrayShapeAndIndexingMixin._select(
                sub_shape, cells[p * inner : (p + 1) * inner], rest
            )
            out_cells.extend(block)

        out_shape = (len(positions),) + ArrayShapeAndIndexingMixin._selected_shape(
            sub_shape, rest
        )
        return out_shape, out_cells

    # ----------------------------
    # Public indexing API
    # ----------------------------
    def index(self: IArray, i: int) -> IArray:
        """
        Select position `i` of axis 0.

        Parameters
        ----------
        i : int
            Position; negative values count from the end.

        Returns
        -------
        IArray
            View with shape ``self.shape[1:]``.

        Raises
        ------
        ArrayIndexError
            If the array is rank 0, `i` is not an integer, or `i` lies
            outside ``[-len, len)``.
        """
        if self.ndim == 0:
            raise ArrayIndexError("invalid index to scalar variable")
        sel = to_selector(i)
        if not isinstance(sel, Index):
            raise ArrayIndexError(f"index() expects an integer, got {i!r}")
        return self.slice(sel)

    def slice(self: IArray, *args: Any) -> IArray:
        """
        Select a sub-array with per-axis index/range arguments.

        ``a.slice((1, 4), 0, (2, 5))`` is the equivalent of ``a[1:4, 0, 2:5]``.

        Parameters
        ----------
        *args
            One argument per leading axis: an integer, a ``(start, end)`` pair,
            a ``slice`` or an `Index`/`Range`. Trailing axes without an
            argument are kept whole.

        Returns
        -------
        IArray
            A view sharing the selected cells.

        Raises
        ------
        ArrayIndexError
            If more arguments than axes are given, an argument has an
            unsupported type, or an integer position is out of bounds.
            Range bounds are clamped and never raise.
        """
        if len(args) > self.ndim:
            raise ArrayIndexError("too many indices for array")
        selectors = tuple(to_selector(a) for a in args)
        shape, cells = self._select(self.shape, self._cells, selectors)
        return type(self)._from_cells(shape, cells, self.dtype)

    def __getitem__(self, key: Any) -> IArray:
        """
        Python indexing sugar over :meth:`index` and :meth:`slice`.

        ``a[i]`` indexes, ``a[i:j]`` and ``a[i, j:k]`` slice, ``a[...]`` and
        ``a[()]`` return a full view.
        """
        if key is Ellipsis:
            return self.slice()
        if isinstance(key, tuple):
            return self.slice(*key)
        if isinstance(key, slice):
            return self.slice(key)
        return self.index(key)

    # ----------------------------
    # Assignment
    # ----------------------------
    def assign(self: IArray, value: Union[IArray, Number]) -> IArray:
        """
        Overwrite the value of every cell of this array in place.

        Parameters
        ----------
        value : Union[IArray, Number]
            A scalar (promoted to this array's dtype) or an array whose values
            are converted to this array's dtype. It is broadcast into this
            array's shape; only `value` may grow.

        Returns
        -------
        IArray
            `self`, whose cells now hold the new values.

        Raises
        ------
        BroadcastError
            If `value` cannot be broadcast into ``self.shape``.
        ArrayTypeError
            If a value cannot be converted to this array's dtype.

        Notes
        -----
        All values are read and converted before the first write, so a failed
        assignment leaves every array unchanged and a value overlapping the
        target behaves as if it had been copied first.
        """
        src = self._as_array_like(value, self)
        _, _, rcells = broadcast_cells(
            self.shape, src.shape, self._cells, src._cells, False
        )

        cast = self.dtype.cast
        values = [cast(c.value) for c in rcells]
        for cell, v in zip(self._cells, values):
            cell.value = v

        logger.debug(
            "assigned %s values from shape %s into shape %s",
            len(values),
            src.shape,
            self.shape,
        )
        return self

    def __setitem__(self, key: Any, value: Union[IArray, Number]) -> None:
        """``a[key] = value`` writes through the view selected by `key`."""
        self[key].assign(value)

    # ----------------------------
    # Reshape
    # ----------------------------
    def reshape(self: IArray, *shape: Any) -> IArray:
        """
        Return a view of the same cells with a new shape.

        Parameters
        ----------
        *shape
            The new shape, either as a single tuple/list or as separate ints.
            At most one entry may be ``-1``; it is inferred from the size.

        Returns
        -------
        IArray
            A view sharing every cell with `self`.

        Raises
        ------
        ShapeMismatchError
            If the new shape's size differs from ``self.size``.
        """
        if len(shape) == 1 and not hasattr(shape[0], "__index__"):
            shape = tuple(shape[0])

        unknown = [axis for axis, d in enumerate(shape) if d == -1]
        if len(unknown) > 1:
            raise ShapeMismatchError(
                "can only specify one unknown dimension", shape=shape
            )
        if unknown:
            known = shape_size([d for d in shape if d != -1])
            if known == 0 or self.size % known != 0:
                raise ShapeMismatchError(
                    f"cannot reshape array of size {self.size} into shape "
                    f"{format_shape(shape)}",
                    shape=shape,
                    size=self.size,
                )
            shape = tuple(self.size // known if d == -1 else d for d in shape)

        new_shape = normalize_shape(shape)
        if shape_size(new_shape) != self.size:
            raise ShapeMismatchError(
                f"cannot reshape array of size {self.size} into shape "
                f"{format_shape(new_shape)}",
                shape=new_shape,
                size=self.size,
            )

        logger.debug("reshape %s -> %s", self.shape, new_shape)
        return type(self)._from_cells(new_shape, self._cells, self.dtype)
