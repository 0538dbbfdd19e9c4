"""
Array factory mixin.

This module defines `ArrayFactoriesMixin`, the classmethod constructors of the
concrete `NDArray`:

- `arange`, `scalar`, `full`, `zeros`, `ones`: allocate new cells
- `array`: literal construction from nested sequences, NumPy arrays, scalars
  and existing arrays

Literal construction reuses the cells of nested `NDArray` elements whose
dtype matches the result, so ``array([a, b])`` aliases `a` and `b`. Every
other value gets a new cell.
"""

from __future__ import annotations

import warnings
from typing import Any, NamedTuple, Optional

import numpy as np

from ...domain._errors import ArrayTypeError, ShapeMismatchError
from ...domain._options import get_options
from ...domain.dtype._dtype import DType
from ._broadcast import normalize_shape, shape_size
from ._cell import Cell


class _SharedCell(NamedTuple):
    """A cell contributed by reference from a nested array."""

    cell: Cell
    dtype: DType


class _RaggedLiteral(ShapeMismatchError):
    """Sibling elements of a nested literal disagree in shape."""


def _infer_scalar_dtype(value: Any) -> DType:
    """
    Pick a dtype for a single fill value.

    Python ``bool``/``int``/``float`` map to ``bool`` and the configured
    default integer/float dtypes; NumPy scalars keep their own dtype.
    """
    if isinstance(value, np.generic):
        return DType(value.dtype)
    if isinstance(value, bool):
        return DType(np.bool_)
    opts = get_options()
    if isinstance(value, int):
        return DType(opts.default_int_dtype)
    if isinstance(value, float):
        return DType(opts.default_float_dtype)
    raise ArrayTypeError(f"unsupported element value {value!r}")


def _flatten_literal(obj: Any, array_cls: type) -> tuple[tuple[int, ...], list[Any]]:
    """
    Measure the shape of a nested literal and flatten its leaves.

    Returns
    -------
    tuple
        ``(shape, items)`` where each item is either a raw scalar value or a
        `_SharedCell` taken from a nested array.

    Raises
    ------
    _RaggedLiteral
        If sibling elements have different shapes.
    """
    if isinstance(obj, array_cls):
        return obj.shape, [_SharedCell(c, obj.dtype) for c in obj._cells]
    if isinstance(obj, np.ndarray):
        return _flatten_literal(obj.tolist(), array_cls)
    if isinstance(obj, (list, tuple)):
        if len(obj) == 0:
            return (0,), []
        parts = [_flatten_literal(x, array_cls) for x in obj]
        first = parts[0][0]
        for i, (shape, _) in enumerate(parts[1:], start=1):
            if shape != first:
                raise _RaggedLiteral(
                    "setting an array element with a sequence: the requested "
                    f"array has an inhomogeneous shape (element 0 has shape "
                    f"{first}, element {i} has shape {shape})",
                    shape=shape,
                )
        return (len(obj),) + first, [item for _, items in parts for item in items]
    return (), [obj]


def _or_default_float(dtype: Optional[Any]) -> Any:
    return dtype if dtype is not None else get_options().default_float_dtype


def _infer_literal_dtype(items: list[Any]) -> DType:
    """
    Pick the dtype of a literal from its flattened items.

    Nested arrays decide the dtype when present, so their cells can be shared;
    raw values are then converted into it. Otherwise NumPy infers the dtype
    from the raw values.

    Raises
    ------
    ArrayTypeError
        If nested arrays disagree in dtype, or the raw values have no
        supported element type.
    """
    shared = {x.dtype for x in items if isinstance(x, _SharedCell)}
    if len(shared) > 1:
        names = ", ".join(sorted(dt.name for dt in shared))
        raise ArrayTypeError(
            f"nested arrays have different dtypes ({names}); pass dtype= explicitly"
        )
    if shared:
        return shared.pop()

    raw = [x for x in items if not isinstance(x, _SharedCell)]
    if not raw:
        return DType(get_options().default_float_dtype)
    try:
        return DType(np.asarray(raw).dtype)
    except ValueError as e:
        raise ArrayTypeError(f"cannot infer an element type: {e}") from e


class ArrayFactoriesMixin:
    """
    Classmethod constructors for the concrete NDArray implementation.

    Notes
    -----
    Methods assume the host class provides ``_from_values`` and
    ``_from_cells``.
    """

    @classmethod
    def arange(cls, n: int, start: int = 0, dtype: Optional[Any] = None):
        """
        Create the 1-D array ``[start, start + 1, ..., start + n - 1]``.

        Parameters
        ----------
        n : int
            Number of elements; must be non-negative.
        start : int, optional
            First value. Defaults to 0.
        dtype : optional
            Element type. Defaults to the dtype inferred from `start`
            (the default integer dtype for ints).

        Raises
        ------
        ShapeMismatchError
            If `n` is negative.
        """
        if n < 0:
            raise ShapeMismatchError(
                f"arange() requires a non-negative length, got {n}", shape=(n,)
            )
        dt = DType(dtype) if dtype is not None else _infer_scalar_dtype(start)
        return cls._from_values((n,), [dt.cast(start + i) for i in range(n)], dt)

    @classmethod
    def scalar(cls, value: Any, dtype: Optional[Any] = None):
        """
        Create a rank-0 array holding `value` in a single new cell.

        Parameters
        ----------
        value : Any
            The element. Converted to `dtype` when one is given.
        dtype : optional
            Element type; inferred from `value` when omitted.
        """
        dt = DType(dtype) if dtype is not None else _infer_scalar_dtype(value)
        return cls._from_values((), [dt.cast(value)], dt)

    @classmethod
    def full(cls, shape: Any, fill_value: Any, dtype: Optional[Any] = None):
        """
        Create an array of `shape` whose every cell holds `fill_value`.

        Parameters
        ----------
        shape : int | Sequence[int]
            Target shape. ``()`` gives a rank-0 array.
        fill_value : Any
            Value written into every new cell.
        dtype : optional
            Element type; inferred from `fill_value` when omitted.

        Raises
        ------
        ShapeMismatchError
            If a shape entry is negative.
        """
        shape = normalize_shape(shape)
        dt = DType(dtype) if dtype is not None else _infer_scalar_dtype(fill_value)
        v = dt.cast(fill_value)
        return cls._from_values(shape, [v] * shape_size(shape), dt)

    @classmethod
    def zeros(cls, shape: Any, dtype: Optional[Any] = None):
        """Array of `shape` filled with 0 (default float dtype)."""
        return cls.full(shape, 0, dtype=_or_default_float(dtype))

    @classmethod
    def ones(cls, shape: Any, dtype: Optional[Any] = None):
        """Array of `shape` filled with 1 (default float dtype)."""
        return cls.full(shape, 1, dtype=_or_default_float(dtype))

    @classmethod
    def array(cls, obj: Any, dtype: Optional[Any] = None):
        """
        Build an array from a (nested) literal.

        Parameters
        ----------
        obj : Any
            A scalar, a (nested) list/tuple, a NumPy array, an `NDArray`, or
            nested sequences mixing those.
        dtype : optional
            Element type. When omitted, nested arrays decide it (they must
            agree); without nested arrays NumPy infers it from the values.

        Returns
        -------
        NDArray
            New array. Cells of nested arrays whose dtype equals the result's
            are shared, not copied.

        Raises
        ------
        ShapeMismatchError
            If sibling elements disagree in shape and ``strict_literals`` is
            enabled (the default).
        ArrayTypeError
            If the values have no supported element type, nested arrays
            disagree in dtype, or a value does not fit the dtype.

        Warns
        -----
        RuntimeWarning
            If sibling elements disagree in shape and ``strict_literals`` is
            disabled; an empty array of shape ``(0,)`` is returned.
        """
        if dtype is None and isinstance(obj, np.ndarray):
            dtype = obj.dtype

        try:
            shape, items = _flatten_literal(obj, cls)
        except _RaggedLiteral as e:
            if get_options().strict_literals:
                raise ShapeMismatchError(str(e), shape=e.shape) from None
            warnings.warn(
                f"{e}; returning an empty array",
                RuntimeWarning,
                stacklevel=2,
            )
            dt = DType(_or_default_float(dtype))
            return cls._from_cells((0,), [], dt)

        dt = DType(dtype) if dtype is not None else _infer_literal_dtype(items)

        cells: list[Cell] = []
        for item in items:
            if isinstance(item, _SharedCell):
                if item.dtype == dt:
                    cells.append(item.cell)
                else:
                    cells.append(Cell(dt.cast(item.cell.value)))
            else:
                cells.append(Cell(dt.cast(item)))
        return cls._from_cells(shape, cells, dt)
