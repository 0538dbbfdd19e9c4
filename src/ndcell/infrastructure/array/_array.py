"""
Concrete NDArray implementation (shared-cell storage).

This module provides `NDArray`, the concrete array type. An array is the pair
``(shape, cells)`` in row-major order plus a single `DType`:

- ``cells`` is a list of `Cell` references; its length always equals the
  product of ``shape``;
- views (from indexing, slicing, reshape) hold the *same* cell objects as
  their source, so writes through one are visible through all;
- arithmetic and conversion allocate brand-new cells.

Design notes
------------
- Structural, factory and arithmetic behavior live in mixins; this class
  owns storage, invariants, scalar conversion and presentation.
- NumPy supplies the element scalars, dtype conversion and the text
  rendering, but cells are never backed by a NumPy buffer.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._array import Number
from ...domain._errors import ArrayTypeError, ShapeMismatchError
from ...domain._options import get_options
from ...domain.dtype._dtype import DType, DTypeKind
from ._broadcast import normalize_shape, shape_size
from ._cell import Cell, make_cells, read_values
from ._factories import ArrayFactoriesMixin
from ._shape_and_indexing import ArrayShapeAndIndexingMixin
from .mixins import ArrayMixinArithmetic, ArrayMixinUnary


def _nest(values: Sequence[Any], shape: Sequence[int]) -> list:
    if len(shape) == 1:
        return list(values)
    inner = shape_size(shape[1:])
    return [
        _nest(values[i * inner : (i + 1) * inner], shape[1:]) for i in range(shape[0])
    ]


class NDArray(
    ArrayFactoriesMixin,
    ArrayShapeAndIndexingMixin,
    ArrayMixinArithmetic,
    ArrayMixinUnary,
):
    """
    N-dimensional array of shared element cells.

    Parameters
    ----------
    shape : int | tuple[int, ...]
        Array shape. ``()`` creates a rank-0 (scalar) array.
    dtype : optional
        Element type. Defaults to the configured default float dtype.

    Notes
    -----
    - ``NDArray(shape)`` allocates zero-filled cells; the module-level
      factories (`arange`, `full`, `array`, ...) are the usual entrypoints.
    - Internal constructors `_from_cells` / `_from_values` assemble arrays
      from existing cells or raw values and enforce the storage invariants.
    """

    # NumPy operands defer to our reflected operators instead of treating an
    # NDArray as a sequence of elements.
    __array_ufunc__ = None

    def __init__(self, shape: Any, dtype: Optional[Any] = None) -> None:
        self._shape = normalize_shape(shape)
        self._dtype = DType(
            dtype if dtype is not None else get_options().default_float_dtype
        )
        zero = self._dtype.cast(0)
        self._cells: list[Cell] = make_cells([zero] * shape_size(self._shape))

    @classmethod
    def _from_cells(
        cls, shape: Sequence[int], cells: Sequence[Cell], dtype: DType
    ) -> "NDArray":
        """
        Assemble an array around existing cells without copying them.

        Raises
        ------
        ShapeMismatchError
            If ``len(cells)`` differs from the product of `shape` or a cell is
            missing.
        """
        shape = tuple(shape)
        cells = list(cells)
        expected = shape_size(shape)
        if len(cells) != expected:
            raise ShapeMismatchError(
                f"cell count {len(cells)} does not match shape {shape} "
                f"(expected {expected})",
                shape=shape,
                size=len(cells),
            )
        if any(c is None for c in cells):
            raise ShapeMismatchError("array cells must not be None", shape=shape)

        obj = cls.__new__(cls)
        obj._shape = shape
        obj._dtype = DType(dtype)
        obj._cells = cells
        return obj

    @classmethod
    def _from_values(
        cls, shape: Sequence[int], values: Sequence[Any], dtype: DType
    ) -> "NDArray":
        """Assemble an array with one new cell per value."""
        return cls._from_cells(shape, make_cells(values), dtype)

    # ----------------------------
    # Core properties
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """Per-axis sizes, leading axis first."""
        return self._shape

    @property
    def dtype(self) -> DType:
        """Element type of every cell."""
        return self._dtype

    @property
    def kind(self) -> DTypeKind:
        """Category of the element type; selects arithmetic kernels."""
        return self._dtype.kind

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> tuple[Cell, ...]:
        """
        The cell references held by this array, in row-major order.

        The tuple is a snapshot of the references; the cells themselves are
        live and shared with every view.
        """
        return tuple(self._cells)

    def shares_cells_with(self, other: "NDArray") -> bool:
        """
        Return True if this array and `other` hold at least one common cell.
        """
        mine = {id(c) for c in self._cells}
        return any(id(c) in mine for c in other._cells)

    # ----------------------------
    # Internal helpers
    # ----------------------------
    @staticmethod
    def _as_array_like(x: Union["NDArray", Number], like: "NDArray") -> "NDArray":
        """
        Convert an operand into an array compatible with a reference array.

        If `x` is already an `NDArray`, it is returned as-is. If `x` is a
        Python or NumPy scalar, it is promoted to a rank-0 array of `like`'s
        dtype.

        Raises
        ------
        ArrayTypeError
            If `x` is neither an array nor a supported scalar, or cannot be
            represented in `like`'s dtype.
        """
        if isinstance(x, NDArray):
            return x
        if isinstance(x, (bool, int, float, np.generic)):
            return type(like).scalar(x, dtype=like.dtype)
        raise ArrayTypeError(f"Unsupported operand type: {type(x)!r}")

    @staticmethod
    def _binary_op_dtype_check(a: "NDArray", b: "NDArray") -> None:
        """
        Validate that two array operands share an element type.

        Raises
        ------
        ArrayTypeError
            If the dtypes differ.
        """
        if a.dtype != b.dtype:
            raise ArrayTypeError(f"dtype mismatch: {a.dtype} vs {b.dtype}")

    # ----------------------------
    # Scalar conversion
    # ----------------------------
    def item(self) -> Any:
        """
        Return the single element of a size-1 array as a Python scalar.

        Raises
        ------
        ArrayTypeError
            If the array does not hold exactly one element.
        """
        if self.size != 1:
            raise ArrayTypeError("only size-1 arrays can be converted to scalars")
        return self._cells[0].value.item()

    def __int__(self) -> int:
        return int(self.item())

    def __float__(self) -> float:
        return float(self.item())

    def __bool__(self) -> bool:
        return bool(self.item())

    def __index__(self) -> int:
        if self.kind is not DTypeKind.INTEGRAL:
            raise ArrayTypeError(
                "only integer scalar arrays can be converted to a scalar index"
            )
        return int(self.item())

    # ----------------------------
    # Conversion / copies
    # ----------------------------
    def astype(self, dtype: Any) -> "NDArray":
        """
        Return a copy with every value converted to `dtype`.

        Conversion follows NumPy casting: floats truncate toward zero and
        out-of-range integers wrap, as with ``ndarray.astype``.

        The result never shares cells with `self`, even when `dtype` equals
        the current dtype.
        """
        dt = DType(dtype)
        return type(self)._from_values(
            self._shape, [dt.wrap(c.value) for c in self._cells], dt
        )

    def copy(self) -> "NDArray":
        """Return a copy with the same dtype and brand-new cells."""
        return type(self)._from_values(self._shape, read_values(self._cells), self._dtype)

    def tolist(self) -> Any:
        """
        Return the values as nested Python lists (a bare scalar for rank 0).
        """
        values = [c.value.item() for c in self._cells]
        if self.ndim == 0:
            return values[0]
        return _nest(values, self._shape)

    def to_numpy(self) -> np.ndarray:
        """
        Return a freshly allocated NumPy array holding a copy of the values.

        Writes to the returned array do not affect the cells.
        """
        flat = np.array([c.value for c in self._cells], dtype=self._dtype.numpy)
        return flat.reshape(self._shape)

    # ----------------------------
    # Presentation
    # ----------------------------
    def __repr__(self) -> str:
        body = np.array2string(
            self.to_numpy(),
            separator=", ",
            precision=get_options().repr_precision,
            prefix="array(",
        )
        return f"array({body}, dtype={self._dtype.name})"

    def __str__(self) -> str:
        return np.array2string(
            self.to_numpy(), precision=get_options().repr_precision
        )
