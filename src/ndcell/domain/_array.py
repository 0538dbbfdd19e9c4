"""
Array interface definitions.

This module defines the domain-level interface for array-like objects using
structural typing. Infrastructure mixins annotate against `IArray` so they do
not need to import the concrete `NDArray` class (which would be circular).
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from .dtype._dtype import DType, DTypeKind

Number = Union[int, float, bool]


@runtime_checkable
class IArray(Protocol):
    """
    N-dimensional array interface.

    An `IArray` is a shape plus a row-major sequence of shared element cells of
    a single dtype. Arrays produced by indexing, slicing or reshaping share
    cells with their source ("views"); arrays produced by arithmetic or
    conversion own new cells.
    """

    # ---------------------------------------------------------------------
    # Core identity
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """Per-axis sizes, leading axis first."""
        ...

    @property
    def dtype(self) -> DType:
        """Element type shared by every cell."""
        ...

    @property
    def kind(self) -> DTypeKind:
        """Category of the dtype; the key used for arithmetic dispatch."""
        ...

    @property
    def ndim(self) -> int:
        """Number of axes."""
        ...

    @property
    def size(self) -> int:
        """Number of elements (product of `shape`)."""
        ...

    @property
    def cells(self) -> tuple[Any, ...]:
        """The cell references held by this array, in row-major order."""
        ...

    def len(self) -> int:
        """Length of axis 0."""
        ...

    # ---------------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------------
    def reshape(self, *shape: Any) -> "IArray":
        """View of the same cells with a different shape."""
        ...

    def index(self, i: int) -> "IArray":
        """View dropping axis 0 at position `i`."""
        ...

    def slice(self, *args: Any) -> "IArray":
        """View selected by per-axis index/range arguments."""
        ...

    def assign(self, value: Union["IArray", Number]) -> "IArray":
        """Overwrite every cell's value in place, broadcasting `value`."""
        ...

    # ---------------------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------------------
    def astype(self, dtype: Any) -> "IArray":
        """Copy with every value converted to `dtype`."""
        ...

    def item(self) -> Any:
        """The single element of a size-1 array."""
        ...

    def tolist(self) -> Any:
        """Nested Python lists of the element values."""
        ...

    def to_numpy(self) -> Any:
        """Fresh NumPy array holding a copy of the values."""
        ...

    # ---------------------------------------------------------------------
    # Elementwise arithmetic
    # ---------------------------------------------------------------------
    def add(self, other: Union["IArray", Number]) -> "IArray": ...

    def sub(self, other: Union["IArray", Number]) -> "IArray": ...

    def mul(self, other: Union["IArray", Number]) -> "IArray": ...

    def div(self, other: Union["IArray", Number]) -> "IArray": ...

    def neg(self) -> "IArray": ...
