"""
ndcell: a minimal N-dimensional array engine over shared element cells.

Arrays are a shape plus a row-major list of cells. Indexing, slicing and
reshaping return views that share cells with their source, so assignment
through a view writes through to every alias. Elementwise arithmetic follows
NumPy-style broadcasting and always allocates new cells.

Example
-------
    >>> import ndcell as nc
    >>> a = nc.arange(20).reshape(4, 1, 5)
    >>> b = a.slice((1, 4), 0, (2, 5))
    >>> a[1:4, 0:1, 2:5] = 3 + nc.full((3, 1, 1), 1) + -nc.full((1, 3), 2)
    >>> b.tolist()
    [[2, 2, 2], [2, 2, 2], [2, 2, 2]]
"""

from .domain._errors import (
    NDArrayError,
    ArrayIndexError,
    ArrayTypeError,
    ShapeMismatchError,
    BroadcastError,
)
from .domain._options import ArrayOptions, get_options, set_options, options
from .domain.dtype import DType, DTypeKind
from .infrastructure.array import NDArray, Cell, Index, Range
from .infrastructure.array._broadcast import align, shape_size

arange = NDArray.arange
scalar = NDArray.scalar
full = NDArray.full
zeros = NDArray.zeros
ones = NDArray.ones
array = NDArray.array


def add(a, b):
    """Elementwise ``a + b``; a scalar `a` is promoted to `b`'s dtype."""
    return a + b


def sub(a, b):
    """Elementwise ``a - b``; a scalar `a` is promoted to `b`'s dtype."""
    return a - b


def mul(a, b):
    """Elementwise ``a * b``; a scalar `a` is promoted to `b`'s dtype."""
    return a * b


def div(a, b):
    """Elementwise ``a / b``; a scalar `a` is promoted to `b`'s dtype."""
    return a / b


__all__ = [
    "NDArray",
    "Cell",
    "Index",
    "Range",
    "DType",
    "DTypeKind",
    "ArrayOptions",
    "get_options",
    "set_options",
    "options",
    "NDArrayError",
    "ArrayIndexError",
    "ArrayTypeError",
    "ShapeMismatchError",
    "BroadcastError",
    "align",
    "shape_size",
    "arange",
    "scalar",
    "full",
    "zeros",
    "ones",
    "array",
    "add",
    "sub",
    "mul",
    "div",
]

__version__ = "0.1.0"
