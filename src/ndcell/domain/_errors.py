"""
Array-related exceptions for ndcell.

This module defines the error types raised by array construction, indexing,
conversion, and elementwise arithmetic. Each concrete error derives from both
:class:`NDArrayError` and the matching Python built-in exception, so callers
can catch either the library-specific type or the familiar built-in one
(``IndexError``, ``TypeError``, ``ValueError``).

All errors are raised synchronously by the operation that detects the
condition, before any cell is written.
"""

from typing import Sequence


def format_shape(shape: Sequence[int]) -> str:
    """
    Render a shape the way the error messages print it, e.g. ``(3,1,)``.

    Parameters
    ----------
    shape : Sequence[int]
        Shape to render.

    Returns
    -------
    str
        Parenthesised, comma-terminated dimension list.
    """
    return "(" + "".join(f"{d}," for d in shape) + ")"


class NDArrayError(Exception):
    """
    Base class for every error raised by ndcell arrays.
    """


class ArrayIndexError(NDArrayError, IndexError):
    """
    Raised when an index cannot be resolved against an array.

    Typical causes are an out-of-bounds integer index, more slice arguments
    than the array has axes, a selector of an unsupported type, or indexing
    a rank-0 array.
    """


class ArrayTypeError(NDArrayError, TypeError):
    """
    Raised when an operation is not defined for the operands' types.

    Examples include converting an array with more than one element to a
    Python scalar, asking a rank-0 array for its ``len()``, combining arrays
    of different dtypes, or invoking arithmetic on a dtype kind that has no
    registered kernel.
    """


class ShapeMismatchError(NDArrayError, ValueError):
    """
    Raised when a shape is invalid or incompatible with the requested operation.

    Attributes
    ----------
    shape : tuple[int, ...] | None
        The offending shape, when one is available.
    size : int | None
        The element count of the source array, when relevant (e.g. reshape).
    """

    def __init__(self, message: str, *, shape=None, size=None) -> None:
        super().__init__(message)
        self.shape = tuple(shape) if shape is not None else None
        self.size = size


class BroadcastError(ShapeMismatchError):
    """
    Raised when two shapes cannot be aligned by broadcasting.

    Attributes
    ----------
    lshape : tuple[int, ...]
        Left-hand (or assignment target) shape.
    rshape : tuple[int, ...]
        Right-hand (or assigned value) shape.
    """

    def __init__(self, message: str, lshape: Sequence[int], rshape: Sequence[int]):
        super().__init__(message, shape=lshape)
        self.lshape = tuple(lshape)
        self.rshape = tuple(rshape)

    @classmethod
    def for_operands(cls, lshape, rshape) -> "BroadcastError":
        """Error for a binary operation whose operand shapes do not align."""
        return cls(
            "operands could not be broadcast together with shapes "
            f"{format_shape(lshape)} {format_shape(rshape)}",
            lshape,
            rshape,
        )

    @classmethod
    def for_assignment(cls, target_shape, value_shape) -> "BroadcastError":
        """Error for an assignment whose value cannot grow into the target."""
        return cls(
            f"could not broadcast input array from shape {format_shape(value_shape)} "
            f"into shape {format_shape(target_shape)}",
            target_shape,
            value_shape,
        )
