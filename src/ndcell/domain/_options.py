"""
Process-wide array options.

This module holds the small set of knobs that change how arrays are built and
displayed:

- default dtypes used when a factory is called without ``dtype``
- whether literal construction with ragged siblings is a hard error
- the precision used when rendering floating arrays

Options are stored in a single module-level `ArrayOptions` instance. Use
`set_options` for a permanent change or the `options` context manager for a
scoped one.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator

from .dtype._dtype import DType, DTypeKind
from ._errors import ArrayTypeError


@dataclass(frozen=True)
class ArrayOptions:
    """
    Immutable snapshot of the array options.

    Attributes
    ----------
    default_int_dtype : str
        dtype used by `arange` and by integer fill values when no dtype is given.
    default_float_dtype : str
        dtype used by `zeros`/`ones`, float fill values and empty literals.
    strict_literals : bool
        If True, nested literals whose siblings disagree in shape raise
        `ShapeMismatchError`. If False, a `RuntimeWarning` is issued and an
        empty array is returned instead.
    repr_precision : int
        Number of fractional digits printed for floating arrays.
    """

    default_int_dtype: str = "int64"
    default_float_dtype: str = "float64"
    strict_literals: bool = True
    repr_precision: int = 8


_current = ArrayOptions()


def _validate(opts: ArrayOptions) -> None:
    if DType(opts.default_int_dtype).kind is not DTypeKind.INTEGRAL:
        raise ArrayTypeError(
            f"default_int_dtype must be an integer type, got {opts.default_int_dtype!r}"
        )
    if DType(opts.default_float_dtype).kind is not DTypeKind.FLOATING:
        raise ArrayTypeError(
            "default_float_dtype must be a floating type, "
            f"got {opts.default_float_dtype!r}"
        )
    if opts.repr_precision < 0:
        raise ValueError("repr_precision must be non-negative")


def get_options() -> ArrayOptions:
    """Return the current options snapshot."""
    return _current


def set_options(**changes) -> ArrayOptions:
    """
    Replace one or more options.

    Parameters
    ----------
    **changes
        Field names of `ArrayOptions` with their new values.

    Returns
    -------
    ArrayOptions
        The previous options, so callers can restore them.

    Raises
    ------
    TypeError
        If a keyword is not an option name.
    ArrayTypeError
        If a default dtype is not of the required kind.
    """
    global _current

    known = {f.name for f in fields(ArrayOptions)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"unknown array option(s): {', '.join(unknown)}")

    new = replace(_current, **changes)
    _validate(new)

    previous, _current = _current, new
    return previous


@contextmanager
def options(**changes) -> Iterator[ArrayOptions]:
    """
    Temporarily change options inside a ``with`` block.

    Example
    -------
        with options(strict_literals=False):
            a = array([[1, 2], [3]])  # warns, returns an empty array
    """
    global _current

    previous = set_options(**changes)
    try:
        yield _current
    finally:
        _current = previous
