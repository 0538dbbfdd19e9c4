"""
Element type abstraction utilities.

This module defines lightweight abstractions for the element type ("dtype")
held by an array. It provides:

- `DTypeKind`: an enumeration of supported element categories
- `DType`: a concrete dtype descriptor that validates and normalizes
  user-facing dtype specifications such as ``"int32"``, ``float`` or
  ``np.float64``

Every array holds exactly one `DType`; heterogeneous (object) element types
are not supported. The descriptor is the single place where raw values are
converted into the NumPy scalars stored in cells.
"""

import math
from enum import Enum
from typing import Any

import numpy as np

from .._errors import ArrayTypeError


class DTypeKind(Enum):
    """
    Enumeration of supported element categories.

    The kind is independent of the exact bit width and is what arithmetic
    dispatch keys on (e.g. integral vs. floating division).

    Attributes
    ----------
    INTEGRAL : DTypeKind
        Signed and unsigned integers.
    FLOATING : DTypeKind
        IEEE floating point numbers.
    BOOLEAN : DTypeKind
        Booleans. Storable and convertible, but without arithmetic.
    """

    INTEGRAL = "integral"
    FLOATING = "floating"
    BOOLEAN = "boolean"


_KIND_BY_NUMPY_KIND = {
    "i": DTypeKind.INTEGRAL,
    "u": DTypeKind.INTEGRAL,
    "f": DTypeKind.FLOATING,
    "b": DTypeKind.BOOLEAN,
}


class DType:
    """
    Concrete element type descriptor.

    Parameters
    ----------
    spec : Any
        A dtype name (``"int64"``), a NumPy dtype or scalar type, one of the
        Python types ``int``/``float``/``bool``, or another `DType`.

    Raises
    ------
    ArrayTypeError
        If `spec` does not describe a supported integer, floating or boolean
        type.

    Notes
    -----
    `__slots__` keeps instances small; descriptors are created often.
    """

    __slots__ = ("numpy", "kind")

    def __init__(self, spec: Any):
        if isinstance(spec, DType):
            self.numpy = spec.numpy
            self.kind = spec.kind
            return
        if spec is None:
            raise ArrayTypeError("data type None not understood")
        try:
            np_dtype = np.dtype(spec)
        except TypeError as e:
            raise ArrayTypeError(f"data type {spec!r} not understood") from e

        kind = _KIND_BY_NUMPY_KIND.get(np_dtype.kind)
        if kind is None:
            raise ArrayTypeError(
                f"unsupported element type '{np_dtype}'; expected an integer, "
                "floating point or boolean type"
            )
        self.numpy = np_dtype
        self.kind = kind

    @property
    def name(self) -> str:
        """Canonical NumPy name of the dtype (e.g. ``"int64"``)."""
        return self.numpy.name

    def cast(self, value: Any) -> np.generic:
        """
        Convert a single value to a NumPy scalar of this dtype.

        Parameters
        ----------
        value : Any
            A Python or NumPy number (or bool).

        Returns
        -------
        np.generic
            The converted scalar. Floats converted to an integer dtype are
            truncated toward zero.

        Raises
        ------
        ArrayTypeError
            If the value is out of range for this dtype (e.g. ``300`` for
            ``int8``, whether it arrives as a Python int or a NumPy scalar),
            is a non-finite float bound for an integer dtype, or is not a
            number at all (``None`` and strings included).
        """
        if value is None or isinstance(value, (str, bytes)):
            raise ArrayTypeError(f"cannot convert {value!r} to dtype '{self.name}'")
        if isinstance(value, np.generic) and value.dtype == self.numpy:
            return value

        if self.kind is DTypeKind.INTEGRAL:
            self._check_integral_range(value)
        elif self.kind is DTypeKind.FLOATING:
            self._check_floating_range(value)

        try:
            if isinstance(value, np.generic):
                return value.astype(self.numpy)
            return self.numpy.type(value)
        except (OverflowError, TypeError, ValueError) as e:
            raise ArrayTypeError(
                f"cannot convert {value!r} to dtype '{self.name}'"
            ) from e

    def wrap(self, value: Any) -> np.generic:
        """
        Convert a single value with NumPy's casting rules.

        Unlike `cast`, out-of-range integers wrap around and non-finite floats
        become whatever NumPy produces for the target type. Used by
        ``astype`` and by integer arithmetic results.
        """
        if isinstance(value, np.generic):
            if value.dtype == self.numpy:
                return value
            return value.astype(self.numpy)
        if value is None or isinstance(value, (str, bytes)):
            raise ArrayTypeError(f"cannot convert {value!r} to dtype '{self.name}'")
        return np.asarray(value).astype(self.numpy)[()]

    def _out_of_bounds(self, value: Any) -> ArrayTypeError:
        return ArrayTypeError(
            f"value {value!r} is out of bounds for dtype '{self.name}'"
        )

    def _check_integral_range(self, value: Any) -> None:
        if isinstance(value, (bool, np.bool_)):
            return
        if isinstance(value, (float, np.floating)):
            if not math.isfinite(value):
                raise ArrayTypeError(
                    f"cannot convert non-finite value {value!r} to dtype '{self.name}'"
                )
        elif not isinstance(value, (int, np.integer)):
            return
        info = np.iinfo(self.numpy)
        if not info.min <= int(value) <= info.max:
            raise self._out_of_bounds(value)

    def _check_floating_range(self, value: Any) -> None:
        if not isinstance(value, (int, float, np.integer, np.floating)):
            return
        try:
            f = float(value)
        except OverflowError as e:
            raise self._out_of_bounds(value) from e
        if math.isfinite(f) and abs(f) > np.finfo(self.numpy).max:
            raise self._out_of_bounds(value)

    def is_integral(self) -> bool:
        return self.kind is DTypeKind.INTEGRAL

    def is_floating(self) -> bool:
        return self.kind is DTypeKind.FLOATING

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DType):
            return self.numpy == other.numpy
        try:
            return self.numpy == DType(other).numpy
        except ArrayTypeError:
            return False

    def __hash__(self) -> int:
        return hash(self.numpy)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"DType('{self.name}')"
