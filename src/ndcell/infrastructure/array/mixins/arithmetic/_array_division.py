"""
Kind-specific implementations of NDArray division via control-path dispatch.

This module registers two division kernels:

- ``DTypeKind.INTEGRAL``: division truncating toward zero (``7 / -2 == -3``),
  the native behavior of fixed-width integer division. A zero divisor raises
  `ZeroDivisionError`.
- ``DTypeKind.FLOATING``: real division. Division by zero follows IEEE
  semantics and produces ``inf``/``nan`` (NumPy emits a `RuntimeWarning`).
"""

from typing import Any, Union

from ..._array_builder import array_control_path_manager, unsupported_operator

from .....domain._array import IArray, Number
from .....domain.dtype._dtype import DTypeKind

from ._base import ArrayMixinArithmetic as AMA


def _truncating_div(a: Any, b: Any) -> int:
    a, b = int(a), int(b)
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _real_div(a: Any, b: Any) -> Any:
    return a / b


@array_control_path_manager(AMA, AMA.div, DTypeKind.INTEGRAL, unsupported_operator)
def array_div_integral(self: IArray, other: Union[IArray, Number]) -> IArray:
    """
    Elementwise integer division of integral arrays, truncating toward zero.

    Raises
    ------
    ZeroDivisionError
        If any aligned divisor is zero. No result is produced.
    """
    return self._elementwise(other, _truncating_div)


@array_control_path_manager(AMA, AMA.div, DTypeKind.FLOATING, unsupported_operator)
def array_div_floating(self: IArray, other: Union[IArray, Number]) -> IArray:
    """Elementwise real division of floating arrays."""
    return self._elementwise(other, _real_div)
