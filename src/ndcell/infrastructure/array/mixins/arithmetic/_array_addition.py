"""
Kind-specific implementations of NDArray addition via control-path dispatch.

Addition has the same scalar kernel for integral and floating arrays; both
kinds register the shared implementation. Boolean arrays register nothing and
therefore raise `ArrayTypeError` when added.
"""

import operator
from typing import Union

from ..._array_builder import array_control_path_manager, unsupported_operator

from .....domain._array import IArray, Number
from .....domain.dtype._dtype import DTypeKind

from ._base import ArrayMixinArithmetic as AMA


@array_control_path_manager(AMA, AMA.add, DTypeKind.FLOATING, unsupported_operator)
@array_control_path_manager(AMA, AMA.add, DTypeKind.INTEGRAL, unsupported_operator)
def array_add(self: IArray, other: Union[IArray, Number]) -> IArray:
    """
    Elementwise ``self + other`` for integral and floating arrays.

    Overflow in fixed-width integer dtypes wraps (NumPy scalar semantics).
    """
    return self._elementwise(other, operator.add)
