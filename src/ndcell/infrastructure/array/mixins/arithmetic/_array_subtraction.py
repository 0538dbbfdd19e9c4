"""
Kind-specific implementations of NDArray subtraction via control-path dispatch.
"""

import operator
from typing import Union

from ..._array_builder import array_control_path_manager, unsupported_operator

from .....domain._array import IArray, Number
from .....domain.dtype._dtype import DTypeKind

from ._base import ArrayMixinArithmetic as AMA


@array_control_path_manager(AMA, AMA.sub, DTypeKind.FLOATING, unsupported_operator)
@array_control_path_manager(AMA, AMA.sub, DTypeKind.INTEGRAL, unsupported_operator)
def array_sub(self: IArray, other: Union[IArray, Number]) -> IArray:
    """Elementwise ``self - other`` for integral and floating arrays."""
    return self._elementwise(other, operator.sub)
