"""
Kind-specific implementations of NDArray negation via control-path dispatch.

Negation multiplies by a rank-0 array holding ``-1`` in the receiver's dtype,
so it inherits the broadcasting and new-cell semantics of ``mul``. Unsigned
dtypes cannot represent ``-1`` and raise `ArrayTypeError`.
"""

from ..._array_builder import array_control_path_manager, unsupported_operator

from .....domain._array import IArray
from .....domain.dtype._dtype import DTypeKind

from ._base import ArrayMixinUnary as AMU


@array_control_path_manager(AMU, AMU.neg, DTypeKind.FLOATING, unsupported_operator)
@array_control_path_manager(AMU, AMU.neg, DTypeKind.INTEGRAL, unsupported_operator)
def array_neg(self: IArray) -> IArray:
    """Return ``self * scalar(-1)``."""
    return self.mul(type(self).scalar(-1, dtype=self.dtype))
