"""
Unary operation mixin for NDArray.

This module declares :class:`ArrayMixinUnary`. Negation is the only unary
operation: it is defined as multiplication by the scalar ``-1`` and is
dispatched per dtype kind like the binary operators.
"""

from abc import ABC

from .....domain._array import IArray


class ArrayMixinUnary(ABC):
    """
    Mixin defining unary array operations.

    Notes
    -----
    ``neg`` is replaced by a dispatch wrapper keyed on ``self.kind`` when the
    concrete implementation module is imported.
    """

    def neg(self: IArray) -> IArray:
        """
        Elementwise negation.

        Returns
        -------
        IArray
            New array equal to ``self * scalar(-1)``.
        """
        ...

    def __neg__(self):
        return self.neg()
