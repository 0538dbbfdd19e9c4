"""
Unary operation mixins for NDArray.

Concrete implementation modules are imported for their side effects
(control-path registration). Only the base mixin is exported.
"""

from ._array_neg import *
from ._base import ArrayMixinUnary

__all__ = [
    ArrayMixinUnary.__name__,
]
