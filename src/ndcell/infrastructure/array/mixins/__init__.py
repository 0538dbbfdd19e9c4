from .arithmetic import ArrayMixinArithmetic
from .unary import ArrayMixinUnary

__all__ = [
    ArrayMixinArithmetic.__name__,
    ArrayMixinUnary.__name__,
]
