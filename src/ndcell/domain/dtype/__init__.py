from ._dtype import DType, DTypeKind

__all__ = [DType.__name__, DTypeKind.__name__]
