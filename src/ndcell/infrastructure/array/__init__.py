from ._array import NDArray
from ._cell import Cell
from ._selectors import Index, Range

__all__ = [
    NDArray.__name__,
    Cell.__name__,
    Index.__name__,
    Range.__name__,
]
