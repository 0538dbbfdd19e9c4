"""
Arithmetic mixins and dtype-kind-specific implementations for NDArray operations.

This package aggregates the arithmetic mixin and its concrete control-path
implementations:

- addition           (``add`` / ``+``)
- subtraction        (``sub`` / ``-``)
- multiplication     (``mul`` / ``*``)
- division           (``div`` / ``/``)

Design notes
------------
- Concrete implementation modules are imported for their *side effects*:
  registering control paths with the array control-path manager.
- These implementation modules are not part of the public API.

Public API
----------
Only the base mixin class is exported:

- ``ArrayMixinArithmetic``
"""

from ._array_addition import *
from ._array_subtraction import *
from ._array_multiplication import *
from ._array_division import *
from ._base import ArrayMixinArithmetic

__all__ = [
    ArrayMixinArithmetic.__name__,
]
