"""
Arithmetic mixin defining elementwise NDArray operators.

This module declares :class:`ArrayMixinArithmetic`, the mixin that specifies
the public API of elementwise arithmetic on arrays: the named operations
``add``, ``sub``, ``mul`` and ``div`` and the Python operators routed to them.

The named operations are dispatched per dtype kind. Concrete kernels live in
the sibling ``_array_*`` modules and register themselves through the
control-path manager; this keeps integral and floating semantics (notably for
division) in separate, small functions behind one public entrypoint.

Every operation shares the same contract:

- a scalar operand is first promoted to a rank-0 array of the receiver's
  dtype (``scalar()``);
- two array operands must share a dtype;
- shapes are aligned by broadcasting where either side may grow;
- the result owns brand-new cells and never aliases an operand;
- results are stored with NumPy casting, so fixed-width integer overflow
  wraps (a promoted scalar operand must itself fit the dtype).
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Union

from .....domain._array import IArray, Number
from ..._broadcast import broadcast_cells


class ArrayMixinArithmetic(ABC):
    """
    Mixin defining elementwise arithmetic operations for arrays.

    Notes
    -----
    - ``add``/``sub``/``mul``/``div`` declared here are replaced at import
      time by dispatch wrappers keyed on ``self.kind``; their bodies never run.
    - Kinds without a registered kernel (booleans) raise `ArrayTypeError`.
    """

    # ----------------------------
    # Named operations (dispatched)
    # ----------------------------
    def add(self: IArray, other: Union[IArray, Number]) -> IArray:
        """
        Elementwise addition with broadcasting.

        Parameters
        ----------
        other : Union[IArray, Number]
            Right-hand operand. Scalars are promoted to this array's dtype.

        Returns
        -------
        IArray
            New array holding ``self + other``.

        Raises
        ------
        BroadcastError
            If the operand shapes cannot be aligned.
        ArrayTypeError
            If the operands' dtypes differ or the dtype has no arithmetic.
        """
        ...

    def sub(self: IArray, other: Union[IArray, Number]) -> IArray:
        """Elementwise subtraction ``self - other``; see :meth:`add`."""
        ...

    def mul(self: IArray, other: Union[IArray, Number]) -> IArray:
        """Elementwise multiplication ``self * other``; see :meth:`add`."""
        ...

    def div(self: IArray, other: Union[IArray, Number]) -> IArray:
        """
        Elementwise division ``self / other``; see :meth:`add`.

        Notes
        -----
        Division follows the element type: integral arrays truncate toward
        zero (and raise `ZeroDivisionError` on a zero divisor), floating
        arrays use real division with IEEE semantics.
        """
        ...

    # ----------------------------
    # Shared kernel driver
    # ----------------------------
    def _elementwise(
        self: IArray, other: Union[IArray, Number], fn: Callable[[Any, Any], Any]
    ) -> IArray:
        """
        Broadcast both operands and apply `fn` to each aligned value pair.

        Parameters
        ----------
        other : Union[IArray, Number]
            Right-hand operand.
        fn : Callable[[Any, Any], Any]
            Scalar kernel applied to dereferenced cell values.

        Returns
        -------
        IArray
            New array of the aligned shape with one new cell per position.
        """
        other_a = self._as_array_like(other, self)
        self._binary_op_dtype_check(self, other_a)

        shape, lcells, rcells = broadcast_cells(
            self.shape, other_a.shape, self._cells, other_a._cells, True
        )

        wrap = self.dtype.wrap
        values = [wrap(fn(lc.value, rc.value)) for lc, rc in zip(lcells, rcells)]
        return type(self)._from_values(shape, values, self.dtype)

    # ----------------------------
    # Python operators
    # ----------------------------
    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        """``scalar + array``: the scalar is promoted and becomes the left operand."""
        return self._as_array_like(other, self).add(self)

    def __sub__(self, other):
        return self.sub(other)

    def __rsub__(self, other):
        return self._as_array_like(other, self).sub(self)

    def __mul__(self, other):
        return self.mul(other)

    def __rmul__(self, other):
        return self._as_array_like(other, self).mul(self)

    def __truediv__(self, other):
        return self.div(other)

    def __rtruediv__(self, other):
        return self._as_array_like(other, self).div(self)

    # ----------------------------
    # In-place operators
    # ----------------------------
    # Compute out of place, then write back into the existing cells so that
    # every view sharing them observes the update. The target shape is fixed.
    def __iadd__(self, other):
        self.assign(self.add(other))
        return self

    def __isub__(self, other):
        self.assign(self.sub(other))
        return self

    def __imul__(self, other):
        self.assign(self.mul(other))
        return self

    def __itruediv__(self, other):
        self.assign(self.div(other))
        return self
