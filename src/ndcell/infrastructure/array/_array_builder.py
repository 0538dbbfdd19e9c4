"""
Array control-path manager for dtype-kind-specific dispatch.

This module defines a shared control-path manager used to register and resolve
dtype-kind-specific implementations of `NDArray` methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"kind"``. As a result, method dispatch
is performed based on the runtime value of ``self.kind`` (a `DTypeKind`).

Typical usage
-------------
Kind-specific kernels register themselves using this manager:

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, DTypeKind.INTEGRAL)
    def op_integral(self, ...): ...

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, DTypeKind.FLOATING)
    def op_floating(self, ...): ...

At runtime, calling ``NDArray.op(...)`` dispatches to the implementation whose
registered kind matches ``self.kind``.
"""

from ...domain._errors import ArrayTypeError
from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches NDArray methods based on `self.kind`
array_control_path_manager = create_path_builder("kind")


def unsupported_operator(method, kind) -> ArrayTypeError:
    """Trap factory for kinds without a registered kernel."""
    return ArrayTypeError(
        f"unsupported operator '{method.__name__}' for {kind.value} arrays"
    )
