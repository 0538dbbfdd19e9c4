"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for dynamically routing a single method
call to one of several registered implementations based on an attribute of
the receiving object.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the configured state attribute of `self` and
  dispatches to the registered implementation that matches the current state.

Intended use-cases
------------------
- Providing per-dtype-kind kernels (integral vs. floating) behind one public
  operator without large if/elif chains.
- Keeping per-state behaviors isolated as separate functions for readability.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Sub-methods are called like normal instance methods: ``sm(self, *args, **kwargs)``.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapFactory = Callable[[Callable[..., Any], Any], BaseException]
"""Builds the exception raised when no control path matches the current state."""


def create_path_builder(state_attr: str) -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapFactory]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register stateful
    control paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            mode = "A"
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, "B")
        def foo_B(self, x: int) -> int:
            ...

    When `MyClass().foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on `self.mode`.

    Parameters
    ----------
    state_attr : str
        Name of the attribute (or property) read from `self` at call time.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapFactory] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
        method : Callable[P, R]
            The base method being templated. Its metadata is copied onto the
            installed wrapper via `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[TrapFactory]
            Called as ``trap_exception(method, state)`` when no path matches the
            current state; the returned exception is raised. If None, a
            `NotImplementedError` is raised instead.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The argument for 'state' must be hashable. Got {state!r}")

        # Unwrap so re-registering on an already templated method keeps the
        # original metadata and the same key.
        base = getattr(method, "__wrapped__", method)
        smk = MethodKey(cls.__name__, base.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(base)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(type(self), repr(state_attr))
                    )
                cur = getattr(self, state_attr)
                if sm := methods_map.get(MethodKey(cls.__name__, base.__name__, cur)):
                    return sm(self, *args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur), repr(base)
                        )
                    )
                raise trap_exception(base, cur)

            setattr(cls, base.__name__, wrapper)
            return sub_method

        return decorator

    return templator
