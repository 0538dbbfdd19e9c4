import unittest

from ndcell.domain.utils._control_path import create_path_builder


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder("mode")

    def test_state_must_be_hashable(self) -> None:
        class C:
            mode = "A"

            def foo(self, x: int) -> int:
                return x

        with self.assertRaises(TypeError) as ctx:
            # list is unhashable
            self.decorator(C, C.foo, ["not-hashable"])(lambda self, x: x)

        self.assertIn("must be hashable", str(ctx.exception))

    def test_dispatch_selects_registered_control_path(self) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def mode(self):
                return self.__st

            def foo(self, x: int) -> int:
                # base implementation never used once wrapper installed
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 10

        @self.decorator(C, C.foo, "B")
        def foo_B(self, x: int) -> int:
            return x + 20

        self.assertEqual(C("A").foo(1), 11)
        self.assertEqual(C("B").foo(1), 21)

    def test_sub_method_receives_self(self) -> None:
        class C:
            mode = "A"

            def __init__(self, base):
                self.base = base

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return self.base + x

        self.assertEqual(C(100).foo(5), 105)

    def test_same_function_registered_for_several_states(self) -> None:
        class C:
            def __init__(self, st):
                self.mode = st

            def foo(self) -> str:
                return "base"

        @self.decorator(C, C.foo, "A")
        @self.decorator(C, C.foo, "B")
        def foo_AB(self) -> str:
            return "shared"

        self.assertEqual(C("A").foo(), "shared")
        self.assertEqual(C("B").foo(), "shared")
        self.assertEqual(C.foo.__name__, "foo")

    def test_dispatch_supports_none_state(self) -> None:
        class C:
            mode = None

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, None)
        def foo_none(self, x: int) -> int:
            return x * 2

        self.assertEqual(C().foo(3), 6)

    def test_missing_state_attribute_raises_not_implemented(self) -> None:
        class C:
            # No `mode` attribute on purpose
            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)

        self.assertIn("missing attribute", str(ctx.exception))
        self.assertIn("'mode'", str(ctx.exception))

    def test_missing_control_path_without_trap_exception_raises_not_implemented(
        self,
    ) -> None:
        class C:
            mode = "B"  # no registered path

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A")
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)

        self.assertIn("Missing control path", str(ctx.exception))
        self.assertIn("state='B'", str(ctx.exception))

    def test_trap_exception_factory_builds_raised_error(self) -> None:
        calls = []

        class MissingPathError(Exception):
            pass

        def trap(method, state):
            calls.append((method.__name__, state))
            return MissingPathError(f"no {method.__name__} for {state}")

        class C:
            mode = "B"

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A", trap)
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(MissingPathError) as ctx:
            C().foo(1)

        self.assertEqual(calls, [("foo", "B")])
        self.assertIn("no foo for B", str(ctx.exception))

    def test_trap_exception_as_exception_class(self) -> None:
        class MissingPathError(Exception):
            pass

        class C:
            mode = "B"

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "A", MissingPathError)
        def foo_A(self, x: int) -> int:
            return x + 1

        with self.assertRaises(MissingPathError):
            C().foo(1)

    def test_builders_do_not_share_registrations(self) -> None:
        other = create_path_builder("mode")

        class C:
            mode = "A"

            def foo(self) -> str:
                return "base"

        @self.decorator(C, C.foo, "A")
        def foo_first(self) -> str:
            return "first"

        class D:
            mode = "A"

            def foo(self) -> str:
                return "base"

        @other(D, D.foo, "B")
        def foo_other(self) -> str:
            return "other"

        self.assertEqual(C().foo(), "first")
        with self.assertRaises(NotImplementedError):
            D().foo()


if __name__ == "__main__":
    unittest.main()
