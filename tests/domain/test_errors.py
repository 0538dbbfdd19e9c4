import unittest

from ndcell.domain._errors import (
    ArrayIndexError,
    ArrayTypeError,
    BroadcastError,
    NDArrayError,
    ShapeMismatchError,
    format_shape,
)


class TestErrorHierarchy(unittest.TestCase):
    def test_errors_are_catchable_as_builtins(self):
        self.assertTrue(issubclass(ArrayIndexError, IndexError))
        self.assertTrue(issubclass(ArrayTypeError, TypeError))
        self.assertTrue(issubclass(ShapeMismatchError, ValueError))
        self.assertTrue(issubclass(BroadcastError, ShapeMismatchError))
        for cls in (ArrayIndexError, ArrayTypeError, ShapeMismatchError):
            self.assertTrue(issubclass(cls, NDArrayError))

    def test_shape_mismatch_carries_shape_and_size(self):
        e = ShapeMismatchError("bad", shape=[2, 3], size=5)
        self.assertEqual(e.shape, (2, 3))
        self.assertEqual(e.size, 5)
        self.assertEqual(str(e), "bad")

        bare = ShapeMismatchError("bad")
        self.assertIsNone(bare.shape)
        self.assertIsNone(bare.size)


class TestBroadcastErrorMessages(unittest.TestCase):
    def test_format_shape(self):
        self.assertEqual(format_shape((3, 1)), "(3,1,)")
        self.assertEqual(format_shape(()), "()")

    def test_for_operands(self):
        e = BroadcastError.for_operands((3, 2), (4,))
        self.assertEqual(
            str(e),
            "operands could not be broadcast together with shapes (3,2,) (4,)",
        )
        self.assertEqual(e.lshape, (3, 2))
        self.assertEqual(e.rshape, (4,))

    def test_for_assignment(self):
        e = BroadcastError.for_assignment((2,), (3,))
        self.assertEqual(
            str(e), "could not broadcast input array from shape (3,) into shape (2,)"
        )
        self.assertEqual(e.shape, (2,))


if __name__ == "__main__":
    unittest.main()
