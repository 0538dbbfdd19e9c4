import unittest

import numpy as np

from ndcell.domain._errors import BroadcastError, ShapeMismatchError
from ndcell.infrastructure.array._broadcast import (
    align,
    apply_plan,
    broadcast_cells,
    expand_cells,
    normalize_shape,
    shape_size,
)


class TestShapeHelpers(unittest.TestCase):
    def test_shape_size(self):
        self.assertEqual(shape_size(()), 1)
        self.assertEqual(shape_size((4,)), 4)
        self.assertEqual(shape_size((4, 1, 5)), 20)
        self.assertEqual(shape_size((3, 0, 2)), 0)

    def test_shape_size_rejects_negative(self):
        with self.assertRaises(ShapeMismatchError):
            shape_size((2, -1))

    def test_normalize_shape(self):
        self.assertEqual(normalize_shape(3), (3,))
        self.assertEqual(normalize_shape([2, np.int64(3)]), (2, 3))
        self.assertEqual(normalize_shape(()), ())
        self.assertEqual(normalize_shape(np.int64(3)), (3,))

    def test_normalize_shape_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            normalize_shape((2.0,))
        with self.assertRaises(TypeError):
            normalize_shape((True,))
        with self.assertRaises(TypeError):
            normalize_shape(True)


class TestAlign(unittest.TestCase):
    def test_equal_shapes_need_no_plans(self):
        self.assertEqual(align((2, 3), (2, 3), True), ((2, 3), (), ()))

    def test_both_sides_expand(self):
        shape, lplan, rplan = align((3, 1, 1), (1, 3), True)
        self.assertEqual(shape, (3, 1, 3))
        self.assertEqual(lplan, ((1, 3),))
        self.assertEqual(rplan, ((3, 3),))

    def test_scalar_against_matrix(self):
        shape, lplan, rplan = align((2, 3), (), True)
        self.assertEqual(shape, (2, 3))
        self.assertEqual(lplan, ())
        self.assertEqual(rplan, ((1, 3), (3, 2)))

    def test_incompatible_shapes(self):
        self.assertEqual(align((3, 2), (4,), True), (None, (), ()))

    def test_assignment_mode_never_grows_left(self):
        self.assertEqual(align((1,), (3,), False), (None, (), ()))
        shape, lplan, rplan = align((2, 3), (3,), False)
        self.assertEqual(shape, (2, 3))
        self.assertEqual(lplan, ())
        self.assertEqual(rplan, ((3, 2),))

    def test_shapes_agree_with_numpy(self):
        cases = [
            ((3, 1), (1, 4)),
            ((4, 1, 5), (5,)),
            ((2, 1, 3), (4, 1)),
            ((), (2, 2)),
            ((0, 1), (1, 3)),
        ]
        for lshape, rshape in cases:
            with self.subTest(lshape=lshape, rshape=rshape):
                shape, _, _ = align(lshape, rshape, True)
                self.assertEqual(shape, np.broadcast_shapes(lshape, rshape))


class TestExpandCells(unittest.TestCase):
    def test_repeats_each_block(self):
        self.assertEqual(
            expand_cells(["a", "b", "c", "d"], 2, 3),
            ["a", "b", "a", "b", "a", "b", "c", "d", "c", "d", "c", "d"],
        )

    def test_block_of_one(self):
        self.assertEqual(expand_cells([1, 2], 1, 2), [1, 1, 2, 2])

    def test_non_positive_block_yields_empty(self):
        self.assertEqual(expand_cells([1, 2], 0, 3), [])

    def test_apply_plan_keeps_references(self):
        a, b = object(), object()
        out = apply_plan([a, b], ((1, 2), (4, 2)))
        self.assertEqual(len(out), 8)
        self.assertTrue(all(x is a or x is b for x in out))
        self.assertEqual([x is a for x in out], [True, True, False, False] * 2)


class TestBroadcastCells(unittest.TestCase):
    def test_values_match_numpy_broadcast(self):
        left = np.arange(3).reshape(3, 1)
        right = np.arange(4).reshape(1, 4) * 10

        shape, lc, rc = broadcast_cells(
            left.shape, right.shape, left.ravel().tolist(), right.ravel().tolist(), True
        )
        expected_l, expected_r = np.broadcast_arrays(left, right)
        self.assertEqual(shape, (3, 4))
        self.assertEqual(lc, expected_l.ravel().tolist())
        self.assertEqual(rc, expected_r.ravel().tolist())

    def test_operand_error_message(self):
        with self.assertRaises(BroadcastError) as ctx:
            broadcast_cells((3, 2), (4,), [0] * 6, [0] * 4, True)
        self.assertIn("operands could not be broadcast", str(ctx.exception))

    def test_assignment_error_message(self):
        with self.assertRaises(BroadcastError) as ctx:
            broadcast_cells((2,), (3,), [0] * 2, [0] * 3, False)
        self.assertIn("from shape (3,) into shape (2,)", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
