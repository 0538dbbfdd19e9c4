import unittest

import numpy as np

import ndcell as nc
from ndcell import ArrayTypeError, BroadcastError


class TestAssign(unittest.TestCase):
    def test_scalar_fills_every_cell(self):
        a = nc.zeros((2, 3))
        out = a.assign(4)
        self.assertIs(out, a)
        self.assertEqual(a.tolist(), [[4.0] * 3] * 2)

    def test_value_is_broadcast_into_target(self):
        a = nc.zeros((2, 3))
        a.assign(nc.array([1.0, 2.0, 3.0]))
        self.assertEqual(a.tolist(), [[1.0, 2.0, 3.0], [1.0, 2.0, 3.0]])

        b = nc.zeros((2, 3))
        b.assign(nc.array([[1.0], [2.0]]))
        self.assertEqual(b.tolist(), [[1.0] * 3, [2.0] * 3])

    def test_cells_keep_identity(self):
        a = nc.arange(4)
        before = a.cells
        a.assign(nc.arange(4, start=10))
        self.assertTrue(all(x is y for x, y in zip(before, a.cells)))

    def test_target_never_grows(self):
        a = nc.arange(3)
        with self.assertRaises(BroadcastError) as ctx:
            a.assign(nc.arange(6).reshape(2, 3))
        self.assertIn("into shape (3,)", str(ctx.exception))
        self.assertEqual(a.tolist(), [0, 1, 2])

        b = nc.zeros((1, 3))
        with self.assertRaises(BroadcastError):
            b.assign(nc.zeros((2, 3)))

    def test_values_are_converted_to_target_dtype(self):
        a = nc.arange(3)
        a.assign(2.7)
        self.assertEqual(a.dtype.name, "int64")
        self.assertEqual(a.tolist(), [2, 2, 2])

        a.assign(nc.array([1.5, -1.5, 0.0]))
        self.assertEqual(a.tolist(), [1, -1, 0])

    def test_out_of_range_values_are_rejected(self):
        a = nc.arange(3, dtype="int8")
        with self.assertRaises(ArrayTypeError):
            a.assign(nc.array([300, 300, 300]))
        with self.assertRaises(ArrayTypeError):
            a.assign(300)
        with self.assertRaises(ArrayTypeError):
            a[1] = np.int64(-129)
        self.assertEqual(a.tolist(), [0, 1, 2])

        a.assign(nc.array([-128, 127, 5]))
        self.assertEqual(a.tolist(), [-128, 127, 5])

    def test_overlapping_source_behaves_like_a_copy(self):
        a = nc.arange(5)
        a[1:5] = a[0:4]
        self.assertEqual(a.tolist(), [0, 0, 1, 2, 3])

        b = nc.arange(5)
        b[0:4] = b[1:5]
        self.assertEqual(b.tolist(), [1, 2, 3, 4, 4])

    def test_setitem_matches_numpy(self):
        ref = np.zeros((3, 4), dtype=np.int64)
        a = nc.zeros((3, 4), dtype="int64")
        for key, value in [
            ((1,), 5),
            ((slice(None), 2), 7),
            ((slice(0, 2), slice(1, 3)), -1),
            ((2, 3), 9),
        ]:
            ref[key] = value
            a[key] = value
        np.testing.assert_array_equal(a.to_numpy(), ref)

    def test_writes_reach_earlier_overlapping_views(self):
        a = nc.arange(10)
        early = a.slice((2, 6))
        untouched = a.slice((8, 10))
        a[4:9] = nc.full((1,), 0)
        self.assertEqual(early.tolist(), [2, 3, 0, 0])
        self.assertEqual(untouched.tolist(), [0, 9])
        self.assertEqual(a.tolist(), [0, 1, 2, 3, 0, 0, 0, 0, 0, 9])


class TestInPlaceOperators(unittest.TestCase):
    def test_in_place_on_view_writes_through(self):
        a = nc.arange(4)
        v = a[1:3]
        original = v
        v += 10
        self.assertIs(v, original)
        self.assertEqual(a.tolist(), [0, 11, 12, 3])

        v *= 2
        v -= 1
        self.assertEqual(a.tolist(), [0, 21, 23, 3])

    def test_in_place_division(self):
        a = nc.array([1.0, 2.0])
        alias = a.reshape(2, 1)
        a /= 2
        self.assertEqual(alias.tolist(), [[0.5], [1.0]])

        b = nc.array([7, -7])
        b /= 2
        self.assertEqual(b.tolist(), [3, -3])

    def test_in_place_cannot_grow_target(self):
        a = nc.arange(3)
        with self.assertRaises(BroadcastError):
            a += nc.arange(6).reshape(2, 3)
        self.assertEqual(a.tolist(), [0, 1, 2])


if __name__ == "__main__":
    unittest.main()
