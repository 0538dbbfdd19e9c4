import logging
import unittest

import numpy as np

import ndcell as nc


class TestSharedCellScenario(unittest.TestCase):
    """Slicing, broadcasting and assignment composed on one array."""

    def setUp(self) -> None:
        self.a = nc.arange(20).reshape(4, 1, 5)
        self.ref = np.arange(20).reshape(4, 1, 5)

    def test_slice_then_assign_through_another_view(self):
        b = self.a.slice((1, 4), 0, (2, 5))
        np.testing.assert_array_equal(b.to_numpy(), self.ref[1:4, 0, 2:5])

        value = 3 + nc.full((3, 1, 1), 1) + -nc.full((1, 3), 2)
        self.assertEqual(value.shape, (3, 1, 3))

        self.a.slice((1, 4), (0, 1), (2, 5)).assign(value)
        self.ref[1:4, 0:1, 2:5] = 2

        self.assertEqual(b.tolist(), [[2, 2, 2]] * 3)
        np.testing.assert_array_equal(self.a.to_numpy(), self.ref)

    def test_operator_form_of_the_same_scenario(self):
        b = self.a[1:4, 0, 2:5]
        self.a[1:4, 0:1, 2:5] = 3 + nc.full((3, 1, 1), 1) + -nc.full((1, 3), 2)
        self.assertEqual(b.tolist(), [[2, 2, 2]] * 3)
        self.assertEqual(self.a[0].tolist(), [[0, 1, 2, 3, 4]])
        self.assertEqual(self.a[3, 0, 0:2].tolist(), [15, 16])

    def test_debug_logging(self):
        with self.assertLogs("ndcell", level=logging.DEBUG) as logs:
            self.a[1:4, 0:1, 2:5] = nc.full((1, 3), 0)
        joined = "\n".join(logs.output)
        self.assertIn("broadcast", joined)
        self.assertIn("assigned 9 values", joined)


if __name__ == "__main__":
    unittest.main()
