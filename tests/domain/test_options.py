import unittest

import ndcell as nc
from ndcell.domain._options import ArrayOptions, get_options, options, set_options


class TestArrayOptions(unittest.TestCase):
    def setUp(self) -> None:
        self._saved = get_options()

    def tearDown(self) -> None:
        set_options(**vars(self._saved))

    def test_defaults(self):
        opts = ArrayOptions()
        self.assertEqual(opts.default_int_dtype, "int64")
        self.assertEqual(opts.default_float_dtype, "float64")
        self.assertTrue(opts.strict_literals)
        self.assertEqual(opts.repr_precision, 8)

    def test_set_options_returns_previous_snapshot(self):
        before = get_options()
        prev = set_options(default_int_dtype="int32")
        self.assertIs(prev, before)
        self.assertEqual(get_options().default_int_dtype, "int32")
        self.assertEqual(nc.arange(3).dtype.name, "int32")

    def test_unknown_option_raises_type_error(self):
        with self.assertRaises(TypeError):
            set_options(no_such_option=1)
        self.assertIs(get_options(), self._saved)

    def test_wrong_kind_default_dtype_is_rejected(self):
        with self.assertRaises(nc.ArrayTypeError):
            set_options(default_int_dtype="float32")
        with self.assertRaises(nc.ArrayTypeError):
            set_options(default_float_dtype="int64")
        self.assertIs(get_options(), self._saved)

    def test_negative_precision_is_rejected(self):
        with self.assertRaises(ValueError):
            set_options(repr_precision=-1)

    def test_context_manager_restores_previous_values(self):
        with options(default_float_dtype="float32") as opts:
            self.assertEqual(opts.default_float_dtype, "float32")
            self.assertEqual(nc.zeros((2,)).dtype.name, "float32")
        self.assertEqual(get_options().default_float_dtype, "float64")
        self.assertEqual(nc.zeros((2,)).dtype.name, "float64")

    def test_context_manager_restores_on_error(self):
        with self.assertRaises(RuntimeError):
            with options(strict_literals=False):
                raise RuntimeError("boom")
        self.assertTrue(get_options().strict_literals)


if __name__ == "__main__":
    unittest.main()
