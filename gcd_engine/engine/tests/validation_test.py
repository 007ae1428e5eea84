import unittest
from contextlib import contextmanager

import numpy as np

from gcd_engine.engine.errors import InvalidArgument, OutOfRange
from gcd_engine.engine.validation import validate_operands, operand_bounds


@contextmanager
def safe(testcase, exc_type=Exception):
    try:
        yield
    except exc_type as e:
        testcase.fail(f"Unexpectedly raised {type(e).__name__}: {e}")


class TestValidation(unittest.TestCase):

    def test_bounds(self):
        self.assertEqual((-(2 ** 31 - 1), 2 ** 31 - 1), operand_bounds(np.int32))
        self.assertEqual((-127, 127), operand_bounds(np.int8))

    def test_copy(self):
        operands = [np.int64(4), 6, -8]
        with safe(self):
            values = validate_operands(operands)
        self.assertEqual((4, 6, -8), values)
        self.assertTrue(all(type(v) is int for v in values))
        values = validate_operands(iter([1, 2]))
        self.assertEqual((1, 2), values)

    def test_zero_check(self):
        with self.assertRaises(InvalidArgument):
            validate_operands([0, 0, 0, 0, 0], strict_zero_check=True)
        with safe(self):
            validate_operands([0, 0, 0, 0, 3], strict_zero_check=True)
        with self.assertRaises(InvalidArgument):
            validate_operands([0, 0, 0, 0, 3], strict_zero_check=False)
        with safe(self):
            validate_operands([0, 0, 0, 3], strict_zero_check=False)
            validate_operands([0, 3], strict_zero_check=False)

    def test_zero_check_before_range(self):
        with self.assertRaises(InvalidArgument):
            validate_operands([0, 0, 0, 0, -2 ** 31], strict_zero_check=False)

    def test_range(self):
        with self.assertRaises(OutOfRange) as ctx:
            validate_operands([100, -128, 3, 200], dtype=np.int8)
        self.assertEqual([1, 3], ctx.exception.positions)
        self.assertEqual([-128, 200], ctx.exception.values)
        with safe(self):
            validate_operands([127, -127], dtype=np.int8)

    def test_message(self):
        self.assertEqual(InvalidArgument.default_msg, str(InvalidArgument()))
        self.assertIn('got 1', str(self._raised(lambda: validate_operands([1]))))
        self.assertIn('and 1 more', str(self._raised(lambda: validate_operands([-2 ** 31, -2 ** 31]))))

    def _raised(self, func):
        try:
            func()
        except Exception as e:
            return e
        self.fail('Nothing was raised')


if __name__ == "__main__":
    unittest.main()
