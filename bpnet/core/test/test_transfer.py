import math
import unittest

import numpy

from bpnet.core.transfer import (
    as_random_state, random_weight, transfer_function,
    transfer_function_derivative)


class TestTransfer(unittest.TestCase):

    def test_transfer_function_is_tanh(self):
        for x in (-3.0, -0.5, 0.0, 0.25, 2.0):
            self.assertAlmostEqual(transfer_function(x), math.tanh(x),
                                   places=14)

    def test_derivative_from_output(self):
        for x in (-2.0, -0.1, 0.0, 0.7):
            output = math.tanh(x)
            expected = 1.0 / math.cosh(x) ** 2
            self.assertAlmostEqual(
                transfer_function_derivative(output), expected, places=12)

    def test_random_weight(self):
        rs1 = numpy.random.RandomState(99)
        rs2 = numpy.random.RandomState(99)

        weights1 = [random_weight(rs1) for _ in range(100)]
        weights2 = [random_weight(rs2) for _ in range(100)]

        self.assertEqual(weights1, weights2)
        self.assertTrue(all(0.0 <= w < 1.0 for w in weights1))
        self.assertTrue(all(type(w) is float for w in weights1))

    def test_as_random_state(self):
        rs = numpy.random.RandomState(1)
        self.assertIs(as_random_state(rs), rs)
        self.assertIsInstance(as_random_state(None), numpy.random.RandomState)
        self.assertEqual(as_random_state(5).randint(1000),
                         numpy.random.RandomState(5).randint(1000))

        with self.assertRaises(TypeError):
            as_random_state('seed')


if __name__ == '__main__':
    unittest.main()
