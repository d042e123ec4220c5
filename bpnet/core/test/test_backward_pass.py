import unittest

from bpnet.core.backward_pass import BackwardPass


class TestBackwardPass(unittest.TestCase):

    def test_set_and_get(self):
        backward_pass = BackwardPass(3)
        backward_pass.set_layer_gradients(2, [0.5])
        backward_pass.set_layer_gradients(1, [0.1, 0.2, 0.3])

        self.assertEqual(backward_pass.gradients(2), (0.5,))
        self.assertEqual(backward_pass.gradients(1), (0.1, 0.2, 0.3))
        self.assertTrue(backward_pass.has_layer(1))

    def test_uncomputed_layer(self):
        backward_pass = BackwardPass(3)
        backward_pass.set_layer_gradients(2, [0.5])

        self.assertFalse(backward_pass.has_layer(1))
        with self.assertRaises(RuntimeError):
            backward_pass.gradients(1)

    def test_input_layer_has_no_gradients(self):
        backward_pass = BackwardPass(3)

        for layer_num in (0, 3):
            with self.assertRaises(IndexError):
                backward_pass.set_layer_gradients(layer_num, [0.0])


if __name__ == '__main__':
    unittest.main()
