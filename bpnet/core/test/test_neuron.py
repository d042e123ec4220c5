import math
import unittest

import numpy

from bpnet.core.config import NetworkConfig
from bpnet.core.layer import Layer
from bpnet.core.neuron import Neuron


def make_neuron(output_val, weights, index=0):
    neuron = Neuron(len(weights), index, numpy.random.RandomState(0))
    neuron.set_output_val(output_val)
    for connection, weight in zip(neuron.output_weights, weights):
        connection.weight = weight
    return neuron


class TestNeuron(unittest.TestCase):

    def test_construction(self):
        rs = numpy.random.RandomState(1234)
        neuron = Neuron(5, 3, rs)

        self.assertEqual(neuron.index, 3)
        self.assertEqual(neuron.get_output_val(), 0.0)
        self.assertEqual(len(neuron.output_weights), 5)

        expected = numpy.random.RandomState(1234).random_sample(5)
        weights = [c.weight for c in neuron.output_weights]
        self.assertTrue(numpy.allclose(weights, expected, rtol=0, atol=0))
        self.assertTrue(all(c.delta_weight == 0.0
                            for c in neuron.output_weights))

    def test_output_neuron_has_no_connections(self):
        neuron = Neuron(0, 0, numpy.random.RandomState(0))
        self.assertEqual(neuron.output_weights, [])

    def test_feed_forward_reads_own_slot(self):
        prev_layer = Layer([
            make_neuron(0.5, [0.1, 0.2]),
            make_neuron(-1.0, [0.3, 0.4]),
            make_neuron(1.0, [0.5, 0.6]),  # bias
        ])

        neuron = make_neuron(0.0, [], index=1)
        neuron.feed_forward(prev_layer)

        expected = math.tanh(0.5 * 0.2 + -1.0 * 0.4 + 1.0 * 0.6)
        self.assertAlmostEqual(neuron.get_output_val(), expected, places=14)

    def test_calc_output_gradient(self):
        neuron = make_neuron(0.6, [])
        gradient = neuron.calc_output_gradient(1.0)
        self.assertAlmostEqual(gradient, 0.4 * (1.0 - 0.36), places=14)

    def test_calc_hidden_gradient_skips_next_bias(self):
        next_layer = Layer([
            make_neuron(0.0, []),
            make_neuron(0.0, []),
            make_neuron(1.0, []),  # bias
        ])
        next_gradients = [0.2, -0.5, 100.0]

        neuron = make_neuron(0.3, [0.7, 0.9])
        gradient = neuron.calc_hidden_gradient(next_layer, next_gradients)

        expected = (0.7 * 0.2 + 0.9 * -0.5) * (1.0 - 0.09)
        self.assertAlmostEqual(gradient, expected, places=14)

    def test_update_input_weights(self):
        config = NetworkConfig(eta=0.2, alpha=0.5)

        prev_layer = Layer([
            make_neuron(0.5, [0.1, 0.2]),
            make_neuron(1.0, [0.3, 0.4]),  # bias
        ])
        prev_layer[0].output_weights[1].delta_weight = 0.1

        neuron = make_neuron(0.0, [], index=1)
        neuron.update_input_weights(prev_layer, 0.4, config)

        delta0 = 0.2 * 0.5 * 0.4 + 0.5 * 0.1
        delta1 = 0.2 * 1.0 * 0.4
        connection0 = prev_layer[0].output_weights[1]
        connection1 = prev_layer[1].output_weights[1]

        self.assertAlmostEqual(connection0.delta_weight, delta0, places=14)
        self.assertAlmostEqual(connection0.weight, 0.2 + delta0, places=14)
        self.assertAlmostEqual(connection1.delta_weight, delta1, places=14)
        self.assertAlmostEqual(connection1.weight, 0.4 + delta1, places=14)

        # Slot 0 belongs to another neuron and is left alone
        self.assertEqual(prev_layer[0].output_weights[0].weight, 0.1)
        self.assertEqual(prev_layer[1].output_weights[0].delta_weight, 0.0)


class TestLayer(unittest.TestCase):

    def test_functional_and_bias(self):
        neurons = [make_neuron(v, [], index=i)
                   for i, v in enumerate([0.1, 0.2, 1.0])]
        layer = Layer(neurons)

        self.assertEqual(len(layer), 3)
        self.assertEqual(layer.n_functional, 2)
        self.assertIs(layer.bias_neuron, neurons[-1])
        self.assertEqual(list(layer.functional_neurons), neurons[:2])
        self.assertEqual(layer.output_vals(), [0.1, 0.2])
        self.assertEqual(list(layer), neurons)

    def test_too_small(self):
        with self.assertRaises(ValueError):
            Layer([make_neuron(1.0, [])])


if __name__ == '__main__':
    unittest.main()
