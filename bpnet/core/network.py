""" A fully connected feedforward network trained one example at a time by
backpropagation with momentum.

Every layer, the output layer included, ends with a bias neuron whose
output is pinned to 1.0. Results are read from the output layer while
skipping that last neuron.

Per example the caller must feed forward exactly once and then
back-propagate exactly once::

    net = Network([2, 4, 1], random_state=1234)
    net.feed_forward([1.0, 0.0])
    outputs = net.get_results()
    net.back_prop([1.0])
"""
import logging
import math
import numbers

from .backward_pass import BackwardPass
from .config import NetworkConfig
from .exception import InputSizeMismatch, MalformedTopology, TargetSizeMismatch
from .layer import Layer
from .neuron import Neuron
from .transfer import as_random_state


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def validate_topology(topology):
    """ Returns `topology` as a tuple of ints, raising
    :class:`MalformedTopology` if it doesn't describe a network
    """
    try:
        topology = tuple(topology)
    except TypeError:
        msg = "Topology should be a sequence of neuron counts, not {}"
        raise MalformedTopology(msg.format(type(topology).__name__))

    if len(topology) < 2:
        msg = "Topology needs at least two layers, got {}"
        raise MalformedTopology(msg.format(len(topology)))

    for i, n in enumerate(topology):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            msg = "Layer {} size ({!r}) is not an integer"
            raise MalformedTopology(msg.format(i, n))
        if n < 1:
            msg = "Layer {} size ({}) should be positive"
            raise MalformedTopology(msg.format(i, n))

    return tuple(int(n) for n in topology)


class Network(object):
    """ A multilayer perceptron with tanh units
    """

    def __init__(self, topology, config=None, random_state=None):
        """
        Parameters
        ----------
        topology: sequence of int
            Number of functional (non-bias) neurons in each layer, from the
            input layer to the output layer, e.g., `[3, 2, 1]`.

        config: NetworkConfig, default=None
            The training hyperparameters. The default (None) uses
            `NetworkConfig()`.

        random_state: numpy.random.RandomState or int, default=None
            Source of the initial weights. Provide a RandomState (or a
            seed) for reproducible results.
        """
        self._topology = validate_topology(topology)
        self._config = config if config is not None else NetworkConfig()
        self.random_state = as_random_state(random_state)

        self._error = 0.0
        self._recent_average_error = 0.0
        self.last_backward_pass = None

        n_layers = len(self._topology)
        layers = []

        for layer_num in range(n_layers):
            if layer_num == n_layers - 1:
                num_outputs = 0
            else:
                num_outputs = self._topology[layer_num + 1]

            # One more neuron than the topology asks for: the bias neuron
            neurons = [
                Neuron(num_outputs, neuron_num, self.random_state)
                for neuron_num in range(self._topology[layer_num] + 1)
            ]

            # Force the bias node's output value to 1.0. It's the last
            # neuron created above
            neurons[-1].set_output_val(1.0)

            layers.append(Layer(neurons))

        self._layers = tuple(layers)

        logger.debug("Made a network with topology {} ({} connections)"
                     .format(self._topology, self.n_connections))

    def __repr__(self):
        return "<Network topology=%s>" % (self._topology,)

    @property
    def topology(self):
        return self._topology

    @property
    def config(self):
        return self._config

    @property
    def layers(self):
        return self._layers

    @property
    def n_connections(self):
        return sum(len(neuron.output_weights)
                   for layer in self._layers for neuron in layer)

    @property
    def error(self):
        """ RMS error over the output neurons of the last example
        """
        return self._error

    def get_recent_average_error(self):
        return self._recent_average_error

    def feed_forward(self, input_vals):
        """ Latch `input_vals` into the input layer and propagate forward

        Raises
        ------
        InputSizeMismatch
            If the number of inputs doesn't match the input layer.
        """
        input_vals = list(input_vals)
        input_layer = self._layers[0]

        if len(input_vals) != input_layer.n_functional:
            msg = "Got {} input values but the input layer has {} neurons"
            raise InputSizeMismatch(
                msg.format(len(input_vals), input_layer.n_functional))

        # Convert everything before latching, so a bad value leaves the input
        # layer untouched
        input_vals = [float(val) for val in input_vals]

        for neuron, val in zip(input_layer.functional_neurons, input_vals):
            neuron.set_output_val(val)

        for layer_num in range(1, len(self._layers)):
            prev_layer = self._layers[layer_num - 1]
            for neuron in self._layers[layer_num].functional_neurons:
                neuron.feed_forward(prev_layer)

    def back_prop(self, target_vals):
        """ Compute the gradients for the last forward pass and update every
        connection weight

        Returns
        -------
        backward_pass: BackwardPass
            The gradients computed during this pass. Also kept as
            `self.last_backward_pass`.

        Raises
        ------
        TargetSizeMismatch
            If the number of targets doesn't match the output layer.
        """
        target_vals = [float(t) for t in target_vals]
        output_layer = self._layers[-1]
        n_outputs = output_layer.n_functional

        if len(target_vals) != n_outputs:
            msg = "Got {} target values but the output layer has {} neurons"
            raise TargetSizeMismatch(msg.format(len(target_vals), n_outputs))

        # Overall net error (RMS of output neuron errors)
        error = 0.0
        for neuron, target in zip(output_layer.functional_neurons,
                                  target_vals):
            delta = target - neuron.output_val
            error += delta * delta
        error /= n_outputs
        self._error = math.sqrt(error)

        # Recent average measurement
        k = self._config.smoothing_factor
        self._recent_average_error = (
            (self._recent_average_error * k + self._error) / (k + 1.0))

        n_layers = len(self._layers)
        backward_pass = BackwardPass(n_layers)

        # Output layer gradients
        backward_pass.set_layer_gradients(n_layers - 1, [
            neuron.calc_output_gradient(target)
            for neuron, target in zip(output_layer.functional_neurons,
                                      target_vals)
        ])

        # Hidden layer gradients, each layer finished before the one before
        # it, since they read the gradients of the layer they feed
        for layer_num in range(n_layers - 2, 0, -1):
            hidden_layer = self._layers[layer_num]
            next_layer = self._layers[layer_num + 1]
            next_gradients = backward_pass.gradients(layer_num + 1)

            backward_pass.set_layer_gradients(layer_num, [
                neuron.calc_hidden_gradient(next_layer, next_gradients)
                for neuron in hidden_layer
            ])

        # For all layers from outputs to first hidden layer, update the
        # connection weights
        for layer_num in range(n_layers - 1, 0, -1):
            layer = self._layers[layer_num]
            prev_layer = self._layers[layer_num - 1]
            gradients = backward_pass.gradients(layer_num)

            for neuron in layer.functional_neurons:
                neuron.update_input_weights(
                    prev_layer, gradients[neuron.index], self._config)

        self.last_backward_pass = backward_pass

        return backward_pass

    def get_results(self):
        """ Output values of the output layer, bias neuron excluded
        """
        return self._layers[-1].output_vals()
