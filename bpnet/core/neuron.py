from .connection import Connection
from .transfer import (
    random_weight, transfer_function, transfer_function_derivative)


class Neuron(object):
    """ A single tanh unit. The neuron owns its *outgoing* connections: the
    weight from this neuron to neuron `j` of the next layer is
    `self.output_weights[j].weight`.

    Gradients are not stored on the neuron. They are returned by the
    gradient methods and held by a
    :class:`bpnet.core.backward_pass.BackwardPass` for the duration of a
    single backward pass.
    """

    def __init__(self, num_outputs, index, random_state):
        """
        Parameters
        ----------
        num_outputs: int
            Number of functional neurons in the next layer (0 for neurons
            of the output layer).

        index: int
            Position of this neuron in its layer. This is the slot read in
            the connections of every neuron of the previous layer.

        random_state: numpy.random.RandomState
            Source of the initial weights, drawn uniformly from [0, 1).
        """
        self.index = index
        self.output_val = 0.0
        self.output_weights = [
            Connection(weight=random_weight(random_state))
            for _ in range(num_outputs)
        ]

    def __repr__(self):
        return "<Neuron index=%d, output_val=%.6f, n_outputs=%d>" % (
            self.index, self.output_val, len(self.output_weights))

    def set_output_val(self, val):
        self.output_val = val

    def get_output_val(self):
        return self.output_val

    def feed_forward(self, prev_layer):
        """ Sum the previous layer's outputs (our inputs), bias neuron
        included, weighted by their connections to this neuron, and apply
        the transfer function
        """
        total = 0.0
        for neuron in prev_layer:
            total += (neuron.output_val *
                      neuron.output_weights[self.index].weight)
        self.output_val = float(transfer_function(total))

    def calc_output_gradient(self, target_val):
        """ Returns the gradient of an output-layer neuron for `target_val`
        """
        delta = target_val - self.output_val
        return delta * transfer_function_derivative(self.output_val)

    def _sum_dow(self, next_layer, next_gradients):
        """ Sum of this neuron's contributions to the errors of the
        functional neurons it feeds in `next_layer`
        """
        total = 0.0
        for n in range(len(next_layer) - 1):
            total += self.output_weights[n].weight * next_gradients[n]
        return total

    def calc_hidden_gradient(self, next_layer, next_gradients):
        """ Returns the gradient of a hidden-layer neuron.

        Parameters
        ----------
        next_layer: Layer
            The layer this neuron feeds.

        next_gradients: sequence of float
            The finished gradients of `next_layer`, indexed by neuron.
        """
        dow = self._sum_dow(next_layer, next_gradients)
        return dow * transfer_function_derivative(self.output_val)

    def update_input_weights(self, prev_layer, gradient, config):
        """ Update the weights feeding this neuron. These live in the
        connections of the neurons of `prev_layer`, at slot `self.index`.

        Parameters
        ----------
        prev_layer: Layer
            The layer feeding this neuron (bias neuron included).

        gradient: float
            This neuron's gradient from the current backward pass.

        config: NetworkConfig
            Supplies the learning rate `eta` and momentum `alpha`.
        """
        for neuron in prev_layer:
            connection = neuron.output_weights[self.index]
            old_delta_weight = connection.delta_weight

            new_delta_weight = (
                # Individual input, magnified by the gradient and train rate
                config.eta * neuron.output_val * gradient
                # Also add momentum, a fraction of the previous delta weight
                + config.alpha * old_delta_weight
            )

            connection.delta_weight = new_delta_weight
            connection.weight += new_delta_weight
