class Layer(object):
    """ An ordered, fixed-length sequence of neurons. The last neuron is the
    layer's bias neuron; the others are the functional neurons.
    """

    def __init__(self, neurons):
        self._neurons = tuple(neurons)

        if len(self._neurons) < 2:
            msg = "A layer needs at least one functional and a bias neuron"
            raise ValueError(msg)

    def __len__(self):
        return len(self._neurons)

    def __iter__(self):
        return iter(self._neurons)

    def __getitem__(self, index):
        return self._neurons[index]

    def __repr__(self):
        return "<Layer n_functional=%d>" % self.n_functional

    @property
    def n_functional(self):
        return len(self._neurons) - 1

    @property
    def functional_neurons(self):
        return self._neurons[:-1]

    @property
    def bias_neuron(self):
        return self._neurons[-1]

    def output_vals(self):
        """ Output values of the functional neurons, in layer order
        """
        return [neuron.output_val for neuron in self.functional_neurons]
