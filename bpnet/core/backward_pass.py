class BackwardPass(object):
    """ Holds the per-neuron gradients of a single backward pass.

    Gradients are filled in one whole layer at a time, from the output
    layer back toward the input layer. Reading a layer that has not been
    computed yet in this pass is an error rather than a stale value.
    """

    def __init__(self, n_layers):
        self.n_layers = n_layers
        self._gradients = [None] * n_layers

    def __repr__(self):
        done = [i for i, g in enumerate(self._gradients) if g is not None]
        return "<BackwardPass n_layers=%d, computed=%s>" % (
            self.n_layers, done)

    def set_layer_gradients(self, layer_num, gradients):
        if not 0 < layer_num < self.n_layers:
            msg = "Layer {} has no gradients (valid layers are 1 to {})"
            raise IndexError(msg.format(layer_num, self.n_layers - 1))
        self._gradients[layer_num] = tuple(gradients)

    def has_layer(self, layer_num):
        return self._gradients[layer_num] is not None

    def gradients(self, layer_num):
        """ Returns the finished gradients of layer `layer_num`
        """
        gradients = self._gradients[layer_num]
        if gradients is None:
            msg = "Gradients of layer {} were not computed in this pass"
            raise RuntimeError(msg.format(layer_num))
        return gradients
