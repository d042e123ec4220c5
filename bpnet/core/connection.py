class Connection(object):
    """ A weighted edge from a neuron to one neuron of the next layer.

    `delta_weight` is the most recent change applied to `weight` and is
    re-used as the momentum term of the next update.
    """
    __slots__ = ('weight', 'delta_weight')

    def __init__(self, weight, delta_weight=0.0):
        self.weight = weight
        self.delta_weight = delta_weight

    def __repr__(self):
        return "<Connection weight=%.6f delta_weight=%.6f>" % (
            self.weight, self.delta_weight)
