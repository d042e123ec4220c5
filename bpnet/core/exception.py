class NetworkError(Exception):
    """ Base class for errors raised by network construction and training
    """


class MalformedTopology(NetworkError):
    """ Raised when the layer sizes of a network cannot be determined, e.g.,
    fewer than two layers or a non-positive neuron count. There is no valid
    network to build, so the run cannot continue
    """


class InputSizeMismatch(NetworkError):
    """ Raised when an input vector does not match the size of the input
    layer. Training runs stop consuming examples when they see this
    """


class TargetSizeMismatch(NetworkError):
    """ Raised when a target vector does not match the size of the output
    layer
    """
