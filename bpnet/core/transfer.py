""" Numeric helpers shared by the neurons: the tanh transfer function, its
derivative, and the initial weight draw
"""
import numpy


def transfer_function(x):
    """ Hyperbolic tangent; output range (-1, 1)
    """
    return numpy.tanh(x)


def transfer_function_derivative(output):
    """ Derivative of tanh evaluated from the already computed output,
    i.e., d/dx tanh(x) = 1 - tanh(x)**2
    """
    return 1.0 - output * output


def random_weight(random_state):
    """ A single weight drawn uniformly from [0, 1)

    Parameters
    ----------
    random_state: numpy.random.RandomState
        The source of randomness. Using the same seeded state reproduces the
        same sequence of weights.
    """
    return float(random_state.random_sample())


def as_random_state(random_state=None):
    """ Returns a `numpy.random.RandomState` from None, an int seed, or an
    existing RandomState instance
    """
    if random_state is None:
        return numpy.random.RandomState()
    elif isinstance(random_state, numpy.random.RandomState):
        return random_state
    elif isinstance(random_state, (int, numpy.integer)):
        return numpy.random.RandomState(random_state)
    else:
        msg = "`random_state` should be None, an int or a RandomState, not {}"
        raise TypeError(msg.format(type(random_state).__name__))
