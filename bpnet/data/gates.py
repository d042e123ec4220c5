import numpy

from bpnet.core.transfer import as_random_state
from .training_data import INPUT_LABEL, OUTPUT_LABEL, TOPOLOGY_LABEL


GATES = {
    'and': numpy.logical_and,
    'or': numpy.logical_or,
    'xor': numpy.logical_xor,
}


def make_dataset(n_samples=2000, gate='xor', random_state=None):
    """ Make a dataset of random two-input logical gate examples

    Parameters
    ----------
    n_samples: int, default=2000
        Number of examples.

    gate: str, default='xor'
        One of 'and', 'or', or 'xor'.

    random_state: numpy.random.RandomState or int, default=None
        RandomState object (or seed) for reproducible results.

    Returns
    -------
    inputs: ndarray, shape=(n_samples, 2)
        Each input is 0.0 or 1.0.

    targets: ndarray, shape=(n_samples, 1)
        The gate output for each row of `inputs`, as 0.0 or 1.0.
    """
    if gate not in GATES:
        msg = "Unknown gate {!r} (should be one of {})"
        raise ValueError(msg.format(gate, ', '.join(sorted(GATES))))

    if n_samples < 1:
        msg = "`n_samples` ({}) should be positive"
        raise ValueError(msg.format(n_samples))

    random_state = as_random_state(random_state)

    bits = random_state.randint(0, 2, size=(n_samples, 2)).astype(bool)
    targets = GATES[gate](bits[:, 0], bits[:, 1])

    return bits.astype(float), targets.astype(float).reshape(-1, 1)


def _format_values(values):
    return ' '.join(repr(float(v)) for v in values)


def write_training_file(filename, topology, inputs, targets):
    """ Write examples to `filename` in the tagged training format

    Parameters
    ----------
    filename: str
        The output file. An existing file is overwritten.

    topology: sequence of int
        Layer sizes written on the first line.

    inputs: array-like, shape=(n_samples, topology[0])

    targets: array-like, shape=(n_samples, topology[-1])
    """
    inputs = numpy.atleast_2d(numpy.asarray(inputs, dtype=float))
    targets = numpy.atleast_2d(numpy.asarray(targets, dtype=float))

    if len(inputs) != len(targets):
        msg = "Mismatch in number of examples: inputs ({}), targets ({})"
        raise ValueError(msg.format(len(inputs), len(targets)))

    with open(filename, 'w') as f:
        f.write("{} {}\n".format(
            TOPOLOGY_LABEL, ' '.join(str(int(n)) for n in topology)))

        for input_vals, target_vals in zip(inputs, targets):
            f.write("{} {}\n".format(INPUT_LABEL, _format_values(input_vals)))
            f.write("{} {}\n".format(
                OUTPUT_LABEL, _format_values(target_vals)))
