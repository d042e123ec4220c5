import contextlib
import logging
import os

import h5py
import numpy

from bpnet.core.network import validate_topology
from .training_data import TrainingExample


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


EXAMPLE_KEY = "example-{:d}"
INPUTS_KEY = "inputs"
TARGETS_KEY = "targets"
TOPOLOGY_ATTR = "topology"


class ExamplesHandler:
    """ Stores training examples (never weights) in an hdf5 file and
    iterates over them in index order
    """

    def __init__(self, h5_file, inputs=None, targets=None, topology=None):
        """ Initialize an examples handler

        Parameters
        ----------
        h5_file: str
            A (possibly already existing) hdf5 file of examples.

        inputs: array-like, shape=(n_examples, topology[0]), default=None
            Input vectors. Necessary when `h5_file` does not exist.

        targets: array-like, shape=(n_examples, topology[-1]), default=None
            Respective target vectors for `inputs`. Necessary when
            `h5_file` does not exist.

        topology: sequence of int, default=None
            Layer sizes of the network the examples are meant for. Necessary
            when `h5_file` does not exist.

        Note
        ----
        Either :code:`h5_file` should be the name of an existing hdf5 file
        with appropriate structure (see :meth:`convert_to_hdf5`), or
        `inputs`, `targets` and `topology` should be given, and the file
        will be created from them.
        """
        self.h5_file = os.path.abspath(h5_file)

        if not os.path.exists(self.h5_file):
            if inputs is None or targets is None or topology is None:
                msg = ("Provided `h5_file` {} doesn't exist but no inputs, "
                       "targets or topology provided")
                raise ValueError(msg.format(h5_file))

            self.convert_to_hdf5(
                inputs=inputs, targets=targets, topology=topology)

        with self.open_h5_file() as hf:
            self.topology = tuple(int(n) for n in hf.attrs[TOPOLOGY_ATTR])
            self.n_examples = len(hf.keys())

    def convert_to_hdf5(self, inputs, targets, topology):
        """ Write the examples to the hdf5 file. The format, assuming `hf` is
        an h5py `File`, is::

            hf
            |_ attrs
            |  |_ topology
            |_ 'example-i'
               |_ inputs
               |_ targets

        """
        if os.path.exists(self.h5_file):
            msg = "Dataset already exists at {}"
            raise FileExistsError(msg.format(self.h5_file))

        topology = validate_topology(topology)
        inputs = numpy.atleast_2d(numpy.asarray(inputs, dtype=float))
        targets = numpy.atleast_2d(numpy.asarray(targets, dtype=float))

        ######################
        # Input validation

        if len(inputs) != len(targets):
            msg = "Mismatch in number of examples: inputs ({}), targets ({})"
            raise ValueError(msg.format(len(inputs), len(targets)))

        if inputs.shape[1] != topology[0]:
            msg = "inputs have {} values but the input layer has {} neurons"
            raise ValueError(msg.format(inputs.shape[1], topology[0]))

        if targets.shape[1] != topology[-1]:
            msg = "targets have {} values but the output layer has {} neurons"
            raise ValueError(msg.format(targets.shape[1], topology[-1]))

        # End input validation
        ##########################

        n_examples = len(inputs)

        with h5py.File(self.h5_file, mode='w') as hf:
            hf.attrs[TOPOLOGY_ATTR] = numpy.array(topology, dtype=int)

            for i in range(n_examples):
                g = hf.create_group(EXAMPLE_KEY.format(i))
                g.create_dataset(INPUTS_KEY, data=inputs[i])
                g.create_dataset(TARGETS_KEY, data=targets[i])

        logger.info("Wrote {} examples to {}".format(n_examples, self.h5_file))

    @contextlib.contextmanager
    def open_h5_file(self):
        """ Opens the data file
        """
        h5 = None
        try:
            h5 = h5py.File(self.h5_file, mode='r')
            yield h5
        finally:
            if h5:
                h5.close()

    def get_example_by_index(self, index):
        """ Get the `TrainingExample` corresponding to `index`
        """
        if not 0 <= index < self.n_examples:
            msg = "Example index {} out of range ({} examples)"
            raise IndexError(msg.format(index, self.n_examples))

        with self.open_h5_file() as hf:
            group = hf[EXAMPLE_KEY.format(index)]
            return TrainingExample(
                index=index,
                inputs=list(group[INPUTS_KEY][...]),
                targets=list(group[TARGETS_KEY][...]))

    def iterate_examples(self):
        """ Yields :class:`TrainingExample` tuples in index order
        """
        with self.open_h5_file() as hf:
            for i in range(self.n_examples):
                group = hf[EXAMPLE_KEY.format(i)]
                yield TrainingExample(
                    index=i,
                    inputs=list(group[INPUTS_KEY][...]),
                    targets=list(group[TARGETS_KEY][...]))
