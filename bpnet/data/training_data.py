""" Reader for the line-oriented tagged training format::

    topology: 2 4 1
    in: 1.0 0.0
    out: 1.0
    in: 0.0 0.0
    out: 0.0

The first line gives the number of functional neurons per layer. The rest
of the file alternates `in:` and `out:` lines, one pair per example.
"""
from collections import namedtuple
import logging

from bpnet.core.exception import MalformedTopology
from bpnet.core.network import validate_topology


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

TOPOLOGY_LABEL = 'topology:'
INPUT_LABEL = 'in:'
OUTPUT_LABEL = 'out:'


# Yielded by the example iterators of the data sources
TrainingExample = namedtuple(
    'TrainingExample', ['index', 'inputs', 'targets'])


def parse_values(tokens):
    """ Parse float values from `tokens`, stopping at the first token that
    is not a number
    """
    values = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def parse_topology(line):
    """ Parse a `topology:` line into a tuple of layer sizes

    Raises
    ------
    MalformedTopology
        If the label is missing or the layer sizes are not at least two
        positive integers.
    """
    tokens = line.split()

    if not tokens or tokens[0] != TOPOLOGY_LABEL:
        msg = "Expected a line starting with '{}', got {!r}"
        raise MalformedTopology(msg.format(TOPOLOGY_LABEL, line.strip()))

    topology = []
    for token in tokens[1:]:
        try:
            topology.append(int(token))
        except ValueError:
            msg = "Layer size {!r} is not an integer"
            raise MalformedTopology(msg.format(token))

    return validate_topology(topology)


class TrainingData:
    """ Reads a topology and then examples from a tagged training file
    """

    def __init__(self, filename):
        self.filename = filename
        self._file = open(filename, 'r')
        self._next_line = self._file.readline()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self._file.close()

    def _readline(self):
        line = self._next_line
        self._next_line = self._file.readline()

        # Blank lines carry nothing; skip them so a trailing newline
        # doesn't look like one more (empty) example
        while self._next_line and not self._next_line.strip():
            self._next_line = self._file.readline()

        return line

    def is_eof(self):
        return not self._next_line

    def get_topology(self):
        """ Read the topology line. This should be the first read from
        the file

        Raises
        ------
        MalformedTopology
            If the file is empty or the first line is not a valid
            topology line.
        """
        if self.is_eof():
            msg = "No topology found, {} is empty"
            raise MalformedTopology(msg.format(self.filename))

        topology = parse_topology(self._readline())
        logger.debug("Read topology {} from {}".format(
            topology, self.filename))

        return topology

    def _get_labeled_values(self, label):
        tokens = self._readline().split()
        if tokens and tokens[0] == label:
            return parse_values(tokens[1:])
        return []

    def get_next_inputs(self):
        """ Returns the values of the next line if it is an `in:` line,
        otherwise an empty list
        """
        return self._get_labeled_values(INPUT_LABEL)

    def get_target_outputs(self):
        """ Returns the values of the next line if it is an `out:` line,
        otherwise an empty list
        """
        return self._get_labeled_values(OUTPUT_LABEL)

    def iterate_examples(self):
        """ Yields :class:`TrainingExample` tuples until the end of the
        file. The topology must have been read first.

        No length checks are done here; a short or missing input line
        yields an example whose `inputs` don't match the network, which
        is how the trainer detects the end of usable data.
        """
        index = 0
        while not self.is_eof():
            inputs = self.get_next_inputs()
            targets = self.get_target_outputs()
            yield TrainingExample(index=index, inputs=inputs, targets=targets)
            index += 1
