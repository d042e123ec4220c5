""" Drives a network through training examples, one forward then backward
pass per example, and reports on the run
"""
from collections import namedtuple
import logging

from bpnet.core.exception import InputSizeMismatch
from bpnet.core.network import Network
from bpnet.data.training_data import TrainingData


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


TrainingReport = namedtuple(
    'TrainingReport',
    ['n_examples', 'error_history', 'results', 'stopped_early',
     'stop_reason'])


def format_values(label, values):
    return "{} {}".format(label, ' '.join('{:g}'.format(v) for v in values))


class Trainer:
    """ Trains a :class:`bpnet.core.network.Network` on a stream of examples
    """

    def __init__(self, network, progress_every=1):
        """
        Parameters
        ----------
        network: Network
            The network to train. It is modified in place.

        progress_every: int, default=1
            Log a progress line every `progress_every` examples. Use 0 to
            turn progress lines off.
        """
        if progress_every < 0:
            msg = "`progress_every` ({}) should be non-negative"
            raise ValueError(msg.format(progress_every))

        self.network = network
        self.progress_every = progress_every

    def _log_progress(self, training_pass, example, results):
        msg = "Pass {:d}: {}; {}; {}; Net recent average error: {:g}".format(
            training_pass,
            format_values("Inputs:", example.inputs),
            format_values("Outputs:", results),
            format_values("Targets:", example.targets),
            self.network.get_recent_average_error())
        logger.info(msg)

    def train(self, examples, n_passes=1):
        """ Run the per-example training cycle over `examples`

        Parameters
        ----------
        examples: iterable of TrainingExample, or callable
            The examples. When `n_passes` is more than 1, this should be a
            callable returning a fresh iterable for each pass.

        n_passes: int, default=1
            Number of times to go over the examples.

        Returns
        -------
        report: TrainingReport
            `error_history` holds the recent average error after each
            completed example. If an input vector doesn't fit the input
            layer the run stops there, `stopped_early` is True and
            `stop_reason` holds the message.

        Raises
        ------
        TargetSizeMismatch
            If a target vector doesn't fit the output layer.
        """
        if n_passes < 1:
            msg = "`n_passes` ({}) should be positive"
            raise ValueError(msg.format(n_passes))

        if n_passes > 1 and not callable(examples):
            msg = "`examples` should be callable when `n_passes` > 1"
            raise TypeError(msg)

        error_history = []
        results = []
        training_pass = 0

        for ipass in range(n_passes):
            pass_examples = examples() if callable(examples) else examples

            for example in pass_examples:
                training_pass += 1

                # Get new input data and feed it forward
                try:
                    self.network.feed_forward(example.inputs)
                except InputSizeMismatch as e:
                    logger.warning(
                        "Stopping at pass {:d}: {}".format(training_pass, e))
                    return TrainingReport(
                        n_examples=len(error_history),
                        error_history=error_history,
                        results=results,
                        stopped_early=True,
                        stop_reason=str(e))

                # Collect the net's actual results
                results = self.network.get_results()

                # Train the net what the outputs should have been
                self.network.back_prop(example.targets)
                error_history.append(
                    self.network.get_recent_average_error())

                if (self.progress_every and
                        training_pass % self.progress_every == 0):
                    self._log_progress(training_pass, example, results)

            logger.debug("Finished pass {:d} / {:d} over the examples".format(
                ipass + 1, n_passes))

        logger.info("Done, net recent average error: {:g}".format(
            self.network.get_recent_average_error()))

        return TrainingReport(
            n_examples=len(error_history),
            error_history=error_history,
            results=results,
            stopped_early=False,
            stop_reason=None)


def train_from_file(filename, config=None, random_state=None, n_passes=1,
                    progress_every=1):
    """ Build a network from the topology line of a tagged training file
    and train it on the file's examples

    Returns
    -------
    network, report: Network, TrainingReport

    Raises
    ------
    MalformedTopology
        If the file doesn't start with a valid topology line.
    """
    with TrainingData(filename) as training_data:
        topology = training_data.get_topology()

    network = Network(topology, config=config, random_state=random_state)

    def iterate_file_examples():
        with TrainingData(filename) as training_data:
            training_data.get_topology()
            for example in training_data.iterate_examples():
                yield example

    trainer = Trainer(network, progress_every=progress_every)
    report = trainer.train(iterate_file_examples, n_passes=n_passes)

    return network, report
