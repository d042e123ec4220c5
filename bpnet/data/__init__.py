# flake8: noqa

from .examples_handler import ExamplesHandler
from .gates import make_dataset, write_training_file
from .training_data import TrainingData, TrainingExample
