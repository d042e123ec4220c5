# flake8: noqa

from .backward_pass import BackwardPass
from .config import NetworkConfig
from .connection import Connection
from .exception import (
    InputSizeMismatch,
    MalformedTopology,
    NetworkError,
    TargetSizeMismatch,
)
from .layer import Layer
from .network import Network, validate_topology
from .neuron import Neuron
