# flake8: noqa

from ._version import version as __version__

from .core import (
    InputSizeMismatch,
    MalformedTopology,
    Network,
    NetworkConfig,
    NetworkError,
    TargetSizeMismatch,
)
