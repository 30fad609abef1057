# krigcov/__init__.py

from . import config
from . import num
from . import kernel
from .kernel import CovarianceParameters, CorrelationFunction, Family
from .points import Points
from .covariance import Covariance
import os

__all__ = [
    "num",
    "kernel",
    "CovarianceParameters",
    "CorrelationFunction",
    "Family",
    "Points",
    "Covariance",
    "__version__",
]

# Read version from VERSION file at project root
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(_version_file, "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"
