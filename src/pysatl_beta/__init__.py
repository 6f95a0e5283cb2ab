"""
PySATL Beta
===========

Beta distribution for PySATL: special-function kernels, closed-form and
numerical characteristics, and a distribution object with validated shape
parameters built on the parametric family framework.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .beta import Beta
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import InvalidArgument
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-beta")
__all__ = [
    "__version__",
    "Beta",
    "InvalidArgument",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
