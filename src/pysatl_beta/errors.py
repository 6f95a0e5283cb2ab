"""
Error Types
===========

Exceptions raised by PySATL Beta.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidArgument(ValueError, TypeError):
    """
    Invalid distribution parameter.

    Raised when a shape parameter is not a finite positive real number, when
    a parametrization constraint does not hold, or when a distribution is
    constructed with an incomplete set of parameters. Subclasses both
    :class:`ValueError` and :class:`TypeError` since a wrong value and a
    wrong type are reported the same way.
    """


__all__ = [
    "InvalidArgument",
]
