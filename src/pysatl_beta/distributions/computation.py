"""
Computations
============

An :class:`AnalyticalComputation` is a characteristic bound to concrete
parameters: calling it with a scalar evaluates the closed-form or numerical
routine supplied by a parametric family there.

Keyword options given at call time (tolerances, iteration caps, flags such
as ``excess``) are passed through to the wrapped routine unchanged.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_beta.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Characteristic computed by a routine of the family.

    Parameters
    ----------
    target : str
        Name of the characteristic, e.g. ``"cdf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Routine with the parameters already bound. Summary statistics ignore
        their ``data`` argument.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)
