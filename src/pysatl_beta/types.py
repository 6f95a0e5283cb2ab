"""
Core Types
==========

Names, type descriptors and the 1D interval shared by the distribution and
family layers of PySATL Beta.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Nature of the sample space of a distribution."""

    CONTINUOUS = "continuous"


class DistributionType:
    """Marker base of distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Type of a distribution on ``R^dimension``.

    Parameters
    ----------
    kind : Kind
        Nature of the sample space.
    dimension : int
        Dimension of the sample space.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Continuous distribution on the real line."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
BoolArray = NDArray[np.bool_]


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval of the real line.

    Parameters
    ----------
    left, right : float, default=-inf, inf
        Endpoints.
    left_closed, right_closed : bool, default=True
        Whether the endpoints belong to the interval. Infinite endpoints are
        always open.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Membership test for a point or elementwise for an array.

        NaN is never contained.
        """
        arr = np.asarray(x)
        above_left = (arr > self.left) | ((arr == self.left) & self.left_closed)
        below_right = (arr < self.right) | ((arr == self.right) & self.right_closed)
        inside = above_left & below_right

        if np.ndim(arr) == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


type GenericCharacteristicName = str
"""Name of a characteristic, e.g. ``"pdf"``."""

type ParametrizationName = str
"""Name of a parametrization within a family."""


class CharacteristicName(StrEnum):
    """
    Characteristics a parametric family may provide analytically.

    Evaluators (``pdf``, ``cdf``, ``ppf``, ...) take a scalar argument,
    summary statistics (``mean``, ``var``, ...) ignore it.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    CDF = "cdf"
    LOGCDF = "logcdf"
    PPF = "ppf"
    MGF = "mgf"
    MEAN = "mean"
    VAR = "var"
    STD = "std"
    SKEW = "skewness"
    KURT = "kurtosis"
    MODE = "mode"
    MEDIAN = "median"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    BETA = "Beta"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
