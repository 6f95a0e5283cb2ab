"""
Beta Distribution
=================

:class:`Beta` — a Beta distribution with mutable, validated shape parameters
exposing its summary statistics as properties and its distribution functions
as methods.

Examples
--------
>>> dist = Beta(2.0, 4.0)
>>> round(dist.mean, 3)
0.333
>>> round(dist.cdf(0.8), 3)
0.993
>>> dist.alpha = 3.0
>>> dist.alpha
3.0
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from pysatl_beta.errors import InvalidArgument
from pysatl_beta.families.configuration import configure_families_register
from pysatl_beta.families.distribution import ParametricFamilyDistribution
from pysatl_beta.types import CharacteristicName, FamilyName

if TYPE_CHECKING:
    from typing import Any


class Beta(ParametricFamilyDistribution):
    """
    Beta distribution.

    Parameters
    ----------
    alpha : float, optional
        First shape parameter, a finite positive number.
    beta : float, optional
        Second shape parameter, a finite positive number.

    Either both shape parameters are given or neither, in which case the
    distribution is uniform on ``[0, 1]`` (``alpha = beta = 1``).

    Raises
    ------
    InvalidArgument
        If only one shape parameter is given or a shape parameter is not a
        finite positive number.

    Notes
    -----
    Summary statistics are recomputed from the current shape parameters on
    every access, nothing is cached.
    """

    __slots__ = ()

    def __init__(self, alpha: float | None = None, beta: float | None = None) -> None:
        if (alpha is None) != (beta is None):
            raise InvalidArgument(
                "Invalid arguments. Both shape parameters must be provided or neither. "
                f"Values: alpha=`{alpha!r}`, beta=`{beta!r}`."
            )
        if alpha is None:
            alpha, beta = 1.0, 1.0

        family = configure_families_register().get(FamilyName.BETA)
        super().__init__(family.name, family.make_parameters(alpha=alpha, beta=beta))

    def _characteristic(self, name: CharacteristicName, value: Any = None, **options: Any) -> float:
        return cast(float, self.calculate_characteristic(name, value, **options))

    @property
    def alpha(self) -> float:
        """First shape parameter."""
        return cast(float, self.parameters.parameters["alpha"])

    @alpha.setter
    def alpha(self, value: float) -> None:
        self.update_parameters(alpha=value)

    @property
    def beta(self) -> float:
        """Second shape parameter."""
        return cast(float, self.parameters.parameters["beta"])

    @beta.setter
    def beta(self, value: float) -> None:
        self.update_parameters(beta=value)

    @property
    def entropy(self) -> float:
        """Differential entropy."""
        return self._characteristic(CharacteristicName.ENTROPY)

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return self._characteristic(CharacteristicName.KURT)

    @property
    def mean(self) -> float:
        """Expected value."""
        return self._characteristic(CharacteristicName.MEAN)

    @property
    def median(self) -> float:
        """Median."""
        return self._characteristic(CharacteristicName.MEDIAN)

    @property
    def mode(self) -> float:
        """Mode, NaN if it is not unique."""
        return self._characteristic(CharacteristicName.MODE)

    @property
    def skewness(self) -> float:
        """Skewness."""
        return self._characteristic(CharacteristicName.SKEW)

    @property
    def stdev(self) -> float:
        """Standard deviation."""
        return self._characteristic(CharacteristicName.STD)

    @property
    def variance(self) -> float:
        """Variance."""
        return self._characteristic(CharacteristicName.VAR)

    def cdf(self, x: float) -> float:
        """Evaluate the cumulative distribution function at ``x``."""
        return self._characteristic(CharacteristicName.CDF, x)

    def logcdf(self, x: float) -> float:
        """Evaluate the natural logarithm of the CDF at ``x``."""
        return self._characteristic(CharacteristicName.LOGCDF, x)

    def logpdf(self, x: float) -> float:
        """Evaluate the natural logarithm of the PDF at ``x``."""
        return self._characteristic(CharacteristicName.LOGPDF, x)

    def pdf(self, x: float) -> float:
        """Evaluate the probability density function at ``x``."""
        return self._characteristic(CharacteristicName.PDF, x)

    def mgf(self, t: float) -> float:
        """Evaluate the moment-generating function at ``t``."""
        return self._characteristic(CharacteristicName.MGF, t)

    def quantile(self, p: float) -> float:
        """Evaluate the quantile function at probability ``p``."""
        return self._characteristic(CharacteristicName.PPF, p)
