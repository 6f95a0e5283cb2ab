"""
Beta distribution family implementation.

Contains the Beta family with standard and mean-precision parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from pysatl_beta.distributions.support import UNIT_INTERVAL, ContinuousSupport
from pysatl_beta.families.parametric_family import ParametricFamily
from pysatl_beta.families.parametrizations import (
    Parametrization,
    constraint,
    is_positive_real,
    parametrization,
)
from pysatl_beta.families.registry import ParametricFamilyRegister
from pysatl_beta.stats import beta as beta_stats
from pysatl_beta.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    The Beta distribution is a continuous probability distribution on the
    interval [0, 1] defined by two positive shape parameters alpha and beta.

    Probability density function:
        f(x) = x^(alpha-1) (1-x)^(beta-1) / B(alpha, beta) for x in [0, 1], 0 otherwise

    It is the conjugate prior of the Bernoulli and binomial success
    probability and a common model for proportions.
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for Beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (first shape parameter)
            - beta: float (second shape parameter)
        x : float
            Point at which to evaluate the probability density function

        Returns
        -------
        float
            Probability density at x
        """
        parameters = cast(_Standard, parameters)
        return beta_stats.pdf(x, parameters.alpha, parameters.beta)

    def logpdf(parameters: Parametrization, x: float) -> float:
        """Natural logarithm of the probability density function."""
        parameters = cast(_Standard, parameters)
        return beta_stats.logpdf(x, parameters.alpha, parameters.beta)

    def cdf(parameters: Parametrization, x: float) -> float:
        """
        Cumulative distribution function for Beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (first shape parameter)
            - beta: float (second shape parameter)
        x : float
            Point at which to evaluate the cumulative distribution function

        Returns
        -------
        float
            Probability P(X ≤ x)
        """
        parameters = cast(_Standard, parameters)
        return beta_stats.cdf(x, parameters.alpha, parameters.beta)

    def logcdf(parameters: Parametrization, x: float, **options: Any) -> float:
        """
        Natural logarithm of the cumulative distribution function.

        ``max_iter`` caps the continued fraction of the left tail.
        """
        parameters = cast(_Standard, parameters)
        return beta_stats.logcdf(x, parameters.alpha, parameters.beta, **options)

    def ppf(parameters: Parametrization, p: float, **options: Any) -> float:
        """
        Percent point function (inverse CDF) for Beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (first shape parameter)
            - beta: float (second shape parameter)
        p : float
            Probability from [0, 1], NaN is returned otherwise
        **options : Any
            ``x_tol`` and ``max_iter`` of the root search

        Returns
        -------
        float
            Quantile corresponding to probability p
        """
        parameters = cast(_Standard, parameters)
        return beta_stats.quantile(p, parameters.alpha, parameters.beta, **options)

    def mgf(parameters: Parametrization, t: float, **options: Any) -> float:
        """Moment-generating function E[exp(tX)]."""
        parameters = cast(_Standard, parameters)
        return beta_stats.mgf(t, parameters.alpha, parameters.beta, **options)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Beta distribution."""
        parameters = cast(_Standard, parameters)
        return beta_stats.mean(parameters.alpha, parameters.beta)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Beta distribution."""
        parameters = cast(_Standard, parameters)
        return beta_stats.variance(parameters.alpha, parameters.beta)

    def std_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return beta_stats.stdev(parameters.alpha, parameters.beta)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of Beta distribution."""
        parameters = cast(_Standard, parameters)
        return beta_stats.skewness(parameters.alpha, parameters.beta)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = True) -> float:
        """Raw or excess kurtosis of Beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters
        _ : Any
            Needed by architecture parameter
        excess : bool
            A value defines if there will be raw or excess kurtosis
            default is True

        Returns
        -------
        float
            Kurtosis value
        """
        parameters = cast(_Standard, parameters)
        value = beta_stats.kurtosis(parameters.alpha, parameters.beta)
        return value if excess else value + 3.0

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of Beta distribution, NaN when it is not unique."""
        parameters = cast(_Standard, parameters)
        return beta_stats.mode(parameters.alpha, parameters.beta)

    def median_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return beta_stats.median(parameters.alpha, parameters.beta)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy of Beta distribution."""
        parameters = cast(_Standard, parameters)
        return beta_stats.entropy(parameters.alpha, parameters.beta)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of Beta distribution"""
        return UNIT_INTERVAL

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanPrecision"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.LOGCDF: logcdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MGF: mgf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        support_by_parametrization=_support,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Beta distribution.

        Parameters
        ----------
        alpha : float
            First shape parameter
        beta : float
            Second shape parameter
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0", parameter="alpha")
        def check_alpha_positive(self) -> bool:
            """Check that alpha is a finite positive number."""
            return is_positive_real(self.alpha)

        @constraint(description="beta > 0", parameter="beta")
        def check_beta_positive(self) -> bool:
            """Check that beta is a finite positive number."""
            return is_positive_real(self.beta)

    @parametrization(family=Beta, name="meanPrecision")
    class _MeanPrecision(Parametrization):
        """
        Mean-precision parametrization of Beta distribution.

        Parameters
        ----------
        mean : float
            Mean of the distribution, in (0, 1)
        precision : float
            Precision (alpha + beta), also called concentration
        """

        mean: float
        precision: float

        @constraint(description="0 < mean < 1", parameter="mean")
        def check_mean_in_unit_interval(self) -> bool:
            """Check that mean lies strictly inside the unit interval."""
            return is_positive_real(self.mean) and self.mean < 1

        @constraint(description="precision > 0", parameter="precision")
        def check_precision_positive(self) -> bool:
            """Check that precision is a finite positive number."""
            return is_positive_real(self.precision)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _Standard(
                alpha=self.mean * self.precision,
                beta=(1.0 - self.mean) * self.precision,
            )

    ParametricFamilyRegister.register(Beta)
