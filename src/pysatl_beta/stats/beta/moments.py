"""
Moments and Shape Characteristics
=================================

Closed-form summary statistics of the Beta distribution with shape
parameters ``alpha > 0`` and ``beta > 0``. Invalid shapes (non-positive or
NaN) yield NaN.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import digamma

from pysatl_beta.stats._special import log_beta
from pysatl_beta.stats.beta._common import invalid_shapes
from pysatl_beta.stats.beta.quantile import quantile


def mean(alpha: float, beta: float) -> float:
    """Expected value ``alpha / (alpha + beta)``."""
    if invalid_shapes(alpha, beta):
        return math.nan
    return alpha / (alpha + beta)


def variance(alpha: float, beta: float) -> float:
    """Variance ``alpha*beta / ((alpha+beta)^2 (alpha+beta+1))``."""
    if invalid_shapes(alpha, beta):
        return math.nan
    total = alpha + beta
    return alpha * beta / (total * total * (total + 1.0))


def stdev(alpha: float, beta: float) -> float:
    """Standard deviation."""
    return math.sqrt(variance(alpha, beta))


def mode(alpha: float, beta: float) -> float:
    """
    Mode of the Beta distribution.

    Parameters
    ----------
    alpha : float
        First shape parameter.
    beta : float
        Second shape parameter.

    Returns
    -------
    float
        - ``(alpha - 1) / (alpha + beta - 2)`` for ``alpha > 1`` and ``beta > 1``;
        - ``0`` when the density is maximal at the left end
          (``alpha <= 1 < beta`` or ``alpha < 1 = beta``);
        - ``1`` when it is maximal at the right end
          (``beta <= 1 < alpha`` or ``beta < 1 = alpha``);
        - NaN when the mode is not unique: the uniform case
          ``alpha = beta = 1`` and the U-shaped case ``alpha < 1, beta < 1``.
    """
    if invalid_shapes(alpha, beta):
        return math.nan
    if alpha > 1.0 and beta > 1.0:
        return (alpha - 1.0) / (alpha + beta - 2.0)
    if alpha <= 1.0 < beta:
        return 0.0
    if beta <= 1.0 < alpha:
        return 1.0
    # both shapes are at most one from here on
    if alpha == 1.0 and beta < 1.0:
        return 1.0
    if beta == 1.0 and alpha < 1.0:
        return 0.0
    return math.nan


def median(alpha: float, beta: float) -> float:
    """
    Median of the Beta distribution.

    Closed forms are used for the symmetric case and for a unit shape
    parameter, the general case inverts the CDF at ``0.5``.
    """
    if invalid_shapes(alpha, beta):
        return math.nan
    if alpha == beta:
        return 0.5
    if alpha == 1.0:
        return -math.expm1(-math.log(2.0) / beta)
    if beta == 1.0:
        return 2.0 ** (-1.0 / alpha)
    return quantile(0.5, alpha, beta)


def skewness(alpha: float, beta: float) -> float:
    """Skewness ``2 (beta - alpha) sqrt(alpha + beta + 1) / ((alpha + beta + 2) sqrt(alpha beta))``."""
    if invalid_shapes(alpha, beta):
        return math.nan
    total = alpha + beta
    return 2.0 * (beta - alpha) * math.sqrt(total + 1.0) / ((total + 2.0) * math.sqrt(alpha * beta))


def kurtosis(alpha: float, beta: float) -> float:
    """
    Excess kurtosis.

    ``6 [(alpha - beta)^2 (alpha + beta + 1) - alpha beta (alpha + beta + 2)]
    / (alpha beta (alpha + beta + 2) (alpha + beta + 3))``
    """
    if invalid_shapes(alpha, beta):
        return math.nan
    total = alpha + beta
    product = alpha * beta
    numerator = (alpha - beta) ** 2 * (total + 1.0) - product * (total + 2.0)
    return 6.0 * numerator / (product * (total + 2.0) * (total + 3.0))


def entropy(alpha: float, beta: float) -> float:
    """
    Differential entropy in nats.

    ``ln B(alpha, beta) - (alpha - 1) psi(alpha) - (beta - 1) psi(beta)
    + (alpha + beta - 2) psi(alpha + beta)`` where ``psi`` is the digamma
    function.
    """
    if invalid_shapes(alpha, beta):
        return math.nan
    return float(
        log_beta(alpha, beta)
        - (alpha - 1.0) * digamma(alpha)
        - (beta - 1.0) * digamma(beta)
        + (alpha + beta - 2.0) * digamma(alpha + beta)
    )
