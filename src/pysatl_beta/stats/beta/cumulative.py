"""
Cumulative Distribution Functions
=================================

CDF of the Beta distribution, the regularized incomplete beta function
``I_x(alpha, beta)``, and its logarithm.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_beta.stats._special import CF_MAX_ITER, betainc, log_betainc
from pysatl_beta.stats.beta._common import invalid_shapes


def cdf(x: float, alpha: float, beta: float) -> float:
    """
    Cumulative distribution function.

    Parameters
    ----------
    x : float
        Point at which to evaluate the CDF.
    alpha, beta : float
        Shape parameters.

    Returns
    -------
    float
        ``P(X <= x)``: ``0`` for ``x <= 0``, ``1`` for ``x >= 1``, NaN for NaN
        input or invalid shape parameters. Inside the support the value is
        :func:`scipy.special.betainc`.
    """
    if math.isnan(x) or invalid_shapes(alpha, beta):
        return math.nan
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    if beta == 1.0:
        return x**alpha
    if alpha == 1.0:
        return -math.expm1(beta * math.log1p(-x))
    return betainc(x, alpha, beta)


def logcdf(x: float, alpha: float, beta: float, *, max_iter: int = CF_MAX_ITER) -> float:
    """
    Natural logarithm of the cumulative distribution function.

    Evaluated in log space, so the left tail does not underflow to ``-inf``
    while the CDF itself is still representable in logarithms.

    Parameters
    ----------
    x : float
        Point at which to evaluate the log-CDF.
    alpha, beta : float
        Shape parameters.
    max_iter : int, default=10000
        Iteration cap of the continued fraction used left of the bulk.

    Returns
    -------
    float
        ``ln P(X <= x)``: ``-inf`` for ``x <= 0``, ``0`` for ``x >= 1``, NaN
        for NaN input or invalid shape parameters.
    """
    if math.isnan(x) or invalid_shapes(alpha, beta):
        return math.nan
    if x <= 0.0:
        return -math.inf
    if x >= 1.0:
        return 0.0
    if beta == 1.0:
        return alpha * math.log(x)
    if alpha == 1.0:
        value = -math.expm1(beta * math.log1p(-x))
        return math.log(value) if value > 0.0 else -math.inf
    return log_betainc(x, alpha, beta, max_iter)
