"""
Density Functions
=================

Probability density of the Beta distribution and its logarithm.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_beta.stats._special import exp_or_inf, log_beta
from pysatl_beta.stats.beta._common import invalid_shapes


def _log_boundary_density(shape: float, other: float) -> float:
    """
    Limit of the log-density at the end of the support governed by ``shape``.

    At ``x = 0`` the factor ``x^(alpha - 1)`` decides (``shape = alpha``),
    at ``x = 1`` the factor ``(1 - x)^(beta - 1)`` does (``shape = beta``).
    """
    if shape == 1.0:
        # density at the end equals 1 / B(1, other) = other
        return math.log(other)
    if shape < 1.0:
        return math.inf
    return -math.inf


def logpdf(x: float, alpha: float, beta: float) -> float:
    """
    Natural logarithm of the probability density function.

    Parameters
    ----------
    x : float
        Point at which to evaluate the log-density.
    alpha, beta : float
        Shape parameters.

    Returns
    -------
    float
        - ``(alpha-1) ln x + (beta-1) ln(1-x) - ln B(alpha, beta)`` for
          ``0 < x < 1``;
        - ``-inf`` outside ``[0, 1]``;
        - the limiting value at ``x = 0`` and ``x = 1`` (``+inf`` for a shape
          parameter below one, ``-inf`` above one, finite for exactly one);
        - NaN for NaN input or invalid shape parameters.
    """
    if math.isnan(x) or invalid_shapes(alpha, beta):
        return math.nan
    if x < 0.0 or x > 1.0:
        return -math.inf
    if x == 0.0:
        return _log_boundary_density(alpha, beta)
    if x == 1.0:
        return _log_boundary_density(beta, alpha)
    return (alpha - 1.0) * math.log(x) + (beta - 1.0) * math.log1p(-x) - log_beta(alpha, beta)


def pdf(x: float, alpha: float, beta: float) -> float:
    """
    Probability density function.

    The uniform case ``alpha = beta = 1`` is answered directly, otherwise the
    density is ``exp(logpdf)``.
    """
    if math.isnan(x) or invalid_shapes(alpha, beta):
        return math.nan
    if alpha == 1.0 and beta == 1.0:
        return 1.0 if 0.0 <= x <= 1.0 else 0.0
    return exp_or_inf(logpdf(x, alpha, beta))
