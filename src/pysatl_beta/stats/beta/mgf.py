"""
Moment-Generating Function
==========================

``E[exp(tX)]`` of the Beta distribution, the confluent hypergeometric
function ``1F1(alpha; alpha + beta; t)``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import hyp1f1

from pysatl_beta.stats._special import LOG_MAX, SERIES_MAX_ITER, exp_or_inf, log_hyp1f1
from pysatl_beta.stats.beta._common import invalid_shapes

SERIES_MAX_ARGUMENT = 1e4
"""Largest ``|t|`` summed as a power series, beyond it ``scipy.special.hyp1f1`` is used."""


def mgf(t: float, alpha: float, beta: float, *, max_iter: int = SERIES_MAX_ITER) -> float:
    """
    Moment-generating function.

    Parameters
    ----------
    t : float
        Argument of the MGF.
    alpha, beta : float
        Shape parameters.
    max_iter : int, default=100000
        Maximum number of series terms.

    Returns
    -------
    float
        ``1F1(alpha; alpha + beta; t)``. Overflows to ``inf`` for large
        positive ``t``. For ``t -> -inf`` it decays like
        ``Gamma(alpha + beta) / Gamma(beta) * |t|^(-alpha)`` and is ``0`` at
        ``t = -inf``. NaN for NaN input or invalid shape parameters.

    Notes
    -----
    The series needs about ``|t|`` terms. Up to ``SERIES_MAX_ARGUMENT`` it is
    summed directly: for negative ``t`` Kummer's transformation
    ``1F1(a; c; t) = e^t 1F1(c - a; c; -t)`` turns the alternating series
    into one with positive terms. Larger ``|t|`` is handed to
    :func:`scipy.special.hyp1f1`.
    """
    if math.isnan(t) or invalid_shapes(alpha, beta):
        return math.nan
    if t == 0.0:
        return 1.0
    total = alpha + beta
    if t > 0.0:
        # Jensen: E[exp(tX)] >= exp(t E[X])
        if t * alpha / total > LOG_MAX:
            return math.inf
        if t > SERIES_MAX_ARGUMENT:
            return float(hyp1f1(alpha, total, t))
        return exp_or_inf(log_hyp1f1(alpha, total, t, max_iter))
    if t == -math.inf:
        return 0.0
    if -t > SERIES_MAX_ARGUMENT:
        return float(hyp1f1(alpha, total, t))
    return exp_or_inf(t + log_hyp1f1(beta, total, -t, max_iter))
