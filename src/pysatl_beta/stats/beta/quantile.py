"""
Quantile Function
=================

Inverse of the Beta CDF.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_beta.stats._special import NEWTON_MAX_ITER, NEWTON_X_TOL, betaincinv
from pysatl_beta.stats.beta._common import invalid_shapes


def quantile(
    p: float,
    alpha: float,
    beta: float,
    *,
    x_tol: float = NEWTON_X_TOL,
    max_iter: int = NEWTON_MAX_ITER,
) -> float:
    """
    Quantile function (percent point function).

    Parameters
    ----------
    p : float
        Probability in ``[0, 1]``.
    alpha, beta : float
        Shape parameters.
    x_tol : float, default=4 * eps
        Relative tolerance of the root search.
    max_iter : int, default=1000
        Iteration cap of the root search.

    Returns
    -------
    float
        ``x`` in ``[0, 1]`` with ``cdf(x) = p``. ``p = 0`` and ``p = 1`` map to
        ``0`` and ``1`` exactly. NaN for ``p`` outside ``[0, 1]``, NaN input or
        invalid shape parameters.
    """
    if math.isnan(p) or invalid_shapes(alpha, beta):
        return math.nan
    if p < 0.0 or p > 1.0:
        return math.nan
    if p == 0.0:
        return 0.0
    if p == 1.0:
        return 1.0
    if beta == 1.0:
        return p ** (1.0 / alpha)
    if alpha == 1.0:
        return -math.expm1(math.log1p(-p) / beta)
    return betaincinv(p, alpha, beta, x_tol=x_tol, max_iter=max_iter)
