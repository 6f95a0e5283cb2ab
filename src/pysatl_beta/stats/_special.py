"""
Special Function Kernels
========================

Scalar kernels shared by the Beta distribution characteristics that
:mod:`scipy.special` does not cover as they are needed here:

- :func:`log_betainc` — logarithm of the regularized incomplete beta function
  ``I_x(a, b)``. Left of the switching point it is assembled from the
  modified Lentz continued fraction, so probabilities far below the double
  range keep their logarithm.
- :func:`betaincinv` — inverse of ``I_x(a, b)`` in ``x``:
  :func:`scipy.special.betaincinv` polished by safeguarded Newton steps.
- :func:`log_hyp1f1` — logarithm of the Kummer series ``1F1(a; c; z)`` for
  ``z >= 0``, summed with rescaling so that huge values stay representable.

``I_x(a, b)`` itself, ``ln B(a, b)`` and ``1F1`` for large arguments come
from :mod:`scipy.special`.

Notes
-----
- Kernels assume ``a > 0``, ``b > 0`` and an interior argument. NaN handling
  and the conventional values outside the domain are the caller's job.
- Non-convergence is reported with :class:`RuntimeWarning`, the last
  approximation is returned.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

import numpy as np
from scipy import special

EPS = float(np.finfo(np.float64).eps)
"""Machine epsilon of IEEE-754 double precision."""

LOG_MAX = float(np.log(np.finfo(np.float64).max))
"""Largest argument for which ``exp`` is finite."""

ONE_MINUS_EPS = math.nextafter(1.0, 0.0)
"""Largest double below one."""

CF_MAX_ITER = 10_000
SERIES_MAX_ITER = 100_000
NEWTON_MAX_ITER = 1_000
NEWTON_X_TOL = 4.0 * EPS

_LENTZ_FLOOR = 1e-300
_RESCALE_THRESHOLD = 1e280


def exp_or_inf(value: float) -> float:
    """Exponential saturating to ``inf`` instead of raising ``OverflowError``."""
    if value > LOG_MAX:
        return math.inf
    return math.exp(value)


def log_beta(a: float, b: float) -> float:
    """Natural logarithm of the Beta function ``B(a, b)``."""
    return float(special.betaln(a, b))


def betainc(x: float, a: float, b: float) -> float:
    """Regularized incomplete beta function ``I_x(a, b)`` as a Python float."""
    return float(special.betainc(a, b, x))


def _log_prefactor(x: float, a: float, b: float) -> float:
    """``ln(x^a (1-x)^b / B(a, b))``, the common factor of the continued fraction."""
    return a * math.log(x) + b * math.log1p(-x) - log_beta(a, b)


def _use_complement(x: float, a: float, b: float) -> bool:
    # the continued fraction converges fast only left of this point
    return x > (a + 1.0) / (a + b + 2.0)


def _lentz_continued_fraction(a: float, b: float, x: float, max_iter: int) -> float:
    """
    Evaluate the continued fraction of ``I_x(a, b)`` by the modified Lentz method.

    Parameters
    ----------
    a, b : float
        Positive shape parameters.
    x : float
        Point in ``(0, 1)``, expected left of ``(a + 1) / (a + b + 2)``.
    max_iter : int
        Maximum number of (even, odd) step pairs.

    Returns
    -------
    float
        Value of the continued fraction, so that
        ``I_x(a, b) = x^a (1-x)^b / (a B(a, b)) * fraction``.
    """
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0

    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < _LENTZ_FLOOR:
        d = _LENTZ_FLOOR
    d = 1.0 / d
    h = d

    for m in range(1, max_iter + 1):
        m2 = 2 * m

        # Even step of the recurrence
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < _LENTZ_FLOOR:
            d = _LENTZ_FLOOR
        c = 1.0 + aa / c
        if abs(c) < _LENTZ_FLOOR:
            c = _LENTZ_FLOOR
        d = 1.0 / d
        h *= d * c

        # Odd step of the recurrence
        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < _LENTZ_FLOOR:
            d = _LENTZ_FLOOR
        c = 1.0 + aa / c
        if abs(c) < _LENTZ_FLOOR:
            c = _LENTZ_FLOOR
        d = 1.0 / d
        delta = d * c
        h *= delta

        if abs(delta - 1.0) <= EPS:
            return h

    warnings.warn(
        f"Continued fraction for I_x(a, b) did not converge in {max_iter} iterations "
        f"(x={x}, a={a}, b={b})",
        RuntimeWarning,
        stacklevel=4,
    )
    return h


def log_betainc(x: float, a: float, b: float, max_iter: int = CF_MAX_ITER) -> float:
    """
    Natural logarithm of ``I_x(a, b)`` for ``0 < x < 1``.

    Left of ``(a + 1) / (a + b + 2)`` the logarithm is assembled from the log
    prefactor and the log of the continued fraction, so tiny probabilities
    keep full relative precision instead of underflowing. Right of it
    ``I_x(a, b)`` is close to one and ``log1p`` of the complement
    :func:`scipy.special.betaincc` is used.
    """
    if _use_complement(x, a, b):
        tail = float(special.betaincc(a, b, x))
        return math.log1p(-min(tail, ONE_MINUS_EPS))
    fraction = _lentz_continued_fraction(a, b, x, max_iter)
    return _log_prefactor(x, a, b) + math.log(fraction) - math.log(a)


def _log_density(x: float, a: float, b: float) -> float:
    return (a - 1.0) * math.log(x) + (b - 1.0) * math.log1p(-x) - log_beta(a, b)


def _polished_inverse(p: float, a: float, b: float, x_tol: float, max_iter: int) -> float:
    """
    Solve ``I_x(a, b) = p`` for ``p <= 0.5``.

    Newton steps start from :func:`scipy.special.betaincinv`. A step is taken
    only while it stays inside ``(0, 1)`` and reduces the residual, so the
    polished root is never worse than the starting one.
    """
    x = float(special.betaincinv(a, b, p))
    if not 0.0 < x < 1.0:
        # root below the smallest double or at an end of the support
        return x

    residual = betainc(x, a, b) - p
    for _ in range(max_iter):
        if abs(residual) <= 2.0 * EPS * p:
            return x

        density = exp_or_inf(_log_density(x, a, b))
        if not 0.0 < density < math.inf:
            return x
        x_new = x - residual / density
        if not 0.0 < x_new < 1.0:
            return x

        residual_new = betainc(x_new, a, b) - p
        if abs(residual_new) >= abs(residual):
            return x
        if abs(x_new - x) <= x_tol * x_new:
            return x_new
        x, residual = x_new, residual_new

    warnings.warn(
        f"Inverse of I_x(a, b) did not converge in {max_iter} iterations "
        f"(p={p}, a={a}, b={b})",
        RuntimeWarning,
        stacklevel=4,
    )
    return x


def betaincinv(
    p: float,
    a: float,
    b: float,
    *,
    x_tol: float = NEWTON_X_TOL,
    max_iter: int = NEWTON_MAX_ITER,
) -> float:
    """
    Inverse of the regularized incomplete beta function for ``0 < p < 1``.

    Parameters
    ----------
    p : float
        Target probability in ``(0, 1)``.
    a, b : float
        Positive shape parameters.
    x_tol : float, default=4 * eps
        Relative tolerance on the Newton step.
    max_iter : int, default=1000
        Maximum number of Newton steps.

    Returns
    -------
    float
        ``x`` in ``[0, 1]`` such that ``I_x(a, b) = p``. A root smaller than
        the smallest positive double is returned as the value SciPy gives,
        possibly ``0``.

    Notes
    -----
    Upper-tail probabilities are inverted through ``I_{1-x}(b, a) = 1 - p``
    (exact in floating point for ``p >= 0.5``), so the tail that is close to
    an end of the support is the one solved for.
    """
    if p > 0.5:
        return 1.0 - _polished_inverse(1.0 - p, b, a, x_tol, max_iter)
    return _polished_inverse(p, a, b, x_tol, max_iter)


def log_hyp1f1(a: float, c: float, z: float, max_iter: int = SERIES_MAX_ITER) -> float:
    """
    Natural logarithm of Kummer's function ``1F1(a; c; z)`` for ``z >= 0``.

    The power series ``sum (a)_k / (c)_k z^k / k!`` has positive terms for
    ``a, c > 0`` and ``z >= 0``. It is summed until a term drops below machine
    epsilon relative to the sum, rescaling the accumulator so that huge
    values stay representable in log space.
    """
    log_scale = 0.0
    total = 1.0
    term = 1.0

    for k in range(max_iter):
        term *= (a + k) / (c + k) * z / (k + 1)
        total += term
        if term <= EPS * total:
            return log_scale + math.log(total)
        if total > _RESCALE_THRESHOLD:
            log_scale += math.log(total)
            term /= total
            total = 1.0

    warnings.warn(
        f"Series for 1F1(a; c; z) did not converge in {max_iter} terms (a={a}, c={c}, z={z})",
        RuntimeWarning,
        stacklevel=3,
    )
    return log_scale + math.log(total)
