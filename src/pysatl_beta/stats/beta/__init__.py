"""
Beta Distribution Characteristics
=================================

Scalar routines computing characteristics of the Beta distribution from the
two shape parameters. Evaluators take ``(x, alpha, beta)``, summary
statistics take ``(alpha, beta)``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .cumulative import cdf, logcdf
from .density import logpdf, pdf
from .mgf import mgf
from .moments import entropy, kurtosis, mean, median, mode, skewness, stdev, variance
from .quantile import quantile

__all__ = [
    "cdf",
    "entropy",
    "kurtosis",
    "logcdf",
    "logpdf",
    "mean",
    "median",
    "mgf",
    "mode",
    "pdf",
    "quantile",
    "skewness",
    "stdev",
    "variance",
]
