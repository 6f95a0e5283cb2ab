"""
Distribution Families Configuration
====================================

This module configures the parametric distribution families of PySATL Beta:

- :class:`Beta Family` — Beta distribution with standard and mean-precision
  parameterizations.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration happens once, the result is cached until reset.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_beta.families.builtins import configure_beta_family
from pysatl_beta.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_beta_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
