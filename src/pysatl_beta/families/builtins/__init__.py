"""
Built-in distribution families for PySATL Beta.

This package contains implementations of standard statistical distribution families
that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_beta.families.builtins.continuous import configure_beta_family

__all__ = [
    "configure_beta_family",
]
