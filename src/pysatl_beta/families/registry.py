"""
Family Registry
===============

Process-wide registry of parametric families keyed by family name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_beta.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton mapping family names to :class:`ParametricFamily` objects.

    Every instantiation returns the same object, the class methods operate
    on it directly.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _registered_families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._registered_families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look up a family.

        Raises
        ------
        ValueError
            If no family is registered under ``name``.
        """
        families = cls()._registered_families
        if name not in families:
            raise ValueError(f"No family {name} found in register")
        return families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_families

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add a family under its own name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._registered_families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family

    @classmethod
    def _reset(cls) -> None:
        """Forget the singleton and everything registered in it (test helper)."""
        cls._instance = None
