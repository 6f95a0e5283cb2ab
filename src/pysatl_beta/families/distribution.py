"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING

from pysatl_beta.distributions.distribution import Distribution
from pysatl_beta.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from typing import Any

    from pysatl_beta.distributions.computation import AnalyticalComputation
    from pysatl_beta.distributions.support import Support
    from pysatl_beta.families.parametric_family import ParametricFamily
    from pysatl_beta.families.parametrizations import Parametrization
    from pysatl_beta.types import (
        DistributionType,
        GenericCharacteristicName,
    )


class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific parameter values,
    providing methods for computation. Parameter values may be changed after
    creation through :meth:`update_parameters`, every change is validated.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    parameters : Parametrization
        Validated parameter values for this distribution.
    """

    __slots__ = ("_family_name", "_parameters")

    def __init__(self, family_name: str, parameters: Parametrization) -> None:
        self._family_name = family_name
        self._parameters = parameters

    @property
    def family_name(self) -> str:
        """Get the name of the family."""
        return self._family_name

    @property
    def parameters(self) -> Parametrization:
        """Get the current parameters."""
        return self._parameters

    @property
    def parametrization_name(self) -> str:
        """Get the name of the parametrization the parameters are given in."""
        return self._parameters.name

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self._family_name)

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self.family.distribution_type(self._parameters)

    @property
    def analytical_computations(
        self,
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Get analytical computations for this distribution.

        Built from the current parameters on every access.
        """
        return self.family.build_analytical_computations(self._parameters)

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self.family.support(self._parameters)

    def update_parameters(self, **changes: Any) -> None:
        """
        Change some parameter values.

        The new parameters are validated as a whole before they replace the
        current ones.

        Raises
        ------
        InvalidArgument
            If the new values violate a constraint. Current parameters are
            left unchanged.
        """
        self._parameters = self._parameters.replace_parameters(**changes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParametricFamilyDistribution):
            return NotImplemented
        return (
            self._family_name == other._family_name
            and self.parametrization_name == other.parametrization_name
            and self._parameters.parameters == other._parameters.parameters
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self._parameters.parameters.items())
        return f"{self._family_name}({values})"
