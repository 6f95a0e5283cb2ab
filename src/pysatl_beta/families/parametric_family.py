"""
Parametric Families
===================

:class:`ParametricFamily` ties together everything known about a family of
distributions: its parametrizations, the table of analytical characteristics
and the support. It also acts as the factory of concrete distributions.

Characteristics may be implemented for any parametrization. For every
parametrization the family precomputes a *plan* telling which implementation
serves each characteristic: its own when present, the base one otherwise.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_beta.distributions.computation import AnalyticalComputation
from pysatl_beta.families.distribution import ParametricFamilyDistribution
from pysatl_beta.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pysatl_beta.distributions.support import Support
    from pysatl_beta.families.parametrizations import Parametrization
    from pysatl_beta.types import GenericCharacteristicName, ParametrizationName

    type CharacteristicFunc = Callable[..., Any]
    type CharacteristicForms = dict[ParametrizationName, CharacteristicFunc]
    type SupportResolver = Callable[[Parametrization], Support | None]
    type AnalyticalPlan = dict[GenericCharacteristicName, ParametrizationName]


def _no_support(_: Parametrization) -> Support | None:
    return None


class ParametricFamily:
    """
    Family of distributions sharing a functional form.

    Parameters
    ----------
    name : str
        Family name, the key in :class:`ParametricFamilyRegister`.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Type of every member, or a function of the base parameters.
    distr_parametrizations : list[ParametrizationName]
        Names of the parametrizations, the first one is the base.
    distr_characteristics : Mapping
        ``{characteristic: {parametrization: func}}``. A bare function stands
        for an implementation in the base parametrization. Implementations
        are called as ``func(parameters, value, **options)``.
    support_by_parametrization : Callable or None, optional
        Function returning the support for given parameters.

    Notes
    -----
    Parametrization classes are attached after construction with the
    :meth:`parametrization` decorator.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[
            GenericCharacteristicName, CharacteristicForms | CharacteristicFunc
        ],
        support_by_parametrization: SupportResolver | None = None,
    ):
        self._name = name
        if isinstance(distr_type, DistributionType):
            fixed_type = distr_type
            self._type_resolver: Callable[[Parametrization], DistributionType] = (
                lambda _params: fixed_type
            )
        else:
            self._type_resolver = distr_type
        self._support_resolver: SupportResolver = support_by_parametrization or _no_support

        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics: dict[GenericCharacteristicName, CharacteristicForms] = {
            characteristic: (
                forms if isinstance(forms, dict) else {self.base_parametrization_name: forms}
            )
            for characteristic, forms in distr_characteristics.items()
        }
        self._analytical_plan: dict[ParametrizationName, AnalyticalPlan] = {
            pname: self._plan_for(pname) for pname in self.parametrization_names
        }

    def _plan_for(self, parametrization_name: ParametrizationName) -> AnalyticalPlan:
        plan: AnalyticalPlan = {}
        for characteristic, forms in self.distr_characteristics.items():
            for provider in (parametrization_name, self.base_parametrization_name):
                if provider in forms:
                    plan[characteristic] = provider
                    break
        return plan

    @property
    def name(self) -> str:
        """Family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If the base parametrization has not been registered yet.
        """
        base_cls = self._parametrizations.get(self.base_parametrization_name)
        if base_cls is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return base_cls

    def distribution_type(self, parameters: Parametrization) -> DistributionType:
        return self._type_resolver(self.to_base(parameters))

    def support(self, parameters: Parametrization) -> Support | None:
        return self._support_resolver(parameters)

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Attach a parametrization class to the family.

        Raises
        ------
        ValueError
            If a parametrization with this name is already attached.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Express parameters in the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Bind every planned characteristic to the given parameters.

        Characteristics served by the base implementation receive the base
        parameters, the conversion is done at most once.
        """
        computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        base_parameters: Parametrization | None = None

        for characteristic, provider in self._analytical_plan.get(parameters.name, {}).items():
            if provider == parameters.name:
                bound = parameters
            else:
                if base_parameters is None:
                    base_parameters = self.to_base(parameters)
                bound = base_parameters
            func = self.distr_characteristics[characteristic][provider]
            computations[characteristic] = AnalyticalComputation(
                target=characteristic, func=partial(func, bound)
            )
        return computations

    def make_parameters(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Parametrization:
        """
        Build validated parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization to use, the base one by default.
        **parameters_values
            Values of the parametrization fields.

        Raises
        ------
        KeyError
            If the parametrization is unknown.
        InvalidArgument
            If a constraint of the parametrization does not hold.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return parameters

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a member of the family.

        Accepts the same arguments as :meth:`make_parameters` and raises the
        same errors.
        """
        parameters = self.make_parameters(parametrization_name, **parameters_values)
        return ParametricFamilyDistribution(self.name, parameters)

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Class decorator attaching a parametrization to this family.

        Mypy does not apply ``dataclass_transform`` to methods yet, so
        decorated classes may need an explicit ``@dataclass`` to type-check.
        """
        from pysatl_beta.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
