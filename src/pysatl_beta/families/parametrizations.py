"""
Parametrizations
================

A parametrization is a named, immutable set of parameter values of a family
together with the constraints those values must satisfy and the conversion
to the family's base parametrization.

- :class:`Parametrization` — base class of parametrization dataclasses.
- :func:`constraint` — marks a predicate method as a constraint.
- :func:`parametrization` — turns a class into a frozen dataclass and attaches
  it to a family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC
from dataclasses import dataclass, fields, is_dataclass, replace
from functools import wraps
from inspect import isfunction
from numbers import Real
from typing import TYPE_CHECKING, ParamSpec, Self

from pysatl_beta.errors import InvalidArgument
from pysatl_beta.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_beta.families.parametric_family import ParametricFamily

_IS_CONSTRAINT = "__is_constraint"
_DESCRIPTION = "__constraint_description"
_PARAMETER = "__constraint_parameter"


def is_positive_real(value: object) -> bool:
    """
    Check that a value is a finite real number greater than zero.

    ``bool`` is rejected even though it is an ``int`` subclass.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    A named predicate over parameter values.

    Parameters
    ----------
    description : str
        Constraint as shown in error messages, e.g. ``"alpha > 0"``.
    check : Callable[[Any], bool]
        Predicate receiving the parametrization instance.
    parameter : str or None, default=None
        Field restricted by the constraint, reported together with its value
        when the check fails.
    """

    description: str
    check: Callable[[Any], bool]
    parameter: str | None = None

    def error(self, parameters: Parametrization) -> InvalidArgument:
        """Build the error reported when ``check`` fails for ``parameters``."""
        if self.parameter is None:
            return InvalidArgument(f'Constraint "{self.description}" does not hold')
        value = getattr(parameters, self.parameter)
        return InvalidArgument(
            f'Invalid argument. Constraint "{self.description}" does not hold '
            f"for parameter '{self.parameter}'. Value: `{value!r}`."
        )


class Parametrization(ABC):
    """
    Base class of parametrizations.

    Subclasses declare their parameters as dataclass fields and their
    constraints as methods decorated with :func:`constraint`. Instances are
    frozen: changing a value means building a new instance with
    :meth:`replace_parameters`.
    """

    # Filled in by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Parametrization name within its family."""
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values by field name, in declaration order."""
        if is_dataclass(self):
            return {field.name: getattr(self, field.name) for field in fields(self)}
        return {key: getattr(self, key) for key in getattr(self, "__annotations__", {})}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check the constraints in declaration order.

        Raises
        ------
        InvalidArgument
            For the first constraint that does not hold.
        """
        for rule in self._constraints:
            if not rule.check(self):
                raise rule.error(self)

    def replace_parameters(self, **changes: Any) -> Self:
        """
        Return a validated copy with some values replaced.

        Raises
        ------
        InvalidArgument
            If the new values violate a constraint. ``self`` is not affected.
        """
        updated = replace(self, **changes)  # type: ignore[type-var]
        updated.validate()
        return updated

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Express these parameters in the base parametrization.

        The base parametrization itself returns ``self``, alternative
        parametrizations override this method.
        """
        return self


P = ParamSpec("P")


def constraint(
    description: str, parameter: str | None = None
) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a constraint of its parametrization.

    Parameters
    ----------
    description : str
        Constraint as shown in error messages.
    parameter : str or None, default=None
        Field the constraint restricts.

    Notes
    -----
    The method must be a predicate. The marks are stored as function
    attributes and collected by :func:`parametrization`.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, _IS_CONSTRAINT, True)
        setattr(wrapper, _DESCRIPTION, description)
        setattr(wrapper, _PARAMETER, parameter)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    collected: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, (staticmethod, classmethod)):
            kind = "@staticmethod" if isinstance(attr, staticmethod) else "@classmethod"
            raise TypeError(f"@constraint '{attr_name}' must be an instance method, not {kind}")
        if not isfunction(attr) or not getattr(attr, _IS_CONSTRAINT, False):
            continue
        collected.append(
            ParametrizationConstraint(
                description=getattr(attr, _DESCRIPTION, attr.__name__),
                check=attr,
                parameter=getattr(attr, _PARAMETER, None),
            )
        )
    return collected


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator attaching a parametrization to ``family`` under ``name``.

    The class becomes a frozen, slotted dataclass (unless it already is a
    dataclass) and its :func:`constraint` methods are collected in
    declaration order.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
