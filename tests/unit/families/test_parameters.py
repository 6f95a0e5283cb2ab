from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import pytest

from pysatl_beta.errors import InvalidArgument
from pysatl_beta.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
)
from pysatl_beta.families.parametrizations import is_positive_real
from pysatl_beta.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="value > 0", check=is_positive, parameter="value")
        assert c.description == "value > 0"
        assert c.check is is_positive
        assert c.parameter == "value"

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("value > 0", parameter="value")
        def check_positive(self: Any) -> bool:  # noqa: ANN001 (test signature)
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", None) is True
        assert getattr(check_positive, "__constraint_description", None) == "value > 0"
        assert getattr(check_positive, "__constraint_parameter", None) == "value"

    def test_free_function_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        @family.parametrization(name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Kind, "__family__", None) is family
        assert getattr(Kind, "__param_name__", None) == "kind"
        assert hasattr(Kind, "__dataclass_fields__")

    def test_duplicate_parametrization_name_is_rejected(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @family.parametrization(name="base")
            class Again(Parametrization):
                value: float

    def test_static_constraint_is_rejected(self) -> None:
        family = ParametricFamily(
            name="StaticConstraintFamily",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        with pytest.raises(TypeError, match="instance method"):

            @family.parametrization(name="base")
            class Broken(Parametrization):
                value: float

                @staticmethod
                def check() -> bool:
                    return True

    # ---------- Validation ----------

    def test_validation_reports_parameter_and_value(self) -> None:
        family = self.make_default_family()

        with pytest.raises(InvalidArgument) as exc_info:
            family.make_parameters(value=-5.0)

        message = str(exc_info.value)
        assert 'Constraint "value > 0"' in message
        assert "'value'" in message
        assert "-5.0" in message

    def test_invalid_argument_is_value_and_type_error(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError):
            family.make_parameters(value=0.0)
        with pytest.raises(TypeError):
            family.make_parameters(value="5")

    def test_constraint_without_parameter(self) -> None:
        family = ParametricFamily(
            name="Ordered",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        @family.parametrization(name="base")
        class Ordered(Parametrization):
            low: float
            high: float

            @constraint("low < high")
            def check_order(self) -> bool:
                return self.low < self.high

        with pytest.raises(InvalidArgument, match='Constraint "low < high" does not hold'):
            family.make_parameters(low=2.0, high=1.0)

    def test_replace_parameters_validates_and_keeps_original(self) -> None:
        family = self.make_default_family()
        params = family.make_parameters(value=1.0)

        updated = params.replace_parameters(value=3.0)
        assert updated.parameters == {"value": 3.0}
        assert params.parameters == {"value": 1.0}

        with pytest.raises(InvalidArgument):
            params.replace_parameters(value=-1.0)
        assert params.parameters == {"value": 1.0}

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, True),
            (0.5, True),
            (0, False),
            (-2.0, False),
            (math.nan, False),
            (math.inf, False),
            (True, False),
            ("5", False),
            (None, False),
        ],
    )
    def test_is_positive_real(self, value, expected) -> None:
        assert is_positive_real(value) is expected

    # ---------- Family-level conversion to base ----------

    def test_get_base_parameters_uses_family_logic(self) -> None:
        family = self.make_default_family()

        BaseCls = family.parametrizations["base"]
        AltCls = family.parametrizations["alt"]

        base_params = BaseCls(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        alt_params = AltCls(value=3.0)  # type: ignore[call-arg]
        base_from_alt = family.to_base(alt_params)
        assert isinstance(base_from_alt, BaseCls)
        assert base_from_alt.value == 3.0  # type: ignore[attr-defined]
