from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_beta.types import CharacteristicName
from tests.unit.families.test_basic import TestBaseFamily


class TestAnalyticalPlan(TestBaseFamily):
    def test_family_analytical_plan_picks_provider_correctly(self) -> None:
        fam = self.make_default_family()

        plan = fam._analytical_plan
        assert set(plan.keys()) == {"base", "alt"}

        # CDF has an 'alt' form, PDF and PPF fall back to 'base'
        assert plan["alt"][CharacteristicName.CDF] == "alt"
        assert plan["alt"][CharacteristicName.PDF] == "base"
        assert plan["alt"][CharacteristicName.PPF] == "base"

        assert plan["base"][CharacteristicName.PDF] == "base"
        assert plan["base"][CharacteristicName.CDF] == "base"
        assert plan["base"][CharacteristicName.PPF] == "base"

    def test_fallback_receives_base_parameters(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={
                self.PDF: {"base": lambda p, x: (p.name, p.value * x)},
                self.CDF: {"alt": lambda p, x: (p.name, p.value + x)},
            }
        )
        alt_params = fam.make_parameters("alt", value=2.0)

        computations = fam.build_analytical_computations(alt_params)

        assert computations[self.PDF](3.0) == ("base", 6.0)
        assert computations[self.CDF](3.0) == ("alt", 5.0)

    def test_characteristic_missing_everywhere_is_not_planned(self) -> None:
        fam = self.make_default_family(distr_characteristics={self.CDF: {"alt": lambda p, x: x}})

        assert self.CDF not in fam._analytical_plan["base"]
        assert self.CDF in fam._analytical_plan["alt"]

    def test_options_are_forwarded(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={self.PPF: {"base": lambda p, x, scale=1.0: x * scale}}
        )
        computations = fam.build_analytical_computations(fam.make_parameters(value=1.0))

        assert computations[self.PPF](0.5) == pytest.approx(0.5)
        assert computations[self.PPF](0.5, scale=4.0) == pytest.approx(2.0)
