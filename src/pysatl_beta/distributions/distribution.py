"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used throughout
the package.

Notes
-----
- Characteristics are looked up by name in ``analytical_computations``.
- Evaluation is scalar (``float -> float``) for univariate distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_beta.distributions.computation import AnalyticalComputation
    from pysatl_beta.distributions.support import Support
    from pysatl_beta.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the computation of a characteristic.

        Raises
        ------
        KeyError
            If the distribution provides no such characteristic.
        """
        computations = self.analytical_computations
        if characteristic_name not in computations:
            raise KeyError(
                f"Characteristic '{characteristic_name}' is not available, "
                f"known characteristics: {sorted(computations)}"
            )
        return computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)
