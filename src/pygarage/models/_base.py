"""Base model and enum for pygarage domain data.

Domain models inherit from :class:`GarageBaseModel`, which forbids
unknown fields and re-validates on attribute assignment so the clamping
validators below also apply to later mutations (speed, fuel level,
battery charge).
"""

from __future__ import annotations

import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict


def clamp_non_negative(value: Any) -> Any:
    """Clamp a numeric *value* to ``>= 0``; non-numeric input is returned as-is.

    Leaving non-numeric values untouched lets pydantic report the type
    error instead of this helper.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    if math.isnan(value):
        return 0.0
    return max(0.0, float(value))


class GarageEnum(enum.StrEnum):
    """Base for string-valued domain enums."""

    @property
    def label(self) -> str:
        """CamelCase name used in status lines (``electric_car`` -> ``ElectricCar``)."""
        return "".join(part.capitalize() for part in self.value.split("_"))


class GarageBaseModel(BaseModel):
    """Base for mutable domain models."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )


class GarageFrozenModel(BaseModel):
    """Base for immutable value parts (engine, driver)."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
