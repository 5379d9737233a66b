"""Vehicle parts and people."""

from __future__ import annotations

from pydantic import Field

from pygarage.models._base import GarageBaseModel, GarageFrozenModel


class Engine(GarageFrozenModel):
    """Engine descriptor fixed at vehicle construction."""

    model: str = Field(min_length=1)
    """Engine model name (e.g. ``"E-Motor"``)."""
    horse_power: int = Field(ge=0)
    """Rated power in hp."""

    def __str__(self) -> str:
        return f"{self.model} ({self.horse_power} hp)"


class Driver(GarageFrozenModel):
    """Owner / driver of a vehicle."""

    name: str = Field(min_length=1)
    experience_years: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        return f"{self.name} ({self.experience_years} yrs)"


class Tire(GarageBaseModel):
    brand: str = Field(min_length=1)
    pressure: float = Field(gt=0)
    """Inflation pressure in bar; may be adjusted after construction."""
