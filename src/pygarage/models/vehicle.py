"""Vehicle model.

A vehicle is a single tagged variant: :class:`VehicleKind` selects the
behaviour, and ``power_source`` carries the fuel-or-battery capability
record shared by all kinds of the same energy family.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal
from uuid import UUID, uuid4

from pydantic import Field, ValidationInfo, field_validator, model_validator

from pygarage._constants import DEFAULT_MAX_ALLOWED_SPEED
from pygarage.config import GarageConfig
from pygarage.exceptions import GarageInvalidArgumentError
from pygarage.models._base import GarageBaseModel, GarageEnum, clamp_non_negative
from pygarage.models.parts import Driver, Engine, Tire

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class VehicleKind(GarageEnum):
    CAR = "car"
    TRUCK = "truck"
    ELECTRIC_CAR = "electric_car"
    ELECTRIC_TRUCK = "electric_truck"

    @property
    def is_electric(self) -> bool:
        return self in (VehicleKind.ELECTRIC_CAR, VehicleKind.ELECTRIC_TRUCK)

    @property
    def carries_cargo(self) -> bool:
        return self in (VehicleKind.TRUCK, VehicleKind.ELECTRIC_TRUCK)


class FuelType(GarageEnum):
    PETROL = "petrol"
    DIESEL = "diesel"


class TransmissionType(GarageEnum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    CVT = "cvt"


# Fuel each combustion kind burns.
FUEL_BY_KIND: dict[VehicleKind, FuelType] = {
    VehicleKind.CAR: FuelType.PETROL,
    VehicleKind.TRUCK: FuelType.DIESEL,
}

# ------------------------------------------------------------------
# Capability records
# ------------------------------------------------------------------


class FuelTank(GarageBaseModel):
    """Fuel capability: tank level in litres, no upper bound."""

    type: Literal["fuel"] = "fuel"
    fuel_type: FuelType
    level_liters: float = 0.0

    @field_validator("level_liters", mode="before")
    @classmethod
    def _clamp_level(cls, value: Any) -> Any:
        return clamp_non_negative(value)


class Battery(GarageBaseModel):
    """Battery capability: stored charge saturates at ``capacity_kwh``."""

    type: Literal["battery"] = "battery"
    capacity_kwh: float = 0.0
    charge_kwh: float = 0.0

    @field_validator("capacity_kwh", mode="before")
    @classmethod
    def _clamp_capacity(cls, value: Any) -> Any:
        return clamp_non_negative(value)

    @field_validator("charge_kwh", mode="before")
    @classmethod
    def _clamp_charge(cls, value: Any, info: ValidationInfo) -> Any:
        value = clamp_non_negative(value)
        capacity = info.data.get("capacity_kwh")
        if isinstance(value, float) and capacity is not None:
            return min(value, capacity)
        return value


PowerSource = Annotated[FuelTank | Battery, Field(discriminator="type")]

# ------------------------------------------------------------------
# Vehicle
# ------------------------------------------------------------------


def _require(value: Any, name: str) -> None:
    if value is None:
        raise GarageInvalidArgumentError(f"{name} must not be None", argument=name)


class Vehicle(GarageBaseModel):
    """A vehicle entry: immutable identity and parts, mutable driving state.

    Build instances through :meth:`car`, :meth:`truck`,
    :meth:`electric_car` or :meth:`electric_truck`.
    """

    id: UUID = Field(default_factory=uuid4, frozen=True)
    """Identifier assigned once at creation."""
    kind: VehicleKind = Field(frozen=True)
    engine: Engine = Field(frozen=True)
    owner: Driver = Field(frozen=True)
    tires: list[Tire] = Field(frozen=True)
    transmission: TransmissionType = Field(frozen=True)
    power_source: PowerSource
    cargo_weight: float = Field(default=0.0, frozen=True)
    """Cargo weight in tonnes (trucks only)."""
    max_speed: float = Field(default=DEFAULT_MAX_ALLOWED_SPEED, gt=0, frozen=True)
    """Speed ceiling in km/h."""
    speed: float = 0.0
    """Current speed in km/h, kept within ``[0, max_speed]``."""

    @field_validator("cargo_weight", mode="before")
    @classmethod
    def _clamp_non_negative(cls, value: Any) -> Any:
        return clamp_non_negative(value)

    @field_validator("speed", mode="before")
    @classmethod
    def _clamp_speed(cls, value: Any, info: ValidationInfo) -> Any:
        value = clamp_non_negative(value)
        max_speed = info.data.get("max_speed")
        if isinstance(value, float) and max_speed is not None:
            return min(value, max_speed)
        return value

    @model_validator(mode="after")
    def _check_variant(self) -> Vehicle:
        if self.kind.is_electric:
            if not isinstance(self.power_source, Battery):
                raise ValueError(f"{self.kind.value} requires a battery power source")
        else:
            if not isinstance(self.power_source, FuelTank):
                raise ValueError(f"{self.kind.value} requires a fuel tank power source")
            expected = FUEL_BY_KIND[self.kind]
            if self.power_source.fuel_type != expected:
                raise ValueError(f"{self.kind.value} burns {expected.value}, got {self.power_source.fuel_type.value}")
        if self.cargo_weight and not self.kind.carries_cargo:
            raise ValueError(f"{self.kind.value} cannot carry cargo")
        return self

    @property
    def label(self) -> str:
        """Display name used in status lines (e.g. ``"ElectricTruck"``)."""
        return self.kind.label

    def __str__(self) -> str:
        return f"{self.label} {self.id} Owner:{self.owner} Speed:{self.speed:g} hp:{self.engine.horse_power}"

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def _build(
        cls,
        kind: VehicleKind,
        engine: Engine,
        owner: Driver,
        tires: list[Tire],
        transmission: TransmissionType,
        power_source: FuelTank | Battery,
        *,
        cargo_weight: float = 0.0,
        config: GarageConfig | None = None,
    ) -> Vehicle:
        _require(engine, "engine")
        _require(owner, "owner")
        _require(tires, "tires")
        max_speed = config.max_allowed_speed if config is not None else DEFAULT_MAX_ALLOWED_SPEED
        return cls(
            kind=kind,
            engine=engine,
            owner=owner,
            tires=list(tires),
            transmission=transmission,
            power_source=power_source,
            cargo_weight=cargo_weight,
            max_speed=max_speed,
        )

    @classmethod
    def car(
        cls,
        engine: Engine,
        owner: Driver,
        tires: list[Tire],
        transmission: TransmissionType,
        initial_fuel: float = 0.0,
        *,
        config: GarageConfig | None = None,
    ) -> Vehicle:
        """Petrol passenger car."""
        tank = FuelTank(fuel_type=FuelType.PETROL, level_liters=initial_fuel)
        return cls._build(VehicleKind.CAR, engine, owner, tires, transmission, tank, config=config)

    @classmethod
    def truck(
        cls,
        engine: Engine,
        owner: Driver,
        tires: list[Tire],
        transmission: TransmissionType,
        initial_fuel: float = 0.0,
        cargo_weight: float = 0.0,
        *,
        config: GarageConfig | None = None,
    ) -> Vehicle:
        """Diesel truck carrying *cargo_weight* tonnes."""
        tank = FuelTank(fuel_type=FuelType.DIESEL, level_liters=initial_fuel)
        return cls._build(
            VehicleKind.TRUCK,
            engine,
            owner,
            tires,
            transmission,
            tank,
            cargo_weight=cargo_weight,
            config=config,
        )

    @classmethod
    def electric_car(
        cls,
        engine: Engine,
        owner: Driver,
        tires: list[Tire],
        transmission: TransmissionType,
        battery_capacity: float,
        initial_charge: float = 0.0,
        *,
        config: GarageConfig | None = None,
    ) -> Vehicle:
        battery = Battery(capacity_kwh=battery_capacity, charge_kwh=initial_charge)
        return cls._build(VehicleKind.ELECTRIC_CAR, engine, owner, tires, transmission, battery, config=config)

    @classmethod
    def electric_truck(
        cls,
        engine: Engine,
        owner: Driver,
        tires: list[Tire],
        transmission: TransmissionType,
        battery_capacity: float,
        initial_charge: float = 0.0,
        cargo_weight: float = 0.0,
        *,
        config: GarageConfig | None = None,
    ) -> Vehicle:
        battery = Battery(capacity_kwh=battery_capacity, charge_kwh=initial_charge)
        return cls._build(
            VehicleKind.ELECTRIC_TRUCK,
            engine,
            owner,
            tires,
            transmission,
            battery,
            cargo_weight=cargo_weight,
            config=config,
        )
