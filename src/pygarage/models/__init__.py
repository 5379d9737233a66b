"""Domain models for vehicles and their parts."""

from pygarage.models._base import GarageBaseModel, GarageEnum, GarageFrozenModel
from pygarage.models.parts import Driver, Engine, Tire
from pygarage.models.vehicle import (
    FUEL_BY_KIND,
    Battery,
    FuelTank,
    FuelType,
    PowerSource,
    TransmissionType,
    Vehicle,
    VehicleKind,
)

__all__ = [
    "Battery",
    "Driver",
    "Engine",
    "FUEL_BY_KIND",
    "FuelTank",
    "FuelType",
    "GarageBaseModel",
    "GarageEnum",
    "GarageFrozenModel",
    "PowerSource",
    "Tire",
    "TransmissionType",
    "Vehicle",
    "VehicleKind",
]
