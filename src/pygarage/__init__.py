"""pygarage - Vehicle domain model with a generic identifier-keyed garage."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pygarage")
except PackageNotFoundError:
    __version__ = "0+local"
from pygarage.behaviors import accelerate, charge, describe, perform_maintenance, refuel, start, stop
from pygarage.config import GarageConfig
from pygarage.exceptions import (
    GarageConfigError,
    GarageError,
    GarageInvalidArgumentError,
    GarageUnsupportedOperationError,
)
from pygarage.garage import Garage, Identifiable
from pygarage.models import (
    Battery,
    Driver,
    Engine,
    FuelTank,
    FuelType,
    Tire,
    TransmissionType,
    Vehicle,
    VehicleKind,
)

__all__ = [
    "__version__",
    "Battery",
    "Driver",
    "Engine",
    "FuelTank",
    "FuelType",
    "Garage",
    "GarageConfig",
    "GarageConfigError",
    "GarageError",
    "GarageInvalidArgumentError",
    "GarageUnsupportedOperationError",
    "Identifiable",
    "Tire",
    "TransmissionType",
    "Vehicle",
    "VehicleKind",
    "accelerate",
    "charge",
    "describe",
    "perform_maintenance",
    "refuel",
    "start",
    "stop",
]
