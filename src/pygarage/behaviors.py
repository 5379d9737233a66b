"""Vehicle operations dispatched through a per-kind behaviour table.

Each operation mutates the vehicle's driving state where applicable and
returns the human-readable status lines it produced. Every line is also
logged at INFO on this module's logger; the text is meant for people,
not for parsing.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from pygarage.exceptions import GarageInvalidArgumentError, GarageUnsupportedOperationError
from pygarage.models.vehicle import Battery, FuelTank, Vehicle, VehicleKind

_logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# Behaviour table
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class KindBehavior:
    """Per-kind additions to the shared vehicle behaviour.

    ``start_checks`` builds the lines printed after the base start line
    (fuel kinds) or instead of it (electric kinds, which start silently).
    """

    start_checks: Callable[[Vehicle], list[str]]
    maintenance_checks: tuple[str, ...] = ()


def _car_checks(vehicle: Vehicle) -> list[str]:
    return [f"[{vehicle.label}] Checking seat belts and mirrors."]


def _truck_checks(vehicle: Vehicle) -> list[str]:
    return [
        f"[{vehicle.label}] Checking seat belts, mirrors and tire pressure.",
        f"[{vehicle.label}] Cargo weight: {vehicle.cargo_weight:g} t.",
    ]


def _silent_start(vehicle: Vehicle) -> list[str]:
    battery = _battery(vehicle, "start")
    return [
        f"[{vehicle.label}] Silent electric motor start. "
        f"Charge: {battery.charge_kwh:g}/{battery.capacity_kwh:g} kWh."
    ]


_OIL_CHANGE = "Changing oil and filters if needed."

BEHAVIORS: dict[VehicleKind, KindBehavior] = {
    VehicleKind.CAR: KindBehavior(start_checks=_car_checks, maintenance_checks=(_OIL_CHANGE,)),
    VehicleKind.TRUCK: KindBehavior(start_checks=_truck_checks, maintenance_checks=(_OIL_CHANGE,)),
    VehicleKind.ELECTRIC_CAR: KindBehavior(start_checks=_silent_start),
    VehicleKind.ELECTRIC_TRUCK: KindBehavior(start_checks=_silent_start),
}


def _emit(lines: list[str], level: int = logging.INFO) -> list[str]:
    for line in lines:
        _logger.log(level, "%s", line)
    return lines


def _tank(vehicle: Vehicle, operation: str) -> FuelTank:
    if not isinstance(vehicle.power_source, FuelTank):
        raise GarageUnsupportedOperationError(f"{vehicle.label} has no fuel tank; cannot {operation}")
    return vehicle.power_source


def _battery(vehicle: Vehicle, operation: str) -> Battery:
    if not isinstance(vehicle.power_source, Battery):
        raise GarageUnsupportedOperationError(f"{vehicle.label} has no battery; cannot {operation}")
    return vehicle.power_source


# ------------------------------------------------------------------
# Operations
# ------------------------------------------------------------------


def start(vehicle: Vehicle) -> list[str]:
    behavior = BEHAVIORS[vehicle.kind]
    lines: list[str] = []
    if not vehicle.kind.is_electric:
        lines.append(f"[{vehicle.label}] Starting engine {vehicle.engine} for owner {vehicle.owner}.")
    lines.extend(behavior.start_checks(vehicle))
    return _emit(lines)


def stop(vehicle: Vehicle) -> list[str]:
    vehicle.speed = 0.0
    return _emit([f"[{vehicle.label}] Stopping vehicle."])


def accelerate(vehicle: Vehicle, delta: float) -> list[str]:
    """Increase speed by *delta*, capped at ``vehicle.max_speed``.

    A non-positive (or NaN) *delta* leaves the speed unchanged and produces a
    warning line instead of raising.
    """
    if not delta > 0:
        return _emit([f"[{vehicle.label}] Acceleration value must be positive, got {delta:g}."], logging.WARNING)

    vehicle.speed = min(vehicle.speed + delta, vehicle.max_speed)
    return _emit([f"[{vehicle.label}] Accelerating by {delta:g} -> current speed {vehicle.speed:g} km/h."])


def refuel(vehicle: Vehicle, liters: float) -> list[str]:
    tank = _tank(vehicle, "refuel")
    if not (math.isfinite(liters) and liters > 0):
        raise GarageInvalidArgumentError(f"liters must be positive, got {liters}", argument="liters")

    tank.level_liters += liters
    return _emit([f"[{vehicle.label}] Refuelled {liters:g} L. Current fuel level: {tank.level_liters:g} L."])


def charge(vehicle: Vehicle, kwh: float) -> list[str]:
    battery = _battery(vehicle, "charge")
    if not (math.isfinite(kwh) and kwh > 0):
        raise GarageInvalidArgumentError(f"kWh must be positive, got {kwh}", argument="kwh")

    battery.charge_kwh = min(battery.charge_kwh + kwh, battery.capacity_kwh)
    return _emit(
        [
            f"[{vehicle.label}] Charged {kwh:g} kWh. "
            f"Current charge: {battery.charge_kwh:g}/{battery.capacity_kwh:g} kWh."
        ]
    )


def perform_maintenance(vehicle: Vehicle) -> list[str]:
    """Base inspection, then the energy-system check, then kind-specific work."""
    lines = [f"[{vehicle.label}] Basic maintenance: checking engine and tire pressure."]
    if isinstance(vehicle.power_source, Battery):
        lines.append(f"[{vehicle.label}] Checking battery and electronics.")
    else:
        lines.append(f"[{vehicle.label}] Checking fuel system and filters.")
    lines.extend(f"[{vehicle.label}] {check}" for check in BEHAVIORS[vehicle.kind].maintenance_checks)
    return _emit(lines)


def describe(vehicle: Vehicle) -> str:
    return str(vehicle)
