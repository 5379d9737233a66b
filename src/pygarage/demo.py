"""Console walkthrough: build a small fleet, drive it, park it in garages.

Run with ``pygarage-demo`` (or ``python -m pygarage.demo``).
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence

from pygarage import behaviors
from pygarage.config import GarageConfig
from pygarage.garage import Garage
from pygarage.models import Driver, Engine, Tire, TransmissionType, Vehicle

_logger = logging.getLogger(__name__)


def _tires(*pressures: float, brand: str = "Michelin") -> list[Tire]:
    return [Tire(brand=brand, pressure=pressure) for pressure in pressures]


def build_fleet(config: GarageConfig) -> dict[str, Vehicle]:
    """The five demo vehicles, keyed by a short handle."""
    car_tires = _tires(2.1, 2.1, 2.1, 2.1)
    truck_tires = _tires(8.0, 8.0, *[6.0] * 8)
    e_truck_tires = _tires(8.0, 8.0, *[6.0] * 6)

    return {
        "car": Vehicle.car(
            Engine(model="VAZ-11182", horse_power=83),
            Driver(name="Alexander Ponomarev", experience_years=3),
            car_tires,
            TransmissionType.MANUAL,
            initial_fuel=10,
            config=config,
        ),
        "car2": Vehicle.car(
            Engine(model="Skoda Octavia", horse_power=150),
            Driver(name="Alexander Shipov", experience_years=5),
            car_tires,
            TransmissionType.AUTOMATIC,
            initial_fuel=15,
            config=config,
        ),
        "e_car": Vehicle.electric_car(
            Engine(model="E-Motor", horse_power=200),
            Driver(name="Alexander Alexandrov", experience_years=12),
            car_tires,
            TransmissionType.AUTOMATIC,
            battery_capacity=85,
            initial_charge=40,
            config=config,
        ),
        "truck": Vehicle.truck(
            Engine(model="KAMAZ-5490", horse_power=300),
            Driver(name="Alexander Abdulaev", experience_years=20),
            truck_tires,
            TransmissionType.AUTOMATIC,
            initial_fuel=100,
            cargo_weight=10,
            config=config,
        ),
        "e_truck": Vehicle.electric_truck(
            Engine(model="Actros", horse_power=350),
            Driver(name="Alexander Bartenev", experience_years=12),
            e_truck_tires,
            TransmissionType.AUTOMATIC,
            battery_capacity=90,
            initial_charge=60,
            config=config,
        ),
    }


def _drive(fleet: dict[str, Vehicle]) -> list[str]:
    car, car2, e_car = fleet["car"], fleet["car2"], fleet["e_car"]
    truck, e_truck = fleet["truck"], fleet["e_truck"]

    steps: list[list[Callable[[], list[str]]]] = [
        [
            lambda: behaviors.start(car),
            lambda: behaviors.accelerate(car, 50),
            lambda: behaviors.refuel(car, 30),
            lambda: behaviors.perform_maintenance(car),
            lambda: behaviors.stop(car),
        ],
        [
            lambda: behaviors.start(car2),
            lambda: behaviors.accelerate(car2, 80),
            lambda: behaviors.refuel(car2, 30),
        ],
        [
            lambda: behaviors.start(e_car),
            lambda: behaviors.accelerate(e_car, 60),
            lambda: behaviors.charge(e_car, 15),
            lambda: behaviors.perform_maintenance(e_car),
        ],
        [
            lambda: behaviors.start(truck),
            lambda: behaviors.accelerate(truck, 30),
            lambda: behaviors.refuel(truck, 100),
            lambda: behaviors.perform_maintenance(truck),
        ],
        [
            lambda: behaviors.start(e_truck),
            lambda: behaviors.accelerate(e_truck, 40),
            lambda: behaviors.charge(e_truck, 15),
        ],
    ]

    lines: list[str] = []
    for block in steps:
        for step in block:
            lines.extend(step())
        lines.append("")
    return lines


def _park(fleet: dict[str, Vehicle]) -> list[str]:
    groups = [
        ("car", "e_car"),
        ("car2",),
        ("truck",),
        ("e_truck",),
    ]
    lines: list[str] = []
    for handles in groups:
        garage: Garage[Vehicle] = Garage()
        for handle in handles:
            garage.add(fleet[handle])
        lines.append(f"Garage {garage.id} contents:")
        lines.extend(behaviors.describe(vehicle) for vehicle in garage.get_all())
        lines.append("")
    return lines


def run(config: GarageConfig) -> list[str]:
    """Run the whole walkthrough and return the produced status lines."""
    fleet = build_fleet(config)
    return _drive(fleet) + _park(fleet)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a small fleet, drive it and park it in garages.")
    parser.add_argument(
        "--max-speed",
        type=float,
        default=None,
        help="Speed ceiling in km/h (default: GARAGE_MAX_ALLOWED_SPEED or 300).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: GARAGE_LOG_LEVEL or WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    overrides: dict[str, object] = {}
    if args.max_speed is not None:
        overrides["max_allowed_speed"] = args.max_speed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    config = GarageConfig.from_env(**overrides)

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    _logger.debug("Running demo with max_allowed_speed=%s", config.max_allowed_speed)

    for line in run(config):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
