from __future__ import annotations

import pytest

from pygarage.models import Driver, Engine, Tire, TransmissionType, Vehicle


@pytest.fixture
def tires() -> list[Tire]:
    return [Tire(brand="Michelin", pressure=2.1) for _ in range(4)]


@pytest.fixture
def car(tires: list[Tire]) -> Vehicle:
    return Vehicle.car(
        Engine(model="VAZ-11182", horse_power=83),
        Driver(name="Test Driver", experience_years=3),
        tires,
        TransmissionType.MANUAL,
        initial_fuel=10,
    )


@pytest.fixture
def electric_car(tires: list[Tire]) -> Vehicle:
    return Vehicle.electric_car(
        Engine(model="E-Motor", horse_power=200),
        Driver(name="Test Driver", experience_years=12),
        tires,
        TransmissionType.AUTOMATIC,
        battery_capacity=85,
        initial_charge=40,
    )
