from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from pygarage.exceptions import GarageInvalidArgumentError
from pygarage.garage import Garage
from pygarage.models import Vehicle


@dataclass
class _Entry:
    name: str
    id: UUID = field(default_factory=uuid4)


def test_add_then_get_returns_same_entry(car: Vehicle) -> None:
    garage: Garage[Vehicle] = Garage()
    garage.add(car)

    assert garage.get(car.id) is car
    assert garage.get(str(car.id)) is car


def test_add_same_id_replaces_entry() -> None:
    garage: Garage[_Entry] = Garage()
    first = _Entry("first")
    second = _Entry("second", id=first.id)

    garage.add(first)
    garage.add(second)

    assert len(garage) == 1
    assert garage.get(first.id) is second


def test_add_none_raises_invalid_argument() -> None:
    garage: Garage[_Entry] = Garage()
    with pytest.raises(GarageInvalidArgumentError):
        garage.add(None)  # type: ignore[arg-type]


def test_add_entry_without_uuid_id_raises() -> None:
    garage: Garage[_Entry] = Garage()
    with pytest.raises(GarageInvalidArgumentError):
        garage.add(object())  # type: ignore[arg-type]


def test_invalid_argument_is_value_error() -> None:
    garage: Garage[_Entry] = Garage()
    with pytest.raises(ValueError):
        garage.add(None)  # type: ignore[arg-type]


def test_get_missing_returns_none() -> None:
    garage: Garage[_Entry] = Garage()
    assert garage.get(uuid4()) is None


def test_remove_absent_is_noop() -> None:
    garage: Garage[_Entry] = Garage()
    entry = _Entry("kept")
    garage.add(entry)

    assert garage.remove(uuid4()) is False
    assert garage.get_all() == [entry]


def test_malformed_identifier_is_not_found() -> None:
    garage: Garage[_Entry] = Garage()
    garage.add(_Entry("a"))

    assert garage.get("not-a-uuid") is None
    assert garage.remove("") is False
    assert "not-a-uuid" not in garage
    assert len(garage) == 1


def test_add_remove_scenario() -> None:
    garage: Garage[_Entry] = Garage()
    a = _Entry("a")
    b = _Entry("b")
    garage.add(a)
    garage.add(b)

    assert {entry.id for entry in garage.get_all()} == {a.id, b.id}

    assert garage.remove(a.id) is True
    assert [entry.id for entry in garage.get_all()] == [b.id]
    assert garage.get(a.id) is None
    assert a.id not in garage
    assert b.id in garage


def test_size_tracks_distinct_ids_minus_removed() -> None:
    garage: Garage[_Entry] = Garage()
    entries = [_Entry(str(i)) for i in range(5)]
    for entry in entries:
        garage.add(entry)
    garage.add(entries[0])
    garage.remove(entries[1].id)
    garage.remove(entries[1].id)

    assert len(garage.get_all()) == 4


def test_get_all_is_snapshot() -> None:
    garage: Garage[_Entry] = Garage()
    a = _Entry("a")
    garage.add(a)

    snapshot = garage.get_all()
    garage.remove(a.id)

    assert snapshot == [a]
    assert list(garage) == []


def test_each_garage_has_own_id() -> None:
    assert Garage().id != Garage().id


def test_add_logs_debug_line(caplog: pytest.LogCaptureFixture) -> None:
    garage: Garage[_Entry] = Garage()
    entry = _Entry("a")

    with caplog.at_level(logging.DEBUG, logger="pygarage.garage"):
        garage.add(entry)

    assert str(entry.id) in caplog.text
    assert "_Entry" in caplog.text
