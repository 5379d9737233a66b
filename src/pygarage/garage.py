"""Identifier-keyed registry of vehicles (or any entry exposing ``id``)."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, Protocol, TypeVar
from uuid import UUID, uuid4

from pygarage.exceptions import GarageInvalidArgumentError

_logger = logging.getLogger(__name__)


class Identifiable(Protocol):
    @property
    def id(self) -> UUID: ...


TEntry = TypeVar("TEntry", bound=Identifiable)


def _coerce_id(value: UUID | str) -> UUID | None:
    """Return *value* as a UUID, or ``None`` when it is not a well-formed identifier."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        try:
            return UUID(value)
        except ValueError:
            return None
    return None


class Garage(Generic[TEntry]):
    """Holds entries of a single type, addressable by their ``id``.

    Adding an entry whose id is already present replaces the previous
    entry. Iteration order is not part of the contract.

    Usage::

        garage: Garage[Vehicle] = Garage()
        garage.add(car)
        assert garage.get(car.id) is car
    """

    def __init__(self) -> None:
        self._id = uuid4()
        self._storage: dict[UUID, TEntry] = {}

    @property
    def id(self) -> UUID:
        return self._id

    def add(self, entry: TEntry) -> None:
        """Store *entry* under its own identifier (last write wins)."""
        if entry is None:
            raise GarageInvalidArgumentError("entry must not be None", argument="entry")
        entry_id = getattr(entry, "id", None)
        if not isinstance(entry_id, UUID):
            raise GarageInvalidArgumentError(
                f"{type(entry).__name__} does not expose a UUID id",
                argument="entry",
            )
        replaced = entry_id in self._storage
        self._storage[entry_id] = entry
        _logger.debug(
            "[%s] id=%s added %s id=%s%s",
            type(self).__name__,
            self._id,
            type(entry).__name__,
            entry_id,
            " (replaced)" if replaced else "",
        )

    def get(self, entry_id: UUID | str) -> TEntry | None:
        """Return the entry for *entry_id*, or ``None`` if absent or malformed."""
        key = _coerce_id(entry_id)
        if key is None:
            return None
        return self._storage.get(key)

    def remove(self, entry_id: UUID | str) -> bool:
        """Remove the entry for *entry_id*; return whether anything was removed."""
        key = _coerce_id(entry_id)
        if key is None or key not in self._storage:
            return False
        del self._storage[key]
        _logger.debug("[%s] id=%s removed id=%s", type(self).__name__, self._id, key)
        return True

    def get_all(self) -> list[TEntry]:
        """Snapshot of all current entries."""
        return list(self._storage.values())

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, entry_id: object) -> bool:
        if not isinstance(entry_id, (UUID, str)):
            return False
        key = _coerce_id(entry_id)
        return key is not None and key in self._storage

    def __iter__(self) -> Iterator[TEntry]:
        return iter(self.get_all())
