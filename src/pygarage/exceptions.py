"""Custom exception hierarchy for pygarage."""

from __future__ import annotations


class GarageError(Exception):
    """Base exception for all pygarage errors."""


class GarageConfigError(GarageError):
    """Invalid or missing configuration."""


class GarageInvalidArgumentError(GarageError, ValueError):
    """A required argument is missing or outside its allowed domain.

    Raised for ``None`` entries passed to :meth:`Garage.add`, missing
    vehicle parts at construction, and non-positive refuel/charge
    quantities.
    """

    def __init__(self, message: str, *, argument: str = "") -> None:
        self.argument = argument
        super().__init__(message)


class GarageUnsupportedOperationError(GarageError, TypeError):
    """Operation is not available for this vehicle kind.

    For example refuelling an electric vehicle or charging a fuel one.
    """
