"""Library configuration for pygarage."""

from __future__ import annotations

import dataclasses
import logging
import math
import os
from typing import Any

from pygarage._constants import DEFAULT_LOG_LEVEL, DEFAULT_MAX_ALLOWED_SPEED
from pygarage.exceptions import GarageConfigError


@dataclasses.dataclass(frozen=True)
class GarageConfig:
    """Configuration shared by vehicle factories and the demo program.

    Parameters
    ----------
    max_allowed_speed : float
        Upper bound (km/h) that acceleration can never exceed. Copied onto
        every vehicle built by the ``Vehicle`` factories.
    log_level : str
        Level name used by the demo program when it configures logging.
        The library itself never installs handlers.
    """

    max_allowed_speed: float = DEFAULT_MAX_ALLOWED_SPEED
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not (math.isfinite(self.max_allowed_speed) and self.max_allowed_speed > 0):
            raise GarageConfigError(f"max_allowed_speed must be positive, got {self.max_allowed_speed}")
        level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise GarageConfigError(f"unknown log level {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, **overrides: Any) -> GarageConfig:
        """Create configuration from environment variables.

        Reads ``GARAGE_MAX_ALLOWED_SPEED`` and ``GARAGE_LOG_LEVEL``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        speed_env = env.get("GARAGE_MAX_ALLOWED_SPEED")
        if speed_env is not None and "max_allowed_speed" not in overrides:
            try:
                config_kwargs["max_allowed_speed"] = float(speed_env)
            except ValueError as exc:
                raise GarageConfigError(f"GARAGE_MAX_ALLOWED_SPEED is not a number: {speed_env!r}") from exc

        level_env = env.get("GARAGE_LOG_LEVEL")
        if level_env is not None and "log_level" not in overrides:
            config_kwargs["log_level"] = level_env

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
