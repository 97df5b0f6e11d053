"""Environment driven configuration for the reservation core."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_ENV_PREFIX = "FLIGHT_RESERVATION_"

DEFAULT_MAX_SEATS = 10
DEFAULT_HASH_SIZE = 20
DEFAULT_QUEUE_SIZE = 50
DEFAULT_ID_BASE = 10000
DEFAULT_MAX_NAME_LENGTH = 99
DEFAULT_ALLOCATOR = "legacy"
DEFAULT_LOG_LEVEL = "WARNING"


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class ReservationConfig:
    """Capacities and limits shared by the registry, queue and engine."""

    max_seats: int = DEFAULT_MAX_SEATS
    hash_size: int = DEFAULT_HASH_SIZE
    queue_size: int = DEFAULT_QUEUE_SIZE
    id_base: int = DEFAULT_ID_BASE
    max_name_length: int = DEFAULT_MAX_NAME_LENGTH
    allocator: str = DEFAULT_ALLOCATOR
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        for field_name in ("max_seats", "hash_size", "queue_size", "max_name_length"):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"{field_name} must be greater than 0")
        if self.id_base < 0:
            raise ValueError("id_base must not be negative")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ReservationConfig":
        """Build a configuration from ``FLIGHT_RESERVATION_*`` variables."""

        if env is None:
            env = os.environ
        allocator = env.get(_ENV_PREFIX + "ALLOCATOR", "").strip().lower() or DEFAULT_ALLOCATOR
        log_level = env.get(_ENV_PREFIX + "LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        return cls(
            max_seats=_read_int(env, "MAX_SEATS", DEFAULT_MAX_SEATS),
            hash_size=_read_int(env, "HASH_SIZE", DEFAULT_HASH_SIZE),
            queue_size=_read_int(env, "QUEUE_SIZE", DEFAULT_QUEUE_SIZE),
            id_base=_read_int(env, "ID_BASE", DEFAULT_ID_BASE),
            max_name_length=_read_int(env, "MAX_NAME_LENGTH", DEFAULT_MAX_NAME_LENGTH),
            allocator=allocator,
            log_level=log_level,
        )
