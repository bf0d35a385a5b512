from __future__ import annotations

import os
from dataclasses import dataclass


DEFAULT_MAX_DONATIONS = 10_000
DEFAULT_REGISTRATION_FEE = 500


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class RegistrySettings:
    """Startup configuration for a registry instance.

    Values only seed a fresh registry. After startup the fee and the cap
    change exclusively through the authority-gated operations.
    """

    max_donations: int = DEFAULT_MAX_DONATIONS
    registration_fee: int = DEFAULT_REGISTRATION_FEE
    url: str = ""
    log_level: str = "info"

    def __post_init__(self) -> None:
        if self.max_donations <= 0:
            raise ValueError("max_donations must be a positive integer")
        if self.registration_fee < 0:
            raise ValueError("registration_fee must be >= 0")

    @classmethod
    def from_env(cls) -> "RegistrySettings":
        return cls(
            max_donations=_env_int("DONATION_REGISTRY_MAX_DONATIONS", DEFAULT_MAX_DONATIONS),
            registration_fee=_env_int("DONATION_REGISTRY_REGISTRATION_FEE", DEFAULT_REGISTRATION_FEE),
            url=os.getenv("DONATION_REGISTRY_URL", "").strip(),
            log_level=os.getenv("DONATION_REGISTRY_LOG_LEVEL", "info").strip().lower() or "info",
        )
