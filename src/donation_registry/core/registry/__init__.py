from __future__ import annotations

from .service import DonationRegistry, RegistryConfig
from .state import RegistryState

__all__ = ["DonationRegistry", "RegistryConfig", "RegistryState"]
