from __future__ import annotations

from .client import DonationRegistryClient

__all__ = ["DonationRegistryClient"]
