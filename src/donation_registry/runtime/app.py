from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.config import RegistrySettings
from ..core.ledger import InMemoryLedger
from ..core.registry import DonationRegistry


def create_app(settings: RegistrySettings | None = None, *, ledger: InMemoryLedger | None = None) -> FastAPI:
    """Create the full app: a fresh registry bound to a host ledger."""

    settings = settings or RegistrySettings.from_env()
    ledger = ledger or InMemoryLedger()
    registry = DonationRegistry(ledger, settings=settings)
    return create_api_app(registry, ledger)
