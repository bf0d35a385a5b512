from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.ledger import InMemoryLedger
from ..core.registry import DonationRegistry
from .routes import mount_admin_api, mount_chain_api, mount_donations_api


def create_api_app(registry: DonationRegistry, ledger: InMemoryLedger) -> FastAPI:
    """Create the HTTP API around one registry and the host ledger it charges fees on."""

    app = FastAPI(title="donation-registry", version="0.1.0")
    app.state.registry = registry
    app.state.ledger = ledger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    mount_admin_api(app)
    mount_chain_api(app)
    mount_donations_api(app)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
