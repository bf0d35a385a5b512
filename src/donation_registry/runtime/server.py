from __future__ import annotations

import logging
import socket
import threading
import time
from dataclasses import dataclass
from typing import Iterator

import uvicorn

from ..core.config import RegistrySettings
from ..sdk.client import DonationRegistryClient
from .app import create_app


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryServer:
    host: str
    port: int
    url: str

    def client(self, principal: str | None = None) -> DonationRegistryClient:
        return DonationRegistryClient(self.url.rstrip("/"), principal=principal)


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Bare host:port is accepted.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _reserve_port(host: str) -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _attach_candidates(settings: RegistrySettings, host: str, port: int) -> Iterator[str]:
    """URLs worth pinging before starting a server, most explicit first."""
    configured = _normalize_base_url(settings.url)
    if configured:
        yield configured
    # Port 0 asks for a fresh port, so nothing can already be listening there.
    if port != 0:
        yield _normalize_base_url(f"{host}:{port}")


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    settings: RegistrySettings | None = None,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
) -> RegistryServer | DonationRegistryClient:
    """Serve a fresh registry, or hand back a client for one that is already up.

    Unless `new_server=True`, the configured `DONATION_REGISTRY_URL` and then
    http://{host}:{port} are pinged on `/healthz`; the first live one is
    returned as a `DonationRegistryClient`. Otherwise uvicorn serves a new
    registry from a daemon thread and a `RegistryServer` is returned.
    """

    settings = settings or RegistrySettings.from_env()

    if not new_server:
        for url in _attach_candidates(settings, host, port):
            client = DonationRegistryClient(url, timeout_s=connect_timeout_s)
            if client.ping():
                logger.info("Attaching to registry at %s", url)
                return DonationRegistryClient(url)

    port = port or _reserve_port(host)
    server = uvicorn.Server(
        uvicorn.Config(
            create_app(settings),
            host=host,
            port=port,
            log_level=(log_level or settings.log_level).lower(),
            access_log=access_log,
        )
    )
    threading.Thread(target=server.run, name=f"donation-registry:{port}", daemon=True).start()

    # Wait until uvicorn reports startup so an immediate attach succeeds.
    deadline = time.monotonic() + 5.0
    while not server.started and time.monotonic() < deadline:
        time.sleep(0.01)

    url = f"http://{host}:{port}/"
    logger.info("Registry serving at %s", url)
    return RegistryServer(host=host, port=port, url=url)
