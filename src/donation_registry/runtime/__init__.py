from __future__ import annotations

from .app import create_app
from .server import RegistryServer, run

__all__ = ["create_app", "RegistryServer", "run"]
