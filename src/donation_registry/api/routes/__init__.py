from __future__ import annotations

from .admin import mount_admin_api
from .chain import mount_chain_api
from .donations import mount_donations_api

__all__ = ["mount_admin_api", "mount_chain_api", "mount_donations_api"]
