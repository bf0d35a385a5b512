from __future__ import annotations

from .core import (
    BURN_PRINCIPAL,
    CallContext,
    Currency,
    Donation,
    DonationRegistry,
    DonationUpdate,
    Err,
    ErrorKind,
    HostFault,
    InMemoryLedger,
    Ok,
    RegistryError,
    RegistrySettings,
    Result,
)
from .runtime.server import RegistryServer, run
from .sdk.client import DonationRegistryClient

__all__ = [
    "run",
    "RegistryServer",
    "DonationRegistryClient",
    "DonationRegistry",
    "RegistrySettings",
    "InMemoryLedger",
    "CallContext",
    "Donation",
    "DonationUpdate",
    "Currency",
    "BURN_PRINCIPAL",
    "ErrorKind",
    "Ok",
    "Err",
    "Result",
    "RegistryError",
    "HostFault",
]
