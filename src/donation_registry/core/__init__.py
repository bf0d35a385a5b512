from __future__ import annotations

from .config import RegistrySettings
from .errors import Err, ErrorKind, HostFault, Ok, RegistryError, Result
from .ledger import CallContext, InMemoryLedger, TransferRecord, ValueTransfer
from .records import BURN_PRINCIPAL, Currency, Donation, DonationUpdate, Principal
from .registry import DonationRegistry, RegistryConfig, RegistryState

__all__ = [
    "BURN_PRINCIPAL",
    "CallContext",
    "Currency",
    "Donation",
    "DonationRegistry",
    "DonationUpdate",
    "Err",
    "ErrorKind",
    "HostFault",
    "InMemoryLedger",
    "Ok",
    "Principal",
    "RegistryConfig",
    "RegistryError",
    "RegistrySettings",
    "RegistryState",
    "Result",
    "TransferRecord",
    "ValueTransfer",
]
