from __future__ import annotations

from dataclasses import dataclass, field

from ..config import DEFAULT_MAX_DONATIONS, DEFAULT_REGISTRATION_FEE
from ..records import Donation, DonationUpdate, Principal


@dataclass
class RegistryState:
    """Authoritative registry fields.

    Only `DonationRegistry` writes to an instance; everyone else gets a copy from `snapshot()`.
    """

    next_id: int = 0
    max_donations: int = DEFAULT_MAX_DONATIONS
    registration_fee: int = DEFAULT_REGISTRATION_FEE
    authority: Principal | None = None
    donations: dict[int, Donation] = field(default_factory=dict)
    updates: dict[int, DonationUpdate] = field(default_factory=dict)
    hash_index: dict[bytes, int] = field(default_factory=dict)

    def copy(self) -> "RegistryState":
        # Records are frozen, so copying the mappings is enough.
        return RegistryState(
            next_id=self.next_id,
            max_donations=self.max_donations,
            registration_fee=self.registration_fee,
            authority=self.authority,
            donations=dict(self.donations),
            updates=dict(self.updates),
            hash_index=dict(self.hash_index),
        )
