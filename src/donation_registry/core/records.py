from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


Principal = str

# Reserved null principal; never a valid authority or recipient.
BURN_PRINCIPAL: Principal = "SP000000000000000000002Q6VF78"


class Currency(str, Enum):
    """Denomination a donation is recorded in."""

    STX = "STX"
    USD = "USD"
    BTC = "BTC"

    @classmethod
    def parse(cls, value: Any) -> "Currency | None":
        """Return the matching currency, or None for anything else.

        Matching is exact: ``"stx"`` is not ``STX``.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True, kw_only=True)
class Donation:
    """A registered donation.

    Notes:
    - `content_hash`, `owner`, `description`, `location`, `currency` and `expiry` never change.
    - `last_modified_at` moves only when `food_type` / `quantity` are updated.
    """

    content_hash: bytes
    owner: Principal
    food_type: str
    quantity: int
    created_at: int
    last_modified_at: int
    active: bool
    description: str
    location: str
    currency: Currency
    expiry: int
    recipient: Principal | None = None


@dataclass(frozen=True, kw_only=True)
class DonationUpdate:
    food_type: str
    quantity: int
    updated_at: int
    updater: Principal
