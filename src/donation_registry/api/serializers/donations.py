from __future__ import annotations

from typing import Any

from ...core.errors import ErrorKind
from ...core.ledger import TransferRecord
from ...core.records import Donation, DonationUpdate
from ...core.registry import RegistryConfig


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NOT_AUTHORIZED: 403,
    ErrorKind.DONATION_ALREADY_EXISTS: 409,
    ErrorKind.MAX_DONATIONS_EXCEEDED: 409,
    ErrorKind.AUTHORITY_NOT_VERIFIED: 409,
    ErrorKind.TRANSFER_FAILED: 402,
}


def status_for_error(kind: ErrorKind) -> int:
    return _STATUS_BY_KIND.get(kind, 400)


def error_to_dict(kind: ErrorKind) -> dict[str, Any]:
    return {"ok": False, "error": kind.label, "code": int(kind)}


def donation_to_dict(donation_id: int, d: Donation) -> dict[str, Any]:
    return {
        "id": int(donation_id),
        "contentHash": d.content_hash.hex(),
        "owner": d.owner,
        "foodType": d.food_type,
        "quantity": int(d.quantity),
        "createdAt": int(d.created_at),
        "lastModifiedAt": int(d.last_modified_at),
        "active": bool(d.active),
        "description": d.description,
        "location": d.location,
        "currency": d.currency.value,
        "expiry": int(d.expiry),
        "recipient": d.recipient,
    }


def donation_update_to_dict(donation_id: int, u: DonationUpdate) -> dict[str, Any]:
    return {
        "id": int(donation_id),
        "foodType": u.food_type,
        "quantity": int(u.quantity),
        "updatedAt": int(u.updated_at),
        "updater": u.updater,
    }


def config_to_dict(cfg: RegistryConfig, *, donation_count: int) -> dict[str, Any]:
    return {
        "authority": cfg.authority,
        "registrationFee": int(cfg.registration_fee),
        "maxDonations": int(cfg.max_donations),
        "donationCount": int(donation_count),
    }


def transfer_to_dict(t: TransferRecord) -> dict[str, Any]:
    return {
        "amount": int(t.amount),
        "from": t.sender,
        "to": t.recipient,
        "blockHeight": int(t.block_height),
    }
