from __future__ import annotations

from typing import Any

from .errors import ErrorKind
from .records import BURN_PRINCIPAL, Currency


FOOD_TYPE_MAX_LEN = 50
DESCRIPTION_MAX_LEN = 200
LOCATION_MAX_LEN = 100


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_content_hash(content_hash: bytes) -> ErrorKind | None:
    if not isinstance(content_hash, (bytes, bytearray)) or len(content_hash) == 0:
        return ErrorKind.INVALID_DONATION_ID
    return None


def check_food_type(food_type: str) -> ErrorKind | None:
    if not isinstance(food_type, str) or not (1 <= len(food_type) <= FOOD_TYPE_MAX_LEN):
        return ErrorKind.INVALID_FOOD_TYPE
    return None


def check_quantity(quantity: int) -> ErrorKind | None:
    if not _is_int(quantity) or quantity <= 0:
        return ErrorKind.INVALID_QUANTITY
    return None


def check_description(description: str) -> ErrorKind | None:
    if not isinstance(description, str) or len(description) > DESCRIPTION_MAX_LEN:
        return ErrorKind.INVALID_DESCRIPTION
    return None


def check_location(location: str) -> ErrorKind | None:
    if not isinstance(location, str) or not (1 <= len(location) <= LOCATION_MAX_LEN):
        return ErrorKind.INVALID_LOCATION
    return None


def check_currency(currency: Any) -> ErrorKind | None:
    if Currency.parse(currency) is None:
        return ErrorKind.INVALID_CURRENCY
    return None


def check_expiry(expiry: int, block_height: int) -> ErrorKind | None:
    if not _is_int(expiry) or expiry <= int(block_height):
        return ErrorKind.INVALID_EXPIRY
    return None


def check_recipient(recipient: str | None) -> ErrorKind | None:
    """None means "no recipient" and is accepted."""
    if recipient is None:
        return None
    if not isinstance(recipient, str) or not recipient or recipient == BURN_PRINCIPAL:
        return ErrorKind.INVALID_RECIPIENT
    return None


def check_status(status: Any) -> ErrorKind | None:
    if not isinstance(status, bool):
        return ErrorKind.INVALID_STATUS
    return None


def check_fee(fee: int) -> ErrorKind | None:
    if not _is_int(fee) or fee < 0:
        return ErrorKind.INVALID_UPDATE_PARAM
    return None


def check_max_donations(max_donations: int) -> ErrorKind | None:
    if not _is_int(max_donations) or max_donations <= 0:
        return ErrorKind.INVALID_UPDATE_PARAM
    return None
