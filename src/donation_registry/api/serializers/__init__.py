from __future__ import annotations

from .donations import (
    config_to_dict,
    donation_to_dict,
    donation_update_to_dict,
    error_to_dict,
    status_for_error,
    transfer_to_dict,
)

__all__ = [
    "config_to_dict",
    "donation_to_dict",
    "donation_update_to_dict",
    "error_to_dict",
    "status_for_error",
    "transfer_to_dict",
]
