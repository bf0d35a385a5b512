from __future__ import annotations

from .fields import (
    parse_bool,
    parse_content_hash,
    parse_int,
    parse_optional_principal,
    parse_str,
)

__all__ = [
    "parse_bool",
    "parse_content_hash",
    "parse_int",
    "parse_optional_principal",
    "parse_str",
]
