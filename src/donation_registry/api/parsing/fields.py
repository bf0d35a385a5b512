from __future__ import annotations

from typing import Any


def parse_bool(value: Any, *, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        raise ValueError(f"Missing {field}")
    s = str(value).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid {field}")


def parse_int(value: Any, *, field: str) -> int:
    """Parse an integer field. Range checks belong to the registry, not here."""
    if value is None:
        raise ValueError(f"Missing {field}")
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Invalid {field}")
    try:
        return int(value)
    except (TypeError, ValueError) as ex:
        raise ValueError(f"Invalid {field}") from ex


def parse_str(value: Any, *, field: str, default: str | None = None) -> str:
    if value is None:
        if default is None:
            raise ValueError(f"Missing {field}")
        return default
    if not isinstance(value, str):
        raise ValueError(f"Invalid {field}")
    return value


def parse_optional_principal(value: Any, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Invalid {field}")
    return value


def parse_content_hash(value: Any, *, field: str = "contentHash") -> bytes:
    """Decode a hex content hash. An empty string decodes to empty bytes."""
    if not isinstance(value, str):
        raise ValueError(f"Invalid {field}")
    s = value.strip()
    if s.startswith(("0x", "0X")):
        s = s[2:]
    try:
        return bytes.fromhex(s)
    except ValueError as ex:
        raise ValueError(f"{field} must be a hex string") from ex
