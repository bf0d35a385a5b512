from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Generic, NoReturn, TypeVar, Union


T = TypeVar("T")


class ErrorKind(IntEnum):
    """Registry failure kinds.

    Codes are stable identifiers; callers branch on the kind, never on message text.
    """

    NOT_AUTHORIZED = 100
    INVALID_DONATION_ID = 101
    INVALID_FOOD_TYPE = 102
    INVALID_QUANTITY = 103
    INVALID_TIMESTAMP = 104
    DONATION_ALREADY_EXISTS = 105
    NOT_FOUND = 106
    INVALID_STATUS = 107
    INVALID_DESCRIPTION = 108
    INVALID_LOCATION = 109
    INVALID_CURRENCY = 110
    INVALID_UPDATE_PARAM = 111
    MAX_DONATIONS_EXCEEDED = 112
    AUTHORITY_NOT_VERIFIED = 113
    INVALID_EXPIRY = 114
    INVALID_RECIPIENT = 115
    UPDATE_NOT_ALLOWED = 116
    TRANSFER_FAILED = 117

    @property
    def label(self) -> str:
        """CamelCase name used on the wire, e.g. ``DonationAlreadyExists``."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @classmethod
    def from_any(cls, value: object) -> "ErrorKind":
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)

        v = str(value).strip()
        for kind in cls:
            if v in (kind.name, kind.label):
                return kind
        raise ValueError(f"Unknown error kind: {value!r}")


class RegistryError(Exception):
    """Raised by `Err.unwrap()` for callers that prefer exceptions."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(f"{kind.label} ({int(kind)})")
        self.kind = kind


class HostFault(RuntimeError):
    """A host collaborator (identity, clock, transfer) is unusable."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    ok: ClassVar[bool] = False

    def unwrap(self) -> NoReturn:
        raise RegistryError(self.kind)


Result = Union[Ok[T], Err]
