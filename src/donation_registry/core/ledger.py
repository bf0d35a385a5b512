from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

from .errors import HostFault
from .records import Principal


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallContext:
    """Per-call values supplied by the host: who is calling, and at which block."""

    caller: Principal
    block_height: int

    def __post_init__(self) -> None:
        if not isinstance(self.caller, str) or not self.caller:
            raise HostFault("caller identity is unavailable")
        if isinstance(self.block_height, bool) or not isinstance(self.block_height, int) or self.block_height < 0:
            raise HostFault(f"invalid block height: {self.block_height!r}")


class ValueTransfer(Protocol):
    def transfer(self, amount: int, sender: Principal, recipient: Principal) -> bool: ...


@dataclass(frozen=True)
class TransferRecord:
    amount: int
    sender: Principal
    recipient: Principal
    block_height: int


class InMemoryLedger:
    """Host chain emulation: block height, optional balances, and a transfer log.

    Balances are only enforced when `balances` is given. Without them every
    non-negative transfer succeeds, which is what most registry callers need.
    """

    def __init__(self, *, block_height: int = 0, balances: dict[Principal, int] | None = None) -> None:
        if int(block_height) < 0:
            raise ValueError("block_height must be >= 0")
        self._lock = threading.RLock()
        self._block_height = int(block_height)
        self._balances: dict[Principal, int] | None = dict(balances) if balances is not None else None
        self._transfers: list[TransferRecord] = []

    @property
    def block_height(self) -> int:
        with self._lock:
            return self._block_height

    def mine(self, blocks: int = 1) -> int:
        """Advance the chain by `blocks` and return the new height."""
        if int(blocks) < 0:
            raise ValueError("blocks must be >= 0")
        with self._lock:
            self._block_height += int(blocks)
            return self._block_height

    def context(self, caller: Principal) -> CallContext:
        with self._lock:
            return CallContext(caller=caller, block_height=self._block_height)

    def balance(self, principal: Principal) -> int | None:
        with self._lock:
            if self._balances is None:
                return None
            return int(self._balances.get(principal, 0))

    def credit(self, principal: Principal, amount: int) -> None:
        if int(amount) < 0:
            raise ValueError("amount must be >= 0")
        with self._lock:
            if self._balances is None:
                self._balances = {}
            self._balances[principal] = self._balances.get(principal, 0) + int(amount)

    def transfer(self, amount: int, sender: Principal, recipient: Principal) -> bool:
        with self._lock:
            if amount < 0:
                logger.debug("Rejected negative transfer of %s from %s", amount, sender)
                return False
            if self._balances is not None:
                available = self._balances.get(sender, 0)
                if available < amount:
                    logger.debug("Insufficient funds: %s has %s, needs %s", sender, available, amount)
                    return False
                self._balances[sender] = available - amount
                self._balances[recipient] = self._balances.get(recipient, 0) + amount
            self._transfers.append(
                TransferRecord(amount=int(amount), sender=sender, recipient=recipient, block_height=self._block_height)
            )
            return True

    def transfers(self) -> list[TransferRecord]:
        with self._lock:
            return list(self._transfers)
