from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace

from ..config import RegistrySettings
from ..errors import Err, ErrorKind, Ok, Result
from ..ledger import CallContext, ValueTransfer
from ..records import BURN_PRINCIPAL, Currency, Donation, DonationUpdate, Principal
from .. import validation
from .state import RegistryState


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryConfig:
    authority: Principal | None
    registration_fee: int
    max_donations: int


class DonationRegistry:
    """Food-donation registry state machine.

    Every operation runs under one re-entrant lock, validates completely, and
    only then mutates. A failed call returns `Err` and leaves state untouched.
    """

    def __init__(self, transfers: ValueTransfer, *, settings: RegistrySettings | None = None) -> None:
        settings = settings or RegistrySettings()
        self._lock = threading.RLock()
        self._transfers = transfers
        self._state = RegistryState(
            max_donations=settings.max_donations,
            registration_fee=settings.registration_fee,
        )

    def _reject(self, op: str, ctx: CallContext, kind: ErrorKind) -> Err:
        logger.debug("%s rejected for %s: %s", op, ctx.caller, kind.label)
        return Err(kind)

    def _owned_donation_locked(self, ctx: CallContext, donation_id: int) -> Donation | ErrorKind:
        donation = self._state.donations.get(donation_id)
        if donation is None:
            return ErrorKind.NOT_FOUND
        if donation.owner != ctx.caller:
            return ErrorKind.NOT_AUTHORIZED
        return donation

    # -- administrative configuration --

    def set_authority_contract(self, ctx: CallContext, principal: Principal) -> Result[bool]:
        with self._lock:
            if not isinstance(principal, str) or not principal or principal == BURN_PRINCIPAL:
                return self._reject("set_authority_contract", ctx, ErrorKind.NOT_AUTHORIZED)
            if self._state.authority is not None:
                return self._reject("set_authority_contract", ctx, ErrorKind.AUTHORITY_NOT_VERIFIED)
            self._state.authority = principal
            logger.info("Authority set to %s by %s", principal, ctx.caller)
            return Ok(True)

    def set_registration_fee(self, ctx: CallContext, fee: int) -> Result[bool]:
        with self._lock:
            if self._state.authority is None:
                return self._reject("set_registration_fee", ctx, ErrorKind.AUTHORITY_NOT_VERIFIED)
            kind = validation.check_fee(fee)
            if kind is not None:
                return self._reject("set_registration_fee", ctx, kind)
            self._state.registration_fee = int(fee)
            logger.info("Registration fee set to %s", fee)
            return Ok(True)

    def set_max_donations(self, ctx: CallContext, max_donations: int) -> Result[bool]:
        with self._lock:
            if self._state.authority is None:
                return self._reject("set_max_donations", ctx, ErrorKind.AUTHORITY_NOT_VERIFIED)
            kind = validation.check_max_donations(max_donations)
            if kind is not None:
                return self._reject("set_max_donations", ctx, kind)
            self._state.max_donations = int(max_donations)
            logger.info("Max donations set to %s", max_donations)
            return Ok(True)

    def update_config(
        self,
        ctx: CallContext,
        *,
        fee: int | None = None,
        max_donations: int | None = None,
    ) -> Result[bool]:
        """Set the fee and/or the cap together; either both apply or neither does."""
        with self._lock:
            if self._state.authority is None:
                return self._reject("update_config", ctx, ErrorKind.AUTHORITY_NOT_VERIFIED)
            kind = (validation.check_fee(fee) if fee is not None else None) or (
                validation.check_max_donations(max_donations) if max_donations is not None else None
            )
            if kind is not None:
                return self._reject("update_config", ctx, kind)
            if fee is not None:
                self._state.registration_fee = int(fee)
            if max_donations is not None:
                self._state.max_donations = int(max_donations)
            logger.info("Config updated: fee=%s max_donations=%s", fee, max_donations)
            return Ok(True)

    # -- registration --

    def register_donation(
        self,
        ctx: CallContext,
        content_hash: bytes,
        food_type: str,
        quantity: int,
        description: str,
        location: str,
        currency: Currency | str,
        expiry: int,
        recipient: Principal | None = None,
    ) -> Result[int]:
        """Register a new donation and return its id.

        Checks run in a fixed order and the first failure wins. The authority
        check comes after every content check, so content errors surface even
        before an authority is configured. The fee moves only once every check
        has passed; if the transfer fails nothing is recorded.
        """

        with self._lock:
            state = self._state
            checks = (
                lambda: ErrorKind.MAX_DONATIONS_EXCEEDED if len(state.donations) >= state.max_donations else None,
                lambda: validation.check_content_hash(content_hash),
                lambda: validation.check_food_type(food_type),
                lambda: validation.check_quantity(quantity),
                lambda: validation.check_description(description),
                lambda: validation.check_location(location),
                lambda: validation.check_currency(currency),
                lambda: validation.check_expiry(expiry, ctx.block_height),
                lambda: ErrorKind.DONATION_ALREADY_EXISTS if bytes(content_hash) in state.hash_index else None,
                lambda: ErrorKind.AUTHORITY_NOT_VERIFIED if state.authority is None else None,
                lambda: validation.check_recipient(recipient),
            )
            for check in checks:
                kind = check()
                if kind is not None:
                    return self._reject("register_donation", ctx, kind)

            fee = state.registration_fee
            if not self._transfers.transfer(fee, ctx.caller, state.authority):
                logger.warning("Fee transfer of %s from %s to %s failed", fee, ctx.caller, state.authority)
                return Err(ErrorKind.TRANSFER_FAILED)

            donation_id = state.next_id
            key = bytes(content_hash)
            state.donations[donation_id] = Donation(
                content_hash=key,
                owner=ctx.caller,
                food_type=food_type,
                quantity=int(quantity),
                created_at=ctx.block_height,
                last_modified_at=ctx.block_height,
                active=True,
                description=description,
                location=location,
                currency=Currency.parse(currency),
                expiry=int(expiry),
                recipient=recipient,
            )
            state.hash_index[key] = donation_id
            state.next_id = donation_id + 1
            logger.info("Donation %s registered by %s (fee %s)", donation_id, ctx.caller, fee)
            return Ok(donation_id)

    # -- owner mutations --

    def update_donation(self, ctx: CallContext, donation_id: int, new_food_type: str, new_quantity: int) -> Result[bool]:
        with self._lock:
            found = self._owned_donation_locked(ctx, donation_id)
            if isinstance(found, ErrorKind):
                return self._reject("update_donation", ctx, found)
            kind = validation.check_food_type(new_food_type) or validation.check_quantity(new_quantity)
            if kind is not None:
                return self._reject("update_donation", ctx, kind)

            self._state.donations[donation_id] = replace(
                found,
                food_type=new_food_type,
                quantity=int(new_quantity),
                last_modified_at=ctx.block_height,
            )
            self._state.updates[donation_id] = DonationUpdate(
                food_type=new_food_type,
                quantity=int(new_quantity),
                updated_at=ctx.block_height,
                updater=ctx.caller,
            )
            logger.info("Donation %s updated by %s", donation_id, ctx.caller)
            return Ok(True)

    def set_donation_status(self, ctx: CallContext, donation_id: int, new_status: bool) -> Result[bool]:
        with self._lock:
            found = self._owned_donation_locked(ctx, donation_id)
            if isinstance(found, ErrorKind):
                return self._reject("set_donation_status", ctx, found)
            kind = validation.check_status(new_status)
            if kind is not None:
                return self._reject("set_donation_status", ctx, kind)

            self._state.donations[donation_id] = replace(found, active=new_status)
            logger.info("Donation %s active=%s", donation_id, new_status)
            return Ok(True)

    def assign_recipient(self, ctx: CallContext, donation_id: int, new_recipient: Principal) -> Result[bool]:
        with self._lock:
            found = self._owned_donation_locked(ctx, donation_id)
            if isinstance(found, ErrorKind):
                return self._reject("assign_recipient", ctx, found)
            if new_recipient is None:
                return self._reject("assign_recipient", ctx, ErrorKind.INVALID_RECIPIENT)
            kind = validation.check_recipient(new_recipient)
            if kind is not None:
                return self._reject("assign_recipient", ctx, kind)

            self._state.donations[donation_id] = replace(found, recipient=new_recipient)
            logger.info("Donation %s recipient set to %s", donation_id, new_recipient)
            return Ok(True)

    # -- queries --

    def get_donation(self, donation_id: int) -> Donation | None:
        with self._lock:
            return self._state.donations.get(donation_id)

    def get_donation_update(self, donation_id: int) -> DonationUpdate | None:
        with self._lock:
            return self._state.updates.get(donation_id)

    def find_donation_id(self, content_hash: bytes) -> int | None:
        with self._lock:
            return self._state.hash_index.get(bytes(content_hash))

    def get_donation_count(self) -> int:
        with self._lock:
            return self._state.next_id

    def check_donation_existence(self, content_hash: bytes) -> bool:
        with self._lock:
            return bytes(content_hash) in self._state.hash_index

    def get_config(self) -> RegistryConfig:
        with self._lock:
            return RegistryConfig(
                authority=self._state.authority,
                registration_fee=self._state.registration_fee,
                max_donations=self._state.max_donations,
            )

    def snapshot(self) -> RegistryState:
        with self._lock:
            return self._state.copy()

