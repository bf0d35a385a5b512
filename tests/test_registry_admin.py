from __future__ import annotations

from donation_registry.core import BURN_PRINCIPAL, DonationRegistry, ErrorKind, InMemoryLedger, RegistrySettings


def _registry() -> tuple[DonationRegistry, InMemoryLedger]:
    ledger = InMemoryLedger()
    return DonationRegistry(ledger), ledger


def test_defaults() -> None:
    reg, _ = _registry()
    cfg = reg.get_config()
    assert cfg.authority is None
    assert cfg.registration_fee == 500
    assert cfg.max_donations == 10_000
    assert reg.get_donation_count() == 0


def test_settings_seed_the_registry() -> None:
    ledger = InMemoryLedger()
    reg = DonationRegistry(ledger, settings=RegistrySettings(max_donations=3, registration_fee=7))
    cfg = reg.get_config()
    assert cfg.max_donations == 3
    assert cfg.registration_fee == 7


def test_authority_is_set_exactly_once() -> None:
    reg, ledger = _registry()
    ctx = ledger.context("ST1TEST")

    res = reg.set_authority_contract(ctx, "ST2TEST")
    assert res.ok
    assert res.value is True
    assert reg.get_config().authority == "ST2TEST"

    for candidate in ("ST2TEST", "ST3OTHER", BURN_PRINCIPAL):
        again = reg.set_authority_contract(ctx, candidate)
        assert not again.ok
    assert reg.set_authority_contract(ctx, "ST3OTHER").kind is ErrorKind.AUTHORITY_NOT_VERIFIED
    assert reg.get_config().authority == "ST2TEST"


def test_burn_principal_never_becomes_authority() -> None:
    reg, ledger = _registry()
    res = reg.set_authority_contract(ledger.context("ST1TEST"), BURN_PRINCIPAL)
    assert not res.ok
    assert res.kind is ErrorKind.NOT_AUTHORIZED
    assert reg.get_config().authority is None

    # A rejected burn attempt does not use up the single set.
    assert reg.set_authority_contract(ledger.context("ST1TEST"), "ST2TEST").ok


def test_fee_and_cap_need_authority() -> None:
    reg, ledger = _registry()
    ctx = ledger.context("ST1TEST")

    assert reg.set_registration_fee(ctx, 1000).kind is ErrorKind.AUTHORITY_NOT_VERIFIED
    assert reg.set_max_donations(ctx, 5).kind is ErrorKind.AUTHORITY_NOT_VERIFIED
    # Authority is checked before the value.
    assert reg.set_max_donations(ctx, 0).kind is ErrorKind.AUTHORITY_NOT_VERIFIED

    cfg = reg.get_config()
    assert cfg.registration_fee == 500
    assert cfg.max_donations == 10_000


def test_fee_and_cap_updates() -> None:
    reg, ledger = _registry()
    ctx = ledger.context("ST1TEST")
    assert reg.set_authority_contract(ctx, "ST2TEST").ok

    assert reg.set_registration_fee(ctx, 1000).ok
    assert reg.set_registration_fee(ctx, 10**12).ok
    assert reg.set_registration_fee(ctx, 0).ok
    assert reg.set_registration_fee(ctx, -1).kind is ErrorKind.INVALID_UPDATE_PARAM
    assert reg.get_config().registration_fee == 0

    assert reg.set_max_donations(ctx, 1).ok
    assert reg.set_max_donations(ctx, 0).kind is ErrorKind.INVALID_UPDATE_PARAM
    assert reg.set_max_donations(ctx, -3).kind is ErrorKind.INVALID_UPDATE_PARAM
    assert reg.get_config().max_donations == 1


def test_lowering_cap_below_count_blocks_registration() -> None:
    reg, ledger = _registry()
    ctx = ledger.context("ST1TEST")
    assert reg.set_authority_contract(ctx, "ST2TEST").ok

    for i in range(3):
        assert reg.register_donation(ctx, bytes([i + 1]), "bread", 1, "", "Depot", "USD", 10).ok

    assert reg.set_max_donations(ctx, 2).ok
    res = reg.register_donation(ctx, b"\x10", "bread", 1, "", "Depot", "USD", 10)
    assert res.kind is ErrorKind.MAX_DONATIONS_EXCEEDED
    assert reg.get_donation_count() == 3
    # Existing records stay mutable.
    assert reg.update_donation(ctx, 0, "rolls", 2).ok


def test_non_string_authority_is_rejected() -> None:
    reg, ledger = _registry()
    ctx = ledger.context("ST1TEST")

    for bogus in (5, None, b"ST2TEST", ""):
        res = reg.set_authority_contract(ctx, bogus)
        assert res.kind is ErrorKind.NOT_AUTHORIZED
    assert reg.get_config().authority is None

    assert reg.set_authority_contract(ctx, "ST2TEST").ok
    assert reg.get_config().authority == "ST2TEST"


def test_combined_config_update_is_all_or_nothing() -> None:
    reg, ledger = _registry()
    ctx = ledger.context("ST1TEST")
    assert reg.update_config(ctx, fee=1000, max_donations=5).kind is ErrorKind.AUTHORITY_NOT_VERIFIED

    reg.set_authority_contract(ctx, "ST2TEST")
    res = reg.update_config(ctx, fee=1000, max_donations=0)
    assert res.kind is ErrorKind.INVALID_UPDATE_PARAM
    res = reg.update_config(ctx, fee=-1, max_donations=5)
    assert res.kind is ErrorKind.INVALID_UPDATE_PARAM
    cfg = reg.get_config()
    assert cfg.registration_fee == 500
    assert cfg.max_donations == 10_000

    assert reg.update_config(ctx, fee=1000, max_donations=5).ok
    cfg = reg.get_config()
    assert cfg.registration_fee == 1000
    assert cfg.max_donations == 5

    assert reg.update_config(ctx, max_donations=7).ok
    assert reg.get_config().registration_fee == 1000
    assert reg.get_config().max_donations == 7
