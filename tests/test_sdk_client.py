from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from donation_registry.core import BURN_PRINCIPAL, ErrorKind, InMemoryLedger, RegistrySettings
from donation_registry.runtime.app import create_app
from donation_registry.sdk.client import DonationRegistryClient


def _sdk(principal: str = "ST1TEST") -> DonationRegistryClient:
    app = create_app(RegistrySettings(), ledger=InMemoryLedger())
    return DonationRegistryClient(principal=principal, http_client=TestClient(app))


def test_client_round_trips_registry_results() -> None:
    sdk = _sdk()

    res = sdk.register_donation(bytes([1, 2, 3]), "perishable", 100, "Fresh veggies", "CityZ", "STX", 1000)
    assert not res.ok
    assert res.kind is ErrorKind.AUTHORITY_NOT_VERIFIED

    assert sdk.set_authority_contract("ST2TEST").ok
    res = sdk.register_donation(bytes([1, 2, 3]), "perishable", 100, "Fresh veggies", "CityZ", "STX", 1000)
    assert res.ok
    assert res.value == 0

    assert sdk.get_donation_count() == 1
    assert sdk.check_donation_existence(bytes([1, 2, 3])) is True
    assert sdk.check_donation_existence(bytes([9])) is False
    assert sdk.get_donation(0)["foodType"] == "perishable"  # type: ignore[index]
    assert sdk.get_donation(5) is None
    assert sdk.transfers() == [{"amount": 500, "from": "ST1TEST", "to": "ST2TEST", "blockHeight": 0}]


def test_client_principals_and_owner_checks() -> None:
    owner = _sdk()
    stranger = owner.as_principal("ST3FAKE")

    assert owner.set_authority_contract("ST2TEST").ok
    assert owner.register_donation(b"\xaa", "bread", 3, "", "Depot", "BTC", 50, "ST3RECIP").ok

    assert stranger.update_donation(0, "rolls", 4).kind is ErrorKind.NOT_AUTHORIZED
    assert stranger.set_donation_status(0, False).kind is ErrorKind.NOT_AUTHORIZED
    assert owner.assign_recipient(0, BURN_PRINCIPAL).kind is ErrorKind.INVALID_RECIPIENT

    assert owner.mine(2) == 2
    assert owner.get_block_height() == 2
    assert owner.update_donation(0, "rolls", 4).ok
    assert owner.get_donation_update(0)["updatedAt"] == 2  # type: ignore[index]


def test_client_admin_calls() -> None:
    sdk = _sdk()
    assert sdk.set_max_donations(3).kind is ErrorKind.AUTHORITY_NOT_VERIFIED
    assert sdk.set_authority_contract("ST2TEST").ok
    assert sdk.set_registration_fee(10).ok
    assert sdk.set_max_donations(3).ok
    assert sdk.set_max_donations(0).kind is ErrorKind.INVALID_UPDATE_PARAM

    cfg = sdk.get_config()
    assert cfg["registrationFee"] == 10
    assert cfg["maxDonations"] == 3


def test_client_requires_principal_for_writes() -> None:
    sdk = _sdk().as_principal("")
    with pytest.raises(ValueError):
        sdk.set_authority_contract("ST2TEST")


def test_client_raises_on_malformed_request() -> None:
    sdk = _sdk()
    with pytest.raises(RuntimeError):
        sdk.register_donation(b"\x01", "bread", "many", "", "Depot", "STX", 10)  # type: ignore[arg-type]
