from __future__ import annotations

import contextlib
from typing import Any, Iterator

import httpx

from ..core.errors import Err, ErrorKind, Ok, Result
from ..core.records import Currency


PRINCIPAL_HEADER = "X-Principal"


class DonationRegistryClient:
    """HTTP client for a running donation registry server.

    Registry rejections come back as `Err(kind)`, exactly as the in-process
    `DonationRegistry` returns them. Transport problems and malformed requests
    raise `RuntimeError`.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        principal: str | None = None,
        http_client: httpx.Client | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.principal = principal
        self.timeout_s = float(timeout_s)
        self._http = http_client

    def as_principal(self, principal: str) -> "DonationRegistryClient":
        """Return a client that signs calls as `principal`, sharing this client's transport."""
        return DonationRegistryClient(
            self.base_url,
            principal=principal,
            http_client=self._http,
            timeout_s=self.timeout_s,
        )

    @contextlib.contextmanager
    def _client(self) -> Iterator[httpx.Client]:
        if self._http is not None:
            yield self._http
            return
        with httpx.Client(base_url=self.base_url, timeout=self.timeout_s) as client:
            yield client

    def _headers(self) -> dict[str, str]:
        if not self.principal:
            raise ValueError("principal is required for state-changing calls")
        return {PRINCIPAL_HEADER: self.principal}

    @staticmethod
    def _decode_result(res: httpx.Response, what: str) -> Result[Any]:
        if res.status_code < 400:
            return Ok(res.json().get("value"))
        try:
            data = res.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("ok") is False and "code" in data:
            return Err(ErrorKind.from_any(data["code"]))
        raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")

    def _call(self, method: str, url: str, what: str, body: dict[str, Any]) -> Result[Any]:
        headers = self._headers()
        with self._client() as client:
            res = client.request(method, url, json=body, headers=headers)
        return self._decode_result(res, what)

    def _get(self, url: str, what: str, *, allow_missing: bool = False) -> Any:
        with self._client() as client:
            res = client.get(url)
        if allow_missing and res.status_code == 404:
            return None
        if res.status_code >= 400:
            raise RuntimeError(f"{what} failed: {res.status_code} {res.text}")
        return res.json()

    def ping(self) -> bool:
        """Return True if a registry answers on `/healthz`."""
        try:
            with self._client() as client:
                res = client.get("/healthz")
            return res.status_code == 200 and bool(res.json().get("ok"))
        except (httpx.HTTPError, ValueError):
            return False

    # -- administrative configuration --

    def set_authority_contract(self, principal: str) -> Result[bool]:
        return self._call("POST", "/api/admin/authority", "Set authority", {"principal": principal})

    def set_registration_fee(self, fee: int) -> Result[bool]:
        res = self._call("PATCH", "/api/admin/config", "Set registration fee", {"registrationFee": int(fee)})
        return Ok(True) if res.ok else res

    def set_max_donations(self, max_donations: int) -> Result[bool]:
        res = self._call("PATCH", "/api/admin/config", "Set max donations", {"maxDonations": int(max_donations)})
        return Ok(True) if res.ok else res

    def get_config(self) -> dict[str, Any]:
        return dict(self._get("/api/admin/config", "Get config"))

    # -- donations --

    def register_donation(
        self,
        content_hash: bytes,
        food_type: str,
        quantity: int,
        description: str,
        location: str,
        currency: Currency | str,
        expiry: int,
        recipient: str | None = None,
    ) -> Result[int]:
        body = {
            "contentHash": bytes(content_hash).hex(),
            "foodType": food_type,
            "quantity": quantity,
            "description": description,
            "location": location,
            "currency": currency.value if isinstance(currency, Currency) else str(currency),
            "expiry": expiry,
            "recipient": recipient,
        }
        return self._call("POST", "/api/donations", "Register donation", body)

    def update_donation(self, donation_id: int, new_food_type: str, new_quantity: int) -> Result[bool]:
        body = {"foodType": new_food_type, "quantity": new_quantity}
        return self._call("PATCH", f"/api/donations/{int(donation_id)}", "Update donation", body)

    def set_donation_status(self, donation_id: int, new_status: bool) -> Result[bool]:
        body = {"active": bool(new_status)}
        return self._call("PUT", f"/api/donations/{int(donation_id)}/status", "Set donation status", body)

    def assign_recipient(self, donation_id: int, new_recipient: str) -> Result[bool]:
        body = {"recipient": new_recipient}
        return self._call("PUT", f"/api/donations/{int(donation_id)}/recipient", "Assign recipient", body)

    def get_donation(self, donation_id: int) -> dict[str, Any] | None:
        return self._get(f"/api/donations/{int(donation_id)}", "Get donation", allow_missing=True)

    def get_donation_update(self, donation_id: int) -> dict[str, Any] | None:
        return self._get(f"/api/donations/{int(donation_id)}/update", "Get donation update", allow_missing=True)

    def get_donation_count(self) -> int:
        return int(self._get("/api/donations/count", "Get donation count")["count"])

    def check_donation_existence(self, content_hash: bytes) -> bool:
        data = self._get(f"/api/hashes/{bytes(content_hash).hex()}", "Check donation existence")
        return bool(data["exists"])

    # -- host chain --

    def get_block_height(self) -> int:
        return int(self._get("/api/chain", "Get chain")["blockHeight"])

    def mine(self, blocks: int = 1) -> int:
        with self._client() as client:
            res = client.post("/api/chain/mine", json={"blocks": int(blocks)})
        if res.status_code >= 400:
            raise RuntimeError(f"Mine failed: {res.status_code} {res.text}")
        return int(res.json()["blockHeight"])

    def transfers(self) -> list[dict[str, Any]]:
        return list(self._get("/api/transfers", "List transfers"))
