from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request

from ..parsing import parse_bool, parse_content_hash, parse_int, parse_optional_principal, parse_str
from ..serializers import donation_to_dict, donation_update_to_dict
from ._common import call_context, json_body, registry_of, result_response


def mount_donations_api(app: FastAPI) -> None:
    """Mount donation registration, mutation and query endpoints."""

    @app.post("/api/donations")
    async def register_donation(request: Request):
        """Register a donation.

        Body:
          - contentHash: hex str
          - foodType: str
          - quantity: int
          - description: str (default "")
          - location: str
          - currency: "STX" | "USD" | "BTC"
          - expiry: int (block height)
          - recipient: str (optional)

        Response: {"ok": true, "value": <id>} or a registry error body.
        """

        ctx = call_context(request)
        body = await json_body(request)
        try:
            content_hash = parse_content_hash(body.get("contentHash"))
            food_type = parse_str(body.get("foodType"), field="foodType")
            quantity = parse_int(body.get("quantity"), field="quantity")
            description = parse_str(body.get("description"), field="description", default="")
            location = parse_str(body.get("location"), field="location")
            currency = parse_str(body.get("currency"), field="currency")
            expiry = parse_int(body.get("expiry"), field="expiry")
            recipient = parse_optional_principal(body.get("recipient"), field="recipient")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return result_response(
            registry_of(request).register_donation(
                ctx,
                content_hash,
                food_type,
                quantity,
                description,
                location,
                currency,
                expiry,
                recipient,
            )
        )

    @app.get("/api/donations/count")
    def donation_count(request: Request) -> dict[str, int]:
        return {"count": registry_of(request).get_donation_count()}

    @app.get("/api/donations/{donation_id}")
    def get_donation(donation_id: int, request: Request) -> dict[str, Any]:
        d = registry_of(request).get_donation(donation_id)
        if d is None:
            raise HTTPException(status_code=404, detail="Unknown donation")
        return donation_to_dict(donation_id, d)

    @app.get("/api/donations/{donation_id}/update")
    def get_donation_update(donation_id: int, request: Request) -> dict[str, Any]:
        u = registry_of(request).get_donation_update(donation_id)
        if u is None:
            raise HTTPException(status_code=404, detail="No update recorded for donation")
        return donation_update_to_dict(donation_id, u)

    @app.patch("/api/donations/{donation_id}")
    async def update_donation(donation_id: int, request: Request):
        ctx = call_context(request)
        body = await json_body(request)
        try:
            food_type = parse_str(body.get("foodType"), field="foodType")
            quantity = parse_int(body.get("quantity"), field="quantity")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return result_response(registry_of(request).update_donation(ctx, donation_id, food_type, quantity))

    @app.put("/api/donations/{donation_id}/status")
    async def set_donation_status(donation_id: int, request: Request):
        ctx = call_context(request)
        body = await json_body(request)
        try:
            active = parse_bool(body.get("active"), field="active")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return result_response(registry_of(request).set_donation_status(ctx, donation_id, active))

    @app.put("/api/donations/{donation_id}/recipient")
    async def assign_recipient(donation_id: int, request: Request):
        ctx = call_context(request)
        body = await json_body(request)
        try:
            recipient = parse_str(body.get("recipient"), field="recipient")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return result_response(registry_of(request).assign_recipient(ctx, donation_id, recipient))

    @app.get("/api/hashes/{content_hash}")
    def check_donation_existence(content_hash: str, request: Request) -> dict[str, Any]:
        try:
            key = parse_content_hash(content_hash)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        reg = registry_of(request)
        return {
            "contentHash": key.hex(),
            "exists": reg.check_donation_existence(key),
            "id": reg.find_donation_id(key),
        }
