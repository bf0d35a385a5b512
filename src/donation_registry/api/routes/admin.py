from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request

from ..parsing import parse_int, parse_str
from ..serializers import config_to_dict
from ._common import call_context, json_body, registry_of, result_response


def mount_admin_api(app: FastAPI) -> None:
    """Mount authority and configuration endpoints."""

    @app.post("/api/admin/authority")
    async def set_authority(request: Request):
        ctx = call_context(request)
        body = await json_body(request)
        try:
            principal = parse_str(body.get("principal"), field="principal")
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return result_response(registry_of(request).set_authority_contract(ctx, principal))

    @app.get("/api/admin/config")
    def get_config(request: Request) -> dict[str, Any]:
        reg = registry_of(request)
        return config_to_dict(reg.get_config(), donation_count=reg.get_donation_count())

    @app.patch("/api/admin/config")
    async def update_config(request: Request):
        """Update the registration fee and/or the donation cap.

        Body:
          - registrationFee: int (optional)
          - maxDonations: int (optional)

        Both values are checked before either is stored.
        """

        ctx = call_context(request)
        body = await json_body(request)
        if "registrationFee" not in body and "maxDonations" not in body:
            raise HTTPException(status_code=400, detail="Provide registrationFee and/or maxDonations")

        try:
            fee = parse_int(body["registrationFee"], field="registrationFee") if "registrationFee" in body else None
            max_donations = parse_int(body["maxDonations"], field="maxDonations") if "maxDonations" in body else None
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        reg = registry_of(request)
        res = reg.update_config(ctx, fee=fee, max_donations=max_donations)
        if not res.ok:
            return result_response(res)

        return {"ok": True, **config_to_dict(reg.get_config(), donation_count=reg.get_donation_count())}
