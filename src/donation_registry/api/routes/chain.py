from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request

from ..parsing import parse_int
from ..serializers import transfer_to_dict
from ._common import json_body, ledger_of


def mount_chain_api(app: FastAPI) -> None:
    """Mount endpoints for the emulated host chain (block height, fee transfers)."""

    @app.get("/api/chain")
    def get_chain(request: Request) -> dict[str, int]:
        return {"blockHeight": ledger_of(request).block_height}

    @app.post("/api/chain/mine")
    async def mine(request: Request) -> dict[str, int]:
        body = await json_body(request)
        try:
            blocks = parse_int(body.get("blocks", 1), field="blocks")
            height = ledger_of(request).mine(blocks)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"blockHeight": height}

    @app.get("/api/transfers")
    def list_transfers(request: Request) -> list[dict[str, Any]]:
        return [transfer_to_dict(t) for t in ledger_of(request).transfers()]
