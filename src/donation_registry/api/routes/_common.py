from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, Request
from starlette.responses import JSONResponse

from ...core.errors import Err, HostFault, Result
from ...core.ledger import CallContext, InMemoryLedger
from ...core.registry import DonationRegistry
from ..serializers import error_to_dict, status_for_error


logger = logging.getLogger(__name__)

PRINCIPAL_HEADER = "X-Principal"


def registry_of(request: Request) -> DonationRegistry:
    return request.app.state.registry


def ledger_of(request: Request) -> InMemoryLedger:
    return request.app.state.ledger


def call_context(request: Request) -> CallContext:
    """Build the per-call context from the caller header and the current block."""
    caller = (request.headers.get(PRINCIPAL_HEADER) or "").strip()
    if not caller:
        raise HTTPException(status_code=401, detail=f"Missing {PRINCIPAL_HEADER} header")
    try:
        return ledger_of(request).context(caller)
    except HostFault as ex:
        logger.warning("Host fault while building call context: %s", ex)
        raise HTTPException(status_code=503, detail=str(ex))


def result_response(result: Result[Any]) -> dict[str, Any] | JSONResponse:
    if isinstance(result, Err):
        return JSONResponse(status_code=status_for_error(result.kind), content=error_to_dict(result.kind))
    return {"ok": True, "value": result.value}


async def json_body(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Body must be JSON")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Body must be a JSON object")
    return body
