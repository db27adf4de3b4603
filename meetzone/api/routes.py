from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from meetzone.converters.zones import resolve_timezone
from meetzone.core.constants import SOURCE_TIMEZONE
from meetzone.core.serialization import to_outcome_payload
from meetzone.parsers.errors import UnknownTimezone

router = APIRouter()


class ConvertRequest(BaseModel):
    lines: list[str] = Field(default_factory=list)
    timezone: str | None = None


def _target_timezone(request: Request, name: str | None):
    try:
        return resolve_timezone(name or request.app.state.settings.default_target_timezone)
    except UnknownTimezone as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/healthz")
async def healthz(request: Request) -> dict:
    return {
        "status": "ok",
        "sourceTimezone": SOURCE_TIMEZONE,
        "defaultTargetTimezone": request.app.state.settings.default_target_timezone,
    }


@router.post("/v1/convert")
async def convert_batch(request: Request, body: ConvertRequest) -> dict:
    max_lines = request.app.state.settings.max_batch_lines
    if len(body.lines) > max_lines:
        raise HTTPException(status_code=413, detail=f"At most {max_lines} lines per request")

    target_tz = _target_timezone(request, body.timezone)
    outcomes = request.app.state.service.convert_lines(body.lines, target_tz)
    items = [to_outcome_payload(outcome) for outcome in outcomes]
    return {
        "timezone": str(target_tz),
        "count": len(items),
        "items": items,
    }


@router.get("/v1/convert")
async def convert_single(
    request: Request,
    line: str = Query(),
    timezone: str | None = Query(default=None),
):
    target_tz = _target_timezone(request, timezone)
    outcome = next(request.app.state.service.convert_lines([line], target_tz))
    payload = to_outcome_payload(outcome)
    if not outcome.ok:
        return JSONResponse(status_code=422, content=payload)
    return payload


@router.get("/metrics")
async def metrics(request: Request) -> Response:
    payload, content_type = request.app.state.metrics.render()
    return Response(content=payload, media_type=content_type)
