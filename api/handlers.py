from fastapi import APIRouter
from fastapi.responses import JSONResponse
from schemas.schemas import (
    Preferences,
    ExploreRequest,
    CreatorListResponse,
    ExplainResponse,
    ReloadResponse,
    ErrorResponse,
    HealthCheckResponse,
)
from services.matcher_service import (
    run_top_matches,
    run_annotate,
    run_explanation,
    run_explore,
)
from utils.fetch_creators import fetch_creators, CreatorFetchError
import structlog

log = structlog.get_logger()

router = APIRouter()

VERSION = "1.0.0"

# Creator cache — filled at startup
CREATORS: list[dict] = []


def set_creators(creators):
    global CREATORS
    CREATORS = list(creators)


def _error(status_code, message, info=None):
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(status="error", message=message, info=info).model_dump()
    )


@router.get("/", response_model=HealthCheckResponse)
async def healthcheck():
    return HealthCheckResponse(
        status="ok",
        message="Hush matching engine live",
        version=VERSION
    )


@router.post("/matches/top", response_model=CreatorListResponse, responses={404: {"model": ErrorResponse}})
async def top_matches(preferences: Preferences, limit: int = 5):
    if limit < 1:
        return _error(422, "Limit must be a positive integer.")

    matches = run_top_matches(preferences, CREATORS, limit=limit)

    if not matches:
        return _error(404, "No creators match the given preferences.")

    return CreatorListResponse(status="success", data=matches)


@router.post("/matches/annotate", response_model=CreatorListResponse)
async def annotate(preferences: Preferences):
    return CreatorListResponse(status="success", data=run_annotate(preferences, CREATORS))


@router.post("/explain/{creator_id}", response_model=ExplainResponse, responses={404: {"model": ErrorResponse}})
async def explain(creator_id: str, preferences: Preferences):
    explanation = run_explanation(preferences, CREATORS, creator_id)

    if explanation is None:
        return _error(404, f"Creator {creator_id} not found.")

    return ExplainResponse(status="success", data=explanation)


@router.post("/explore", response_model=CreatorListResponse, responses={422: {"model": ErrorResponse}})
async def explore(request: ExploreRequest):
    try:
        creators = run_explore(request, CREATORS)
    except ValueError as e:
        return _error(422, "Invalid explore filters.", info=str(e))

    return CreatorListResponse(status="success", data=creators)


@router.post("/admin/reload-creators", response_model=ReloadResponse, responses={503: {"model": ErrorResponse}})
async def reload_creators():
    try:
        creators = await fetch_creators()
    except CreatorFetchError as e:
        log.error("Creator reload failed", error=str(e))
        return _error(503, "Failed to reload creators from Supabase.", info=str(e))

    set_creators(creators)
    log.info("Creator cache reloaded", count=len(creators))
    return ReloadResponse(status="creators reloaded", count=len(creators))
