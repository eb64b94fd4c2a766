"""TikTok metadata proxy route."""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ...models.api import ErrorResponse, MetadataResponse
from ...models.metadata import VideoReference

router = APIRouter(tags=["metadata"])
log = logging.getLogger(__name__)

URL_REQUIRED = "TikTok URL is required."
NOT_AVAILABLE = "TikTok metadata not available."
UNEXPECTED = "Unexpected error while fetching TikTok metadata."


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


async def _read_reference(request: Request) -> VideoReference | None:
    """Validate the `url` field of the JSON body; None if missing or blank."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(body, dict):
        return None
    try:
        return VideoReference(url=body.get("url"))
    except ValidationError:
        return None


@router.post(
    "/tiktok",
    response_model=MetadataResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def resolve_tiktok_metadata(request: Request):
    """
    Resolve preview metadata for one TikTok URL.

    Responses:
    - 200: {title, cover, author, views}, any field may be null
    - 400: url missing or blank
    - 422: every strategy failed
    - 500: unexpected fault (details logged only)
    """
    reference = await _read_reference(request)
    if reference is None:
        return _error(URL_REQUIRED, 400)
    url = reference.url

    resolver = request.app.state.resolver
    try:
        metadata = await run_in_threadpool(resolver.resolve, url)
    except Exception:
        log.exception("[tiktok-metadata] resolution failed for %s", url)
        return _error(UNEXPECTED, 500)

    if metadata is None:
        return _error(NOT_AVAILABLE, 422)

    return MetadataResponse(
        title=metadata.title,
        cover=metadata.cover,
        author=metadata.author,
        views=metadata.views,
    )
