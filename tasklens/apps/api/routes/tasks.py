from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from tasklens.apps.engine.classification import classify_task
from tasklens.libs.schemas.tasks import ClassificationPayload

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _validation_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation error",
            "errors": [{"message": "Description is required"}],
        },
    )


async def _read_description(request: Request) -> Any:
    try:
        body = await request.json()
    except (ValueError, RecursionError):
        # Malformed, undecodable or too deeply nested JSON.
        return None
    if not isinstance(body, dict):
        return None
    return body.get("description")


@router.post("/classify")
async def classify_description(request: Request) -> JSONResponse:
    """Preview auto-classification for a description without creating a task."""

    description = await _read_description(request)
    if not isinstance(description, str) or not description.strip():
        return _validation_error()

    try:
        result = classify_task(description)
        data = ClassificationPayload.model_validate(result.to_dict()).model_dump(by_alias=True)
    except Exception as exc:
        LOGGER.exception("Task classification failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Internal server error", "error": str(exc)},
        )

    LOGGER.info(
        "Classified task preview",
        extra={"category": data["category"], "priority": data["priority"]},
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content={"success": True, "data": data})


__all__ = ["router"]
