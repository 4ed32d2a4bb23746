"""Examples gallery and guides endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from services.shared.schemas import ExampleOut, GuideOut
from services.storage import DatabaseStorage

from .errors import ResourceNotFoundError, SiteError
from .security.rate_limiting import api_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["content"])


def get_storage(request: Request) -> DatabaseStorage:
    """Dependency to get the storage layer."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise SiteError("Database not initialized")
    return storage


def _parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


@router.get("/examples", response_model=List[ExampleOut])
@api_rate_limit()
async def list_examples(request: Request, storage: DatabaseStorage = Depends(get_storage)):
    try:
        return await run_in_threadpool(storage.get_examples)
    except Exception as e:
        logger.error(f"Error fetching examples: {e}", exc_info=True)
        raise SiteError("Failed to fetch examples")


@router.get("/examples/{example_id}", response_model=ExampleOut)
@api_rate_limit()
async def get_example(request: Request, example_id: str, storage: DatabaseStorage = Depends(get_storage)):
    # Non-numeric ids are simply not found
    parsed = _parse_id(example_id)
    try:
        example = await run_in_threadpool(storage.get_example, parsed) if parsed is not None else None
    except Exception as e:
        logger.error(f"Error fetching example {example_id}: {e}", exc_info=True)
        raise SiteError("Failed to fetch example")
    if example is None:
        raise ResourceNotFoundError("Example not found")
    return example


@router.get("/guides", response_model=List[GuideOut])
@api_rate_limit()
async def list_guides(request: Request, storage: DatabaseStorage = Depends(get_storage)):
    try:
        return await run_in_threadpool(storage.get_guides)
    except Exception as e:
        logger.error(f"Error fetching guides: {e}", exc_info=True)
        raise SiteError("Failed to fetch guides")


@router.get("/guides/{guide_id}", response_model=GuideOut)
@api_rate_limit()
async def get_guide(request: Request, guide_id: str, storage: DatabaseStorage = Depends(get_storage)):
    parsed = _parse_id(guide_id)
    try:
        guide = await run_in_threadpool(storage.get_guide, parsed) if parsed is not None else None
    except Exception as e:
        logger.error(f"Error fetching guide {guide_id}: {e}", exc_info=True)
        raise SiteError("Failed to fetch guide")
    if guide is None:
        raise ResourceNotFoundError("Guide not found")
    return guide
