"""Documentation endpoints: tree, file content and sitemap."""

import logging
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from config.settings import Settings
from docs_index import (
    DocContent,
    DocsStructure,
    UnsafePathError,
    build_docs_structure,
    generate_sitemap,
    resolve_doc_path,
)
from observability.prometheus_metrics import record_content_request

from .errors import AccessDeniedError, DocNotFoundError, PathRequiredError, SiteError
from .security.rate_limiting import api_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["docs"])


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _read_text(full_path: str) -> str:
    with open(full_path, "r", encoding="utf-8") as f:
        return f.read()


@router.get("/api/docs", response_model=DocsStructure)
@api_rate_limit()
async def get_docs_structure(request: Request):
    """Return the documentation tree, rebuilt from disk on every call."""
    docs_dir = _settings(request).docs_dir
    try:
        return await run_in_threadpool(build_docs_structure, docs_dir)
    except Exception as e:
        logger.error(f"Error building docs structure: {e}", exc_info=True)
        raise SiteError("Failed to load documentation structure")


@router.get("/api/docs/content", response_model=DocContent)
@api_rate_limit()
async def get_doc_content(
    request: Request,
    path: Optional[str] = Query(default=None, description="File path relative to the docs root"),
):
    """Return the raw markdown of one documentation file."""
    # A repeated ?path= is not a single string
    values = request.query_params.getlist("path")
    if len(values) != 1 or not values[0]:
        record_content_request("invalid")
        raise PathRequiredError()
    requested = values[0]

    docs_dir = _settings(request).docs_dir
    try:
        full_path = resolve_doc_path(docs_dir, requested)
    except UnsafePathError:
        record_content_request("denied")
        logger.warning(f"Rejected docs path outside root: {requested!r}")
        raise AccessDeniedError()

    try:
        content = await run_in_threadpool(_read_text, full_path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        record_content_request("not_found")
        logger.info(f"Docs file not readable {requested!r}: {e}")
        raise DocNotFoundError()

    record_content_request("ok")
    return DocContent(content=content, path=requested)


@router.get("/sitemap.xml", include_in_schema=False)
async def get_sitemap(request: Request):
    """Sitemap for the home page, the docs index and every doc file."""
    settings = _settings(request)
    try:
        structure = await run_in_threadpool(build_docs_structure, settings.docs_dir)
        xml = generate_sitemap(structure, settings.site_url)
    except Exception as e:
        logger.error(f"Error generating sitemap: {e}", exc_info=True)
        return PlainTextResponse("Error generating sitemap", status_code=500)
    return Response(content=xml, media_type="application/xml")
