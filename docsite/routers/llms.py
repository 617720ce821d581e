import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from docsite.config import get_settings
from docsite.models.page import PageRecord
from docsite.services.llms import build_llms_full_txt, build_llms_txt
from docsite.services.page_index import get_page_index
from docsite.services.scanner import FilesystemError

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(tags=["LLMs"])

_TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"


@router.get(
    "/llms.txt",
    response_class=PlainTextResponse,
    summary="Short-form documentation digest for language models",
)
@limiter.limit("60/minute")
async def llms_txt(request: Request) -> PlainTextResponse:
    """List every documentation page as a Markdown link, in navigation order."""
    logger.info("llms.txt request received")
    pages = await _load_pages()
    return PlainTextResponse(build_llms_txt(pages, get_settings()), media_type=_TEXT_MEDIA_TYPE)


@router.get(
    "/llms-full.txt",
    response_class=PlainTextResponse,
    summary="Full documentation text for language models",
)
@limiter.limit("30/minute")
async def llms_full_txt(request: Request) -> PlainTextResponse:
    """Concatenate every documentation page with Markdoc tags removed."""
    logger.info("llms-full.txt request received")
    pages = await _load_pages()
    return PlainTextResponse(
        build_llms_full_txt(pages, get_settings()), media_type=_TEXT_MEDIA_TYPE
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

async def _load_pages() -> list[PageRecord]:
    """Read the page index off the event loop; filesystem errors become a generic 500."""
    index = get_page_index()
    try:
        return await asyncio.to_thread(index.pages)
    except FilesystemError as exc:
        logger.error("Cannot build page index from %s: %s", index.content_dir, exc)
        raise HTTPException(status_code=500, detail="Documentation content is unavailable.")
