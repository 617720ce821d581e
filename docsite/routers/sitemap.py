import asyncio
import logging

from fastapi import APIRouter, HTTPException, Request, Response

from docsite.routers.llms import limiter
from docsite.services.page_index import get_page_index
from docsite.services.scanner import FilesystemError
from docsite.services.sitemap import build_sitemap_entries, render_sitemap_xml

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Sitemap"])


@router.get(
    "/sitemap.xml",
    response_class=Response,
    summary="Sitemap of every documentation page",
    description=(
        "Lists every page URL with its last-modified time and a priority: "
        "1.0 for the home page, 0.8 for pages up to two path segments deep, "
        "0.6 for deeper pages."
    ),
)
@limiter.limit("60/minute")
async def sitemap_xml(request: Request) -> Response:
    logger.info("sitemap.xml request received")
    index = get_page_index()
    try:
        pages = await asyncio.to_thread(index.pages)
    except FilesystemError as exc:
        logger.error("Cannot build sitemap from %s: %s", index.content_dir, exc)
        raise HTTPException(status_code=500, detail="Documentation content is unavailable.")

    xml = render_sitemap_xml(build_sitemap_entries(pages))
    return Response(content=xml, media_type="application/xml")
