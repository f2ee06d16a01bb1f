import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app import dependencies as deps
from app.services.sitemap_service import SitemapService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sitemap.xml")
async def get_sitemap(service: SitemapService = Depends(deps.get_sitemap_service)):
    """
    Serve the sitemap for the site root, the blog index and every post
    """
    try:
        body = await service.render_xml()
    except Exception as e:
        logger.error(f"Failed to build sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")

    return Response(content=body, media_type="application/xml")
