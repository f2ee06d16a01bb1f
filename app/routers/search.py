import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from app import dependencies as deps
from app.schemas.blog import SearchOptions, SearchResponse
from app.services.search_service import InvalidDateError, SearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/blog/search", response_model=SearchResponse)
async def search_posts(
    q: Optional[str] = Query(None, description="Free text query"),
    tags: Optional[str] = Query(None, description="Comma-separated tags"),
    featured: Optional[str] = Query(None, description='"true" or "false"'),
    dateFrom: Optional[str] = Query(None, description="Inclusive lower date"),
    dateTo: Optional[str] = Query(None, description="Inclusive upper date"),
    service: SearchService = Depends(deps.get_search_service),
):
    """
    Search blog posts.
    A bare text query runs the simple search; any filter switches to the
    advanced search with whichever options were supplied.
    """
    try:
        if q and not tags and not featured and not dateFrom and not dateTo:
            posts = await service.search(q)
        else:
            options = build_search_options(q, tags, featured, dateFrom, dateTo)
            posts = await service.advanced_search(options)
        return SearchResponse(posts=posts)

    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Search API error: {e}", exc_info=True)
        return JSONResponse(
            status_code=500, content={"error": "Failed to search blog posts"}
        )


def build_search_options(
    q: Optional[str],
    tags: Optional[str],
    featured: Optional[str],
    date_from: Optional[str],
    date_to: Optional[str],
) -> SearchOptions:
    options = {}
    if q:
        options["query"] = q
    if tags:
        options["tags"] = split_tags(tags)
    if featured is not None:
        options["featured"] = featured == "true"
    if date_from:
        options["dateFrom"] = date_from
    if date_to:
        options["dateTo"] = date_to
    return SearchOptions(**options)


def split_tags(value: str) -> List[str]:
    return [tag.strip() for tag in value.split(",") if tag.strip()]
