import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import Post, PostMetadata
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostMetadata])
async def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return await service.get_all_metadata()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/featured", response_model=List[PostMetadata])
async def list_featured_posts(
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return await service.get_featured()
    except Exception as e:
        logger.error(f"Unexpected error listing featured posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=Post)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = await service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/slugs", response_model=List[str])
def list_slugs(service: PostsService = Depends(deps.get_posts_service)):
    return service.list_slugs()


@router.get("/tags", response_model=List[str])
async def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return await service.get_all_tags()
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag}/posts", response_model=List[PostMetadata])
async def list_posts_by_tag(
    tag: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return await service.get_by_tag(tag)
    except Exception as e:
        logger.error(f"Unexpected error listing posts for tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
