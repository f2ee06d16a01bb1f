import asyncio
import datetime
import logging
from typing import List, Optional

from pydantic import ValidationError

from app.repos.posts_repo import PostNotFound
from app.schemas.blog import Post, PostMetadata
from app.services.post_renderer import (
    DEFAULT_WORDS_PER_MINUTE,
    parse_post_data,
)
from app.utils import parse_date

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE):
        self.repo = repo
        self.words_per_minute = words_per_minute

    async def get_post(self, slug: str) -> Optional[Post]:
        return await asyncio.to_thread(self._load_post, slug)

    async def get_all(self) -> List[Post]:
        slugs = await asyncio.to_thread(self.repo.list_slugs)
        results = await asyncio.gather(*(self.get_post(slug) for slug in slugs))
        posts = [post for post in results if post is not None]
        posts.sort(key=_sort_key, reverse=True)
        return posts

    async def get_all_metadata(self) -> List[PostMetadata]:
        return [post.to_metadata() for post in await self.get_all()]

    async def get_featured(self) -> List[PostMetadata]:
        return [post for post in await self.get_all_metadata() if post.featured]

    async def get_by_tag(self, tag: str) -> List[PostMetadata]:
        wanted = tag.lower()
        return [
            post
            for post in await self.get_all_metadata()
            if wanted in (t.lower() for t in post.tags)
        ]

    async def get_all_tags(self) -> List[str]:
        seen = {}
        for post in await self.get_all_metadata():
            for tag in post.tags:
                seen.setdefault(tag.lower(), tag)
        return list(seen.values())

    def list_slugs(self) -> List[str]:
        return self.repo.list_slugs()

    def _load_post(self, slug: str) -> Optional[Post]:
        try:
            raw = self.repo.load_raw(slug)
        except PostNotFound:
            logger.warning(f"Blog post {slug} not found")
            return None
        except Exception as e:
            logger.error(f"Error reading blog post {slug}: {e}")
            return None

        post_data = parse_post_data(
            slug, raw, include_content=True, words_per_minute=self.words_per_minute
        )
        if not post_data:
            return None
        try:
            return Post(**post_data)
        except ValidationError as e:
            logger.warning(f"Invalid frontmatter in post {slug}: {e}")
            return None


def _sort_key(post: PostMetadata):
    # Undated posts sort after every dated post when reversed
    parsed = parse_date(post.date)
    return (parsed is not None, parsed or datetime.datetime.min)
