import logging
import re
from typing import List, Optional

from app.schemas.blog import Post, PostMetadata, SearchOptions
from app.services.posts_service import PostsService
from app.utils import parse_date

logger = logging.getLogger(__name__)

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")


class InvalidDateError(ValueError):
    """Raised when a date bound for advanced search cannot be parsed."""

    def __init__(self, field: str, value: str):
        super().__init__(f"Invalid {field}: {value!r}")
        self.field = field
        self.value = value


class SearchService:
    """
    Linear full-text search and filtering over blog posts.
    Every call rebuilds the corpus from the posts service.
    """

    def __init__(self, posts_service: PostsService):
        self.posts_service = posts_service

    async def search(self, query: str) -> List[PostMetadata]:
        """
        Case-insensitive substring search across title, excerpt, tags and
        the rendered content with HTML tags removed.

        Args:
            query: Free text; blank queries return every post

        Returns:
            Matching posts in date-descending order
        """
        if not query or not query.strip():
            return await self.posts_service.get_all_metadata()

        term = query.lower()
        return [
            post.to_metadata()
            for post in await self.posts_service.get_all()
            if _matches(post, _plain_content(post), term)
        ]

    async def advanced_search(self, options: SearchOptions) -> List[PostMetadata]:
        """
        Combine an optional text query with tag, featured and date filters.
        Every provided criterion must hold; omitted ones do not filter.
        """
        date_from = _parse_bound("dateFrom", options.dateFrom)
        date_to = _parse_bound("dateTo", options.dateTo)

        if options.query and options.query.strip():
            posts = await self.search(options.query)
        else:
            posts = await self.posts_service.get_all_metadata()

        if options.tags:
            wanted = [tag.lower() for tag in options.tags]
            posts = [
                post
                for post in posts
                if any(w in tag.lower() for w in wanted for tag in post.tags)
            ]

        if options.featured is not None:
            posts = [post for post in posts if post.featured == options.featured]

        if date_from or date_to:
            posts = [
                post for post in posts if _within(post.date, date_from, date_to)
            ]

        return posts


def _plain_content(post: Post) -> str:
    try:
        return strip_html(post.content)
    except Exception as e:
        logger.error(f"Error reading content for {post.slug}: {e}")
        return ""


def strip_html(html: str) -> str:
    """Remove anything that looks like a tag. Entities are left encoded."""
    return HTML_TAG_PATTERN.sub("", html)


def _matches(post: PostMetadata, content: str, term: str) -> bool:
    return (
        term in post.title.lower()
        or term in post.excerpt.lower()
        or any(term in tag.lower() for tag in post.tags)
        or term in content.lower()
    )


def _parse_bound(field: str, value: Optional[str]):
    if not value:
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise InvalidDateError(field, value)
    return parsed


def _within(date: str, date_from, date_to) -> bool:
    parsed = parse_date(date)
    if parsed is None:
        return False
    if date_from and parsed < date_from:
        return False
    if date_to and parsed > date_to:
        return False
    return True
