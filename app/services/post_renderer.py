import datetime
import logging
import math
from typing import Dict, List, Optional

import frontmatter
import markdown

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PER_MINUTE = 200

MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    "pymdownx.magiclink",
]
MARKDOWN_EXTENSION_CONFIGS = {
    # GitHub treats single tildes as strikethrough too, not subscript
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.tasklist": {"custom_checkbox": False},
}


def parse_post_data(
    slug: str,
    raw: str,
    include_content: bool = True,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> Optional[Dict]:
    """Parse frontmatter and return standardized post data"""
    try:
        parsed = frontmatter.loads(raw)
        metadata = parsed.metadata or {}

        post_data = {
            "slug": slug,
            "title": str(metadata.get("title") or ""),
            "date": convert_date_to_string(metadata.get("date")) or "",
            "excerpt": str(metadata.get("excerpt") or ""),
            "tags": normalize_tags(metadata.get("tags")),
            "featured": bool(metadata.get("featured", False)),
            "image": metadata.get("image") or None,
            "readingTime": calculate_reading_time(
                parsed.content, words_per_minute
            ),
        }

        if include_content:
            post_data["content"] = render_markdown(parsed.content)

        return post_data

    except Exception as e:
        logger.warning(f"Failed to parse post {slug}: {e}")
        return None


def render_markdown(text: str) -> str:
    """
    Render a markdown body to HTML with GitHub flavoured extensions
    (tables, strikethrough, task lists, autolinks).
    """
    return markdown.markdown(
        text,
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )


def normalize_tags(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def convert_date_to_string(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if value is None:
        return None
    return str(value)


def calculate_reading_time(
    text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / words_per_minute) or 1
    return f"{minutes} min read"
