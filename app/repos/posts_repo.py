import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

POST_EXTENSION = ".md"


class PostNotFound(Exception):
    """Raised when a slug has no readable backing file."""


class FilePostsRepo:
    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    def list_slugs(self) -> List[str]:
        try:
            names = os.listdir(self.content_dir)
        except OSError as e:
            logger.error(f"Error reading blog directory {self.content_dir}: {e}")
            return []
        return [
            name.removesuffix(POST_EXTENSION)
            for name in names
            if name.endswith(POST_EXTENSION)
        ]

    def load_raw(self, slug: str) -> str:
        if not self._is_valid(slug):
            raise PostNotFound(slug)

        path = self.content_dir / f"{slug}{POST_EXTENSION}"
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {path}: {e}")
            raise PostNotFound(slug) from e

    @staticmethod
    def _is_valid(slug: str | None) -> bool:
        if not slug:
            return False
        return "/" not in slug and "\\" not in slug and slug not in (".", "..")
