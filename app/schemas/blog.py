from typing import List, Optional

from pydantic import BaseModel, Field


class PostMetadata(BaseModel):
    slug: str
    title: str = ""
    date: str = ""
    excerpt: str = ""
    tags: List[str] = Field(default_factory=list)
    featured: bool = False
    image: Optional[str] = None
    readingTime: str


class Post(PostMetadata):
    content: str  # Rendered HTML

    def to_metadata(self) -> PostMetadata:
        return PostMetadata(**self.model_dump(exclude={"content"}))


class SearchOptions(BaseModel):
    query: Optional[str] = None
    tags: Optional[List[str]] = None
    featured: Optional[bool] = None
    dateFrom: Optional[str] = None
    dateTo: Optional[str] = None


class SearchResponse(BaseModel):
    posts: List[PostMetadata]
