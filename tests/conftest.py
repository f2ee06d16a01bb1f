import textwrap

from app.repos.posts_repo import PostNotFound
from app.schemas.blog import Post, PostMetadata


def make_markdown(raw: str) -> str:
    return textwrap.dedent(raw).lstrip()


class FakeRepo:
    """
    Minimal in-memory content store stand-in.
    Set fail_on to a set of slugs whose load raises an unexpected error.
    """

    def __init__(self, raw_by_slug: dict[str, str], fail_on=None):
        self.raw_by_slug = {
            slug: make_markdown(raw) for slug, raw in raw_by_slug.items()
        }
        self.fail_on = set(fail_on or ())
        self.loads = []

    def list_slugs(self):
        return list(self.raw_by_slug)

    def load_raw(self, slug: str) -> str:
        self.loads.append(slug)
        if slug in self.fail_on:
            raise RuntimeError(f"disk on fire: {slug}")
        if slug not in self.raw_by_slug:
            raise PostNotFound(slug)
        return self.raw_by_slug[slug]


class FakePostsService:
    """
    Minimal posts service stand-in for router and search tests.
    """

    def __init__(self, posts=None, content_by_slug=None, broken=None):
        self.posts = list(posts or [])
        self.content_by_slug = content_by_slug or {}
        self.broken = set(broken or ())

    async def get_all_metadata(self):
        return list(self.posts)

    async def get_all(self):
        return [self._full_post(p) for p in self.posts]

    def _full_post(self, post):
        if post.slug in self.broken:
            # Skips validation so the content is unusable
            return Post.model_construct(**post.model_dump(), content=None)
        return Post(
            **post.model_dump(), content=self.content_by_slug.get(post.slug, "")
        )

    async def get_featured(self):
        return [p for p in self.posts if p.featured]

    async def get_by_tag(self, tag):
        return [p for p in self.posts if tag.lower() in [t.lower() for t in p.tags]]

    async def get_all_tags(self):
        return [tag for p in self.posts for tag in p.tags]

    async def get_post(self, slug):
        if slug in self.broken:
            raise RuntimeError("boom")
        for p in self.posts:
            if p.slug == slug:
                return Post(
                    **p.model_dump(), content=self.content_by_slug.get(slug, "")
                )
        return None

    def list_slugs(self):
        return [p.slug for p in self.posts]


def make_post(slug: str, **overrides) -> PostMetadata:
    data = {
        "slug": slug,
        "title": slug.replace("-", " ").title(),
        "date": "2024-01-01",
        "excerpt": "",
        "tags": [],
        "featured": False,
        "image": None,
        "readingTime": "1 min read",
    }
    data.update(overrides)
    return PostMetadata(**data)


class FakeSearchService:
    """
    Records which search entry point the router dispatched to.
    """

    def __init__(self, results=None):
        self.results = results or []
        self.calls = []

    async def search(self, query):
        self.calls.append(("search", query))
        return self.results

    async def advanced_search(self, options):
        self.calls.append(("advanced", options))
        return self.results
