import asyncio
import datetime
import logging
from typing import List
from xml.etree import ElementTree

from pydantic import BaseModel

from app.services.posts_service import PostsService
from app.utils import parse_date

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


class SitemapEntry(BaseModel):
    url: str
    lastModified: datetime.datetime
    changeFrequency: str
    priority: float


class SitemapService:
    def __init__(self, posts_service: PostsService, site_url: str):
        self.posts_service = posts_service
        self.site_url = site_url.rstrip("/")

    async def get_entries(self) -> List[SitemapEntry]:
        now = datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)
        entries = [
            SitemapEntry(
                url=self.site_url,
                lastModified=now,
                changeFrequency="weekly",
                priority=1.0,
            ),
            SitemapEntry(
                url=f"{self.site_url}/blog",
                lastModified=now,
                changeFrequency="weekly",
                priority=0.8,
            ),
        ]

        slugs = await asyncio.to_thread(self.posts_service.list_slugs)
        posts = await asyncio.gather(
            *(self.posts_service.get_post(slug) for slug in slugs)
        )
        for slug, post in zip(slugs, posts):
            last_modified = parse_date(post.date) if post else None
            entries.append(
                SitemapEntry(
                    url=f"{self.site_url}/blog/{slug}",
                    lastModified=last_modified or now,
                    changeFrequency="monthly",
                    priority=0.7,
                )
            )

        logger.debug(f"Built sitemap with {len(entries)} entries")
        return entries

    async def render_xml(self) -> str:
        urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NAMESPACE)
        for entry in await self.get_entries():
            url = ElementTree.SubElement(urlset, "url")
            ElementTree.SubElement(url, "loc").text = entry.url
            ElementTree.SubElement(url, "lastmod").text = (
                entry.lastModified.date().isoformat()
            )
            ElementTree.SubElement(url, "changefreq").text = entry.changeFrequency
            ElementTree.SubElement(url, "priority").text = f"{entry.priority:.1f}"
        body = ElementTree.tostring(urlset, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
