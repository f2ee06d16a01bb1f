from fastapi import Depends

from app.repos.posts_repo import FilePostsRepo
from app.services.posts_service import PostsService
from app.services.search_service import SearchService
from app.services.sitemap_service import SitemapService
from app.settings import Settings, get_settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.content_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo, words_per_minute=current_settings.WORDS_PER_MINUTE
    )


def get_search_service(posts_service=Depends(get_posts_service)):
    return SearchService(posts_service)


def get_sitemap_service(
    posts_service=Depends(get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    return SitemapService(posts_service, site_url=current_settings.site_url)
