import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.routers import posts, search, sitemap
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.content_path.is_dir():
        logger.warning(
            f"Blog content directory {settings.content_path} is missing; "
            "serving zero posts"
        )
    logger.info(f"Serving blog posts from {settings.content_path}")
    yield


app = FastAPI(
    title="Portfolio Blog API",
    description="Markdown blog posts, search and sitemap",
    lifespan=lifespan,
)

app.include_router(posts.router)
app.include_router(search.router)
app.include_router(sitemap.router)


@app.get("/")
async def root():
    return {"message": "Portfolio Blog API is running"}
