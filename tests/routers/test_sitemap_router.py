from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.routers import sitemap


class FakeSitemapService:
    def __init__(self, body="<urlset/>", error=None):
        self.body = body
        self.error = error

    async def render_xml(self):
        if self.error:
            raise self.error
        return self.body


def make_app(fake_service):
    app = FastAPI()
    app.dependency_overrides[deps.get_sitemap_service] = lambda: fake_service
    app.include_router(sitemap.router)
    return app


def test_sitemap_serves_xml():
    client = TestClient(make_app(FakeSitemapService()))

    res = client.get("/sitemap.xml")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/xml")
    assert res.text == "<urlset/>"


def test_sitemap_returns_500_on_error():
    client = TestClient(make_app(FakeSitemapService(error=RuntimeError("boom"))))

    res = client.get("/sitemap.xml")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to build sitemap"
