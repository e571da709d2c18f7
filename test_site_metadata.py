from datetime import datetime, timezone

from fastapi.testclient import TestClient

from landing_api.config import settings
from landing_api.main import app
from landing_api.services.site_metadata import build_manifest, build_robots, build_sitemap

client = TestClient(app)


def test_build_manifest_uses_base_url():
    manifest = build_manifest("https://example.org")

    assert manifest["id"] == "https://example.org"
    assert manifest["name"] == "Alberta AI"
    assert manifest["start_url"] == "/"
    assert [icon["sizes"] for icon in manifest["icons"]] == ["192x192", "512x512", "180x180", "32x32", "16x16"]


def test_build_robots_points_at_sitemap():
    robots = build_robots("https://example.org")

    assert "User-Agent: *" in robots
    assert "Allow: /" in robots
    assert "Sitemap: https://example.org/sitemap.xml" in robots


def test_build_sitemap_lists_landing_page():
    now = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)
    sitemap = build_sitemap("https://example.org", now=now)

    assert "<loc>https://example.org</loc>" in sitemap
    assert "<lastmod>2026-01-05T12:00:00+00:00</lastmod>" in sitemap
    assert "<changefreq>weekly</changefreq>" in sitemap
    assert "<priority>1.0</priority>" in sitemap


def test_metadata_routes(monkeypatch):
    monkeypatch.setattr(settings, "SITE_BASE_URL", "https://example.org")

    manifest = client.get("/manifest.webmanifest")
    assert manifest.status_code == 200
    assert manifest.headers["content-type"].startswith("application/manifest+json")
    assert manifest.json()["id"] == "https://example.org"

    robots = client.get("/robots.txt")
    assert robots.headers["content-type"].startswith("text/plain")
    assert "Sitemap: https://example.org/sitemap.xml" in robots.text

    sitemap = client.get("/sitemap.xml")
    assert sitemap.headers["content-type"].startswith("application/xml")
    assert "<loc>https://example.org</loc>" in sitemap.text
