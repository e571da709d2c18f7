from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from landing_api.config import settings
from landing_api.services.site_metadata import build_manifest, build_robots, build_sitemap

router = APIRouter()


@router.get("/manifest.webmanifest", tags=["site"])
async def manifest():
    """Web app manifest"""
    return JSONResponse(
        content=build_manifest(settings.SITE_BASE_URL),
        media_type="application/manifest+json",
    )


@router.get("/robots.txt", response_class=PlainTextResponse, tags=["site"])
async def robots():
    """Crawler directives"""
    return build_robots(settings.SITE_BASE_URL)


@router.get("/sitemap.xml", tags=["site"])
async def sitemap():
    """Sitemap listing the landing page"""
    return Response(content=build_sitemap(settings.SITE_BASE_URL), media_type="application/xml")
