"""Web app manifest, crawler directives and sitemap for the landing page.

Each builder is a pure function of the public base URL (plus the clock for
the sitemap's last-modified stamp).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape

SITE_NAME = "Alberta AI"
SITE_SHORT_NAME = "AB AI"
SITE_DESCRIPTION = "Fueling the Future of Innovation in Alberta"

MANIFEST_ICONS: List[Dict[str, str]] = [
    {"src": "/android-chrome-192x192.png", "sizes": "192x192", "type": "image/png", "purpose": "any"},
    {"src": "/android-chrome-512x512.png", "sizes": "512x512", "type": "image/png", "purpose": "any"},
    {"src": "/apple-touch-icon.png", "sizes": "180x180", "type": "image/png"},
    {"src": "/favicon-32x32.png", "sizes": "32x32", "type": "image/png"},
    {"src": "/favicon-16x16.png", "sizes": "16x16", "type": "image/png"},
]


def build_manifest(base_url: str) -> Dict[str, Any]:
    return {
        "name": SITE_NAME,
        "short_name": SITE_SHORT_NAME,
        "description": SITE_DESCRIPTION,
        "start_url": "/",
        "display": "standalone",
        "background_color": "#ffffff",
        "theme_color": "#0ea5e9",
        "orientation": "portrait-primary",
        "scope": "/",
        "id": base_url,
        "categories": ["business", "productivity", "utilities", "ai"],
        "lang": "en-CA",
        "dir": "ltr",
        "icons": [dict(icon) for icon in MANIFEST_ICONS],
    }


def build_robots(base_url: str) -> str:
    """Allow every crawler everywhere and advertise the sitemap."""
    return (
        "User-Agent: *\n"
        "Allow: /\n"
        "\n"
        f"Sitemap: {base_url}/sitemap.xml\n"
    )


def sitemap_entries(base_url: str, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    # The landing page is the only public page
    return [
        {
            "url": base_url,
            "last_modified": now or datetime.now(timezone.utc),
            "change_frequency": "weekly",
            "priority": 1.0,
        }
    ]


def build_sitemap(base_url: str, now: Optional[datetime] = None) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for entry in sitemap_entries(base_url, now):
        lines.extend([
            "<url>",
            f"<loc>{escape(entry['url'])}</loc>",
            f"<lastmod>{entry['last_modified'].isoformat()}</lastmod>",
            f"<changefreq>{entry['change_frequency']}</changefreq>",
            f"<priority>{entry['priority']}</priority>",
            "</url>",
        ])
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
