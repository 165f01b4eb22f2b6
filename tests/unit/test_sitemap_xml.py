from xml.etree import ElementTree

from app.schemas.sitemap import SitemapEntry
from app.utils.sitemap import render_sitemap, SITEMAP_NAMESPACE


def test_render_sitemap_urlset():
    entries = [
        SitemapEntry(loc="https://example.com/courses", lastmod="2025-01-01T00:00:00Z"),
        SitemapEntry(loc="https://example.com/courses/a&b", lastmod="2024-01-01T00:00:00Z"),
    ]

    document = render_sitemap(entries)

    assert document.startswith(b"<?xml")
    root = ElementTree.fromstring(document)
    ns = {"sm": SITEMAP_NAMESPACE}
    locs = [el.text for el in root.findall("sm:url/sm:loc", ns)]
    lastmods = [el.text for el in root.findall("sm:url/sm:lastmod", ns)]
    assert locs == ["https://example.com/courses", "https://example.com/courses/a&b"]
    assert lastmods == ["2025-01-01T00:00:00Z", "2024-01-01T00:00:00Z"]


def test_render_empty_sitemap():
    root = ElementTree.fromstring(render_sitemap([]))
    assert root.tag == f"{{{SITEMAP_NAMESPACE}}}urlset"
    assert list(root) == []
