from typing import Iterable
from xml.etree.ElementTree import Element, SubElement, tostring

from app.schemas.sitemap import SitemapEntry

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def render_sitemap(entries: Iterable[SitemapEntry]) -> bytes:
    urlset = Element('urlset')
    urlset.set('xmlns', SITEMAP_NAMESPACE)

    for entry in entries:
        url = SubElement(urlset, 'url')
        SubElement(url, 'loc').text = entry.loc
        SubElement(url, 'lastmod').text = entry.lastmod

    return tostring(urlset, encoding='utf-8', xml_declaration=True)
