"""HTML parsing utilities for metadata extraction"""

import logging
from typing import Optional, List
from urllib.parse import urljoin

from bs4 import BeautifulSoup


logger = logging.getLogger(__name__)

# Tried in order; the first element carrying a content attribute wins
DESCRIPTION_SELECTORS = (
    'meta[name="description"]',
    'meta[property="og:description"]',
)


def resolve_link(href: str, base_url: str) -> str:
    """
    Make a link absolute against the page it was found on.

    Links that already start with "http" or "//" are kept verbatim. If joining
    fails the raw href is returned unchanged.
    """
    if href.startswith("http") or href.startswith("//"):
        return href
    try:
        return urljoin(base_url, href)
    except ValueError as e:
        logger.debug(f"Could not resolve '{href}' against {base_url}: {str(e)}")
        return href


class HTMLParser:
    """Encapsulates HTML parsing functionality"""

    def __init__(self, html: str, url: str):
        """
        Initialize the HTML parser

        Args:
            html: HTML content to parse
            url: Base URL for resolving relative links
        """
        self.html = html
        self.url = url
        self.soup = BeautifulSoup(html or "", "lxml")

    def get_meta_content(self, selector: str) -> Optional[str]:
        """Return the content attribute of the first element matching a CSS selector"""
        try:
            el = self.soup.select_one(selector)
            if el is not None and el.has_attr("content"):
                return str(el["content"])
        except Exception as e:
            logger.warning(f"Failed to extract meta tag '{selector}': {str(e)}")
        return None

    def get_title(self) -> Optional[str]:
        """Extract title, preferring the <title> element over og:title"""
        title = None
        try:
            title_tag = self.soup.find("title")
            if title_tag is not None:
                t = title_tag.get_text().strip()
                title = t if t else None
        except Exception:
            logger.debug("Failed to extract title from HTML title tag")
            title = None

        if not title:
            og_title = self.get_meta_content('meta[property="og:title"]')
            if og_title and og_title.strip():
                title = og_title

        return title

    def get_description(self) -> Optional[str]:
        """Extract description from the first matching meta tag"""
        for selector in DESCRIPTION_SELECTORS:
            description = self.get_meta_content(selector)
            if description is not None:
                return description
        return None

    def get_image(self) -> Optional[str]:
        """Extract the Open Graph preview image exactly as the page declares it"""
        return self.get_meta_content('meta[property="og:image"]')

    def get_favicon(self) -> Optional[str]:
        """Extract favicon from the first <link> whose rel names an icon"""
        favicon = None
        try:
            favicon_tag = next(
                (link for link in self.soup.find_all("link") if self._is_icon_rel(link.get("rel"))),
                None
            )
            if favicon_tag is not None and favicon_tag.get("href") is not None:
                favicon = resolve_link(str(favicon_tag.get("href")), self.url)
        except Exception as e:
            logger.warning(f"Failed to extract favicon link: {str(e)}")

        return favicon

    @staticmethod
    def _is_icon_rel(rel) -> bool:
        """rel is a space-separated token list; match any token mentioning "icon"."""
        if not rel:
            return False
        tokens: List[str] = rel.split() if isinstance(rel, str) else list(rel)
        return any("icon" in token.lower() for token in tokens)
