"""
Extraction module for browser-demos.

Turns scraped HTML into news and image records.
"""

from browser_demos.extraction.scraped import (
    NewsItem,
    parse_news_items,
    parse_srcset,
    largest_srcset_url,
    extract_image_urls,
)

__all__ = [
    "NewsItem",
    "parse_news_items",
    "parse_srcset",
    "largest_srcset_url",
    "extract_image_urls",
]
