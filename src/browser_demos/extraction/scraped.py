"""
Parsing of scraped page HTML into plain records.

The scraping walkthrough pulls the rendered HTML out of the browser and
hands it to these functions, so the selectors can be exercised without
a browser.
"""

from dataclasses import asdict, dataclass
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from browser_demos.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SCORE = "0 points"


@dataclass
class NewsItem:
    """A story row from a news listing."""

    title: str
    url: str
    score: str = DEFAULT_SCORE

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def parse_news_items(html: str, base_url: str = "") -> list[NewsItem]:
    """
    Extract stories from a Hacker News style listing.

    Each story is a ``tr.athing`` row whose title link sits under
    ``.titleline``; the score lives in the following row.

    Args:
        html: Rendered page HTML
        base_url: URL used to resolve relative story links

    Returns:
        Stories in page order. Missing titles become empty strings and
        missing scores become "0 points".
    """
    soup = BeautifulSoup(html, "html.parser")
    items: list[NewsItem] = []

    for row in soup.select(".athing"):
        link = row.select_one(".titleline > a")
        title = link.get_text(strip=True) if link else ""
        href = link.get("href", "") if link else ""
        url = urljoin(base_url, href) if href else ""

        score = DEFAULT_SCORE
        score_row = row.find_next_sibling()
        if isinstance(score_row, Tag):
            score_el = score_row.select_one(".score")
            if score_el is not None:
                score = score_el.get_text(strip=True) or DEFAULT_SCORE

        items.append(NewsItem(title=title, url=url, score=score))

    logger.debug(f"Parsed {len(items)} news items")
    return items


def _descriptor_size(descriptor: str | None) -> int:
    # "640w" -> 640, "2x" -> 2, anything else -> 0
    if not descriptor:
        return 0
    try:
        return int(float(descriptor.rstrip("wx")))
    except ValueError:
        return 0


def parse_srcset(srcset: str) -> list[tuple[str, int]]:
    """
    Split a ``srcset`` value into (url, size) pairs.

    A URL runs up to the next whitespace and may contain commas; trailing
    commas end the candidate. Otherwise the descriptor runs to the next
    comma.
    """
    candidates: list[tuple[str, int]] = []
    pos = 0
    end = len(srcset)

    while pos < end:
        while pos < end and (srcset[pos].isspace() or srcset[pos] == ","):
            pos += 1
        if pos >= end:
            break

        start = pos
        while pos < end and not srcset[pos].isspace():
            pos += 1
        url = srcset[start:pos]

        descriptor = None
        if url.endswith(","):
            url = url.rstrip(",")
        else:
            start = pos
            while pos < end and srcset[pos] != ",":
                pos += 1
            parts = srcset[start:pos].split()
            descriptor = parts[0] if parts else None

        if url:
            candidates.append((url, _descriptor_size(descriptor)))

    return candidates


def largest_srcset_url(srcset: str | None) -> str | None:
    """
    URL of the widest candidate in a ``srcset`` value.

    Ties keep the earliest candidate. Returns None for an empty value.
    """
    if not srcset:
        return None

    best: tuple[str, int] | None = None
    for url, size in parse_srcset(srcset):
        if best is None or size > best[1]:
            best = (url, size)

    return best[0] if best else None


def extract_image_urls(html: str, limit: int = 5) -> list[str]:
    """
    Best-resolution image URLs from the first ``limit`` images with a srcset.

    Falls back to ``src`` when the srcset yields nothing and keeps only
    absolute http(s) URLs.
    """
    soup = BeautifulSoup(html, "html.parser")
    urls: list[str] = []

    for img in soup.select("img[srcset]")[:limit]:
        url = largest_srcset_url(img.get("srcset")) or img.get("src")
        if url and url.startswith("http"):
            urls.append(url)

    return urls
