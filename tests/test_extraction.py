"""
Tests for scraped HTML parsing.

Tests news row extraction and srcset image selection.
"""

import pytest

from browser_demos.extraction import (
    NewsItem,
    extract_image_urls,
    largest_srcset_url,
    parse_news_items,
    parse_srcset,
)


class TestParseNewsItems:
    """Tests for news listing parsing."""

    @pytest.fixture
    def items(self, news_html: str) -> list[NewsItem]:
        """Parse the sample listing."""
        return parse_news_items(news_html, base_url="https://news.ycombinator.com/")

    def test_one_item_per_row(self, items: list[NewsItem]):
        """Every .athing row should produce an item."""
        assert len(items) == 3

    def test_title_url_and_score(self, items: list[NewsItem]):
        """Title, link and score should come from the row and the next row."""
        assert items[0] == NewsItem(
            title="Story One",
            url="https://example.com/story-one",
            score="120 points",
        )

    def test_relative_link_resolved(self, items: list[NewsItem]):
        """Relative story links should be made absolute."""
        assert items[1].url == "https://news.ycombinator.com/item?id=2"

    def test_missing_score_defaults(self, items: list[NewsItem]):
        """Rows without a score should report 0 points."""
        assert items[1].score == "0 points"

    def test_missing_title_link(self, items: list[NewsItem]):
        """Rows without a title link should have empty title and url."""
        assert items[2].title == ""
        assert items[2].url == ""
        assert items[2].score == "0 points"

    def test_empty_page(self):
        """A page with no rows should give no items."""
        assert parse_news_items("<html><body></body></html>") == []

    def test_to_dict(self, items: list[NewsItem]):
        """Items should serialize to plain dicts."""
        assert items[0].to_dict() == {
            "title": "Story One",
            "url": "https://example.com/story-one",
            "score": "120 points",
        }


class TestSrcset:
    """Tests for srcset parsing."""

    def test_width_descriptors(self):
        """Width descriptors should be parsed as integers."""
        assert parse_srcset("a.jpg 200w, b.jpg 800w") == [("a.jpg", 200), ("b.jpg", 800)]

    def test_missing_descriptor(self):
        """A candidate without descriptor should have size 0."""
        assert parse_srcset("only.jpg") == [("only.jpg", 0)]

    def test_commas_inside_urls(self):
        """Commas inside a URL should not split the candidate."""
        srcset = "c.jpg?fit=crop,entropy 100w, c.jpg?fit=crop,faces 300w"

        assert parse_srcset(srcset) == [
            ("c.jpg?fit=crop,entropy", 100),
            ("c.jpg?fit=crop,faces", 300),
        ]

    def test_no_space_after_descriptor_comma(self):
        """A comma right after a descriptor should still end the candidate."""
        assert parse_srcset("a.jpg 1x,b.jpg 2x") == [("a.jpg", 1), ("b.jpg", 2)]

    def test_trailing_comma_ends_url(self):
        """A URL ending in a comma should end its candidate."""
        assert parse_srcset("a.jpg, b.jpg 2x") == [("a.jpg", 0), ("b.jpg", 2)]

    def test_largest_candidate(self):
        """The widest candidate should be chosen regardless of order."""
        srcset = "s.jpg 200w, l.jpg 800w, m.jpg 400w"

        assert largest_srcset_url(srcset) == "l.jpg"

    def test_largest_tie_keeps_first(self):
        """Equal widths should keep the first candidate."""
        assert largest_srcset_url("first.jpg 400w, second.jpg 400w") == "first.jpg"

    @pytest.mark.parametrize("srcset", [None, "", "   "])
    def test_largest_of_empty(self, srcset):
        """Empty values should give None."""
        assert largest_srcset_url(srcset) is None


class TestExtractImageUrls:
    """Tests for gallery image extraction."""

    def test_picks_best_urls(self, gallery_html: str):
        """First five srcset images should yield their best absolute URLs."""
        urls = extract_image_urls(gallery_html, limit=5)

        assert urls == [
            "https://img.example.com/a-800.jpg",
            "https://img.example.com/b.jpg",
            "https://img.example.com/c.jpg?w=300&fit=crop,entropy",
            "https://img.example.com/d-2x.jpg",
        ]

    def test_limit_applies_before_filtering(self, gallery_html: str):
        """Only the first ``limit`` srcset images should be inspected."""
        urls = extract_image_urls(gallery_html, limit=1)

        assert urls == ["https://img.example.com/a-800.jpg"]

    def test_larger_limit_reaches_later_images(self, gallery_html: str):
        """Raising the limit should include later images."""
        urls = extract_image_urls(gallery_html, limit=10)

        assert urls[-1] == "https://img.example.com/e-600.jpg"

    def test_images_without_srcset_ignored(self):
        """Images without a srcset attribute should be skipped."""
        html = '<img src="https://img.example.com/plain.jpg">'

        assert extract_image_urls(html) == []
