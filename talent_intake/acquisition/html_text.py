"""Visible-text helpers over BeautifulSoup documents."""

from bs4 import BeautifulSoup, Tag

from talent_intake.utils.text import collapse_whitespace

NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]

# Ordered by priority: job-specific containers first, then generic content.
JOB_CONTENT_SELECTORS = [
    '[class*="job"]',
    '[class*="position"]',
    '[class*="description"]',
    '[id*="job"]',
    '[id*="position"]',
    '[id*="description"]',
    "main",
    "article",
    ".content",
    "#content",
]


def parse_html(html: str) -> BeautifulSoup:
    """Parse ``html`` and drop script/style nodes in place."""
    soup = BeautifulSoup(html, "lxml")
    for node in soup.find_all(NON_CONTENT_TAGS):
        node.decompose()
    return soup


def visible_text(node: Tag | BeautifulSoup) -> str:
    return collapse_whitespace(node.get_text(" "))


def body_text(soup: BeautifulSoup) -> str:
    root = soup.body or soup
    return visible_text(root)


def job_content_text(soup: BeautifulSoup, min_length: int) -> str | None:
    """Text of the first job-like element longer than ``min_length`` characters.

    Selectors are tried in priority order and, within a selector, elements in
    document order. Returns None when nothing qualifies.
    """
    for selector in JOB_CONTENT_SELECTORS:
        for element in soup.select(selector):
            text = visible_text(element)
            if len(text) > min_length:
                return text
    return None
