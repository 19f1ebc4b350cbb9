"""
Result extraction from SearXNG result pages.

Regex matching over the simple theme's markup: each result is an
<article class="result ..."> holding an <a class="url_header" href=...> link and
a <p class="content"> snippet. Callers only see extract_results(), so this can
be swapped for a tree parser without touching them.
"""

import html as html_lib
import logging
import re

from searxng_scraper.search.schemas import NO_SUMMARY, SearchResult

logger = logging.getLogger(__name__)

# Pages larger than this with no result blocks usually mean the markup changed
PARSE_ANOMALY_MIN_CHARS = 2048

_RESULT_BLOCK_RE = re.compile(
    r"<article[^>]*class=[\"'][^\"']*result[^\"']*[\"'][^>]*>(.*?)</article>",
    re.IGNORECASE | re.DOTALL,
)
_ANCHOR_TAG_RE = re.compile(r"<a\b[^>]*>", re.IGNORECASE | re.DOTALL)
_TITLE_LINK_CLASS_RE = re.compile(r"class=[\"'][^\"']*url_header[^\"']*[\"']", re.IGNORECASE)
_HREF_RE = re.compile(r"href=[\"']([^\"']+)[\"']", re.IGNORECASE)
_SNIPPET_RE = re.compile(
    r"<p[^>]*class=[\"'][^\"']*content[^\"']*[\"'][^>]*>(.*?)</p>",
    re.IGNORECASE | re.DOTALL,
)
_TAG_RE = re.compile(r"<[^>]*>")


def _find_url(block: str) -> str | None:
    for tag in _ANCHOR_TAG_RE.findall(block):
        if not _TITLE_LINK_CLASS_RE.search(tag):
            continue
        href = _HREF_RE.search(tag)
        if href:
            return html_lib.unescape(href.group(1)).strip() or None
        return None
    return None


def _find_summary(block: str) -> str:
    match = _SNIPPET_RE.search(block)
    if not match:
        return NO_SUMMARY
    text = html_lib.unescape(_TAG_RE.sub("", match.group(1)))
    return text.strip()


def extract_results(html: str) -> list[SearchResult]:
    """Parse one results page into (url, summary) records in document order."""
    if not html:
        return []

    results: list[SearchResult] = []
    blocks = _RESULT_BLOCK_RE.findall(html)
    for block in blocks:
        url = _find_url(block)
        if not url:
            logger.debug("No URL found in result block: %.200s", block)
            continue
        results.append(SearchResult(url=url, summary=_find_summary(block)))

    if not blocks and len(html) > PARSE_ANOMALY_MIN_CHARS:
        logger.warning(
            "Parse anomaly: %d characters of HTML but no result blocks matched", len(html)
        )
    return results
