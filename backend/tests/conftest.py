"""Pytest fixtures and fakes for search tests."""

from unittest.mock import MagicMock

import pytest
import requests

from searxng_scraper.search.schemas import FetchOutcome, FetchStatus


def result_block(url: str, summary: str | None = "A snippet") -> str:
    """One result article in SearXNG simple-theme markup."""
    snippet = f'<p class="content">\n  {summary}\n</p>' if summary is not None else ""
    return f"""
<article class="result result-default category-general">
  <a href="{url}" class="url_wrapper" rel="noreferrer">
    <span class="url_o1"><span class="url_i1">{url}</span></span>
  </a>
  <h3><a href="{url}" class="url_header" rel="noreferrer">Title for {url}</a></h3>
  {snippet}
</article>"""


def results_page(*blocks: str) -> str:
    return (
        '<!DOCTYPE html><html><head><title>SearXNG</title></head>'
        '<body class="results_endpoint"><main id="main_results">'
        + "".join(blocks)
        + "</main></body></html>"
    )


HOME_PAGE = (
    '<!DOCTYPE html><html><head>'
    '<link rel="stylesheet" href="/static/themes/simple/sxng-ltr.min.css" type="text/css">'
    '<link rel="stylesheet" href="/client8f2c1a.css" type="text/css">'
    '</head><body class="index_endpoint"><form id="search" method="POST" action="/search"></form></body></html>'
)


def page_of(prefix: str, count: int) -> str:
    return results_page(*(result_block(f"https://{prefix}.example/{i}", f"{prefix} {i}") for i in range(count)))


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


class FakeClient:
    """Stands in for SearxngClient; pages maps endpoint -> callable(page) -> FetchOutcome."""

    def __init__(self, pages):
        self.pages = pages
        self.calls: list[tuple[str, int]] = []

    def fetch(self, endpoint, query, page=1, time_range=None, language=None):
        self.calls.append((endpoint, page))
        return self.pages[endpoint](page)


def html_outcome(endpoint: str, html: str, page: int = 1) -> FetchOutcome:
    return FetchOutcome(status=FetchStatus.html, endpoint=endpoint, page=page, html=html)


def failed_outcome(endpoint: str, page: int = 1) -> FetchOutcome:
    return FetchOutcome(
        status=FetchStatus.transport_error,
        endpoint=endpoint,
        page=page,
        error=ConnectionError("connection refused"),
    )


@pytest.fixture
def no_sleep():
    return lambda seconds: None


@pytest.fixture
def single_result_html():
    return results_page(result_block("https://example.com/a", "hello <b>world</b>"))
