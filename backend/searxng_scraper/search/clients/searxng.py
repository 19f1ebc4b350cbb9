"""
SearXNG page fetcher. Scrapes the HTML results page of one public instance.

Each fetch opens its own requests.Session so cookies from the warm-up visit
follow the search request, and nothing is shared between calls.
"""

import logging
import random
import re
import time
from enum import Enum
from typing import Callable, Optional
from urllib.parse import urlencode, urljoin

import requests

from searxng_scraper import __version__
from searxng_scraper.search.errors import BotRedirectError, TransportError
from searxng_scraper.search.schemas import FetchOutcome, FetchStatus, TimeRange

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"searxng-scraper/{__version__}"

# SearXNG serves a per-client stylesheet (/client<token>.css) used by its bot limiter
CLIENT_ASSET_MARKER = "client"
# Body class of the instance's landing page; seeing it means the search was bounced
HOME_PAGE_MARKER = "index_endpoint"

PACING_DELAY_RANGE = (0.05, 0.3)
BOT_REDIRECT_DELAY_SECONDS = 2.0

_STYLESHEET_LINK_RE = re.compile(r"<link\b[^>]*>", re.IGNORECASE | re.DOTALL)
_HREF_RE = re.compile(r"href=[\"']([^\"']+)[\"']", re.IGNORECASE)


class _Attempt(Enum):
    FIRST = 1
    SECOND = 2


def find_client_asset(root_html: str) -> Optional[str]:
    """Return the href of the client stylesheet linked from the landing page."""
    for tag in _STYLESHEET_LINK_RE.findall(root_html or ""):
        if "stylesheet" not in tag.lower():
            continue
        href = _HREF_RE.search(tag)
        if href and CLIENT_ASSET_MARKER in href.group(1):
            return href.group(1)
    return None


def build_search_url(
    endpoint: str,
    query: str,
    page: int = 1,
    time_range: Optional[TimeRange] = None,
    language: Optional[str] = None,
) -> str:
    params = {"q": query}
    if time_range:
        params["time_range"] = TimeRange(time_range).value
    if language:
        params["language"] = language
    if page > 1:
        params["pageno"] = str(page)
    return f"{endpoint.rstrip('/')}/search?{urlencode(params)}"


class SearxngClient:
    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        session_factory: Callable[[], requests.Session] = requests.Session,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self._session_factory = session_factory
        self._sleep = sleep
        self._rng = rng or random.Random()

    def fetch(
        self,
        endpoint: str,
        query: str,
        page: int = 1,
        time_range: Optional[TimeRange] = None,
        language: Optional[str] = None,
    ) -> FetchOutcome:
        """Fetch one results page, retrying once on the same endpoint if bounced home."""
        attempt = _Attempt.FIRST
        while True:
            outcome = self._fetch_once(endpoint, query, page, time_range, language)
            if outcome.status != FetchStatus.bot_redirect or attempt == _Attempt.SECOND:
                return outcome
            logger.warning(
                "Redirected to home page by %s (page %d), retrying in %.0fs",
                endpoint, page, BOT_REDIRECT_DELAY_SECONDS,
            )
            self._sleep(BOT_REDIRECT_DELAY_SECONDS)
            attempt = _Attempt.SECOND

    def _fetch_once(
        self,
        endpoint: str,
        query: str,
        page: int,
        time_range: Optional[TimeRange],
        language: Optional[str],
    ) -> FetchOutcome:
        root = endpoint.rstrip("/")
        headers = {"User-Agent": self.user_agent, "Referer": root}
        url = build_search_url(root, query, page, time_range, language)

        session = self._session_factory()
        try:
            self._warm_up(session, root)
            self._sleep(self._rng.uniform(*PACING_DELAY_RANGE))

            logger.debug("Fetching results from SearXNG: %s", url)
            try:
                response = session.get(url, headers=headers, timeout=self.timeout)
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                status_code = e.response.status_code if e.response is not None else None
                logger.error("HTTP %s from %s: %s", status_code, url, e)
                return FetchOutcome(
                    status=FetchStatus.transport_error,
                    endpoint=endpoint,
                    page=page,
                    error=TransportError(endpoint, str(e), status_code=status_code),
                )
            except requests.exceptions.RequestException as e:
                logger.error("Error fetching results from %s: %s", url, e)
                return FetchOutcome(
                    status=FetchStatus.transport_error,
                    endpoint=endpoint,
                    page=page,
                    error=TransportError(endpoint, str(e)),
                )

            html = response.text
            if HOME_PAGE_MARKER in html:
                return FetchOutcome(
                    status=FetchStatus.bot_redirect,
                    endpoint=endpoint,
                    page=page,
                    html=html,
                    error=BotRedirectError(endpoint),
                )
            return FetchOutcome(status=FetchStatus.html, endpoint=endpoint, page=page, html=html)
        finally:
            session.close()

    def _warm_up(self, session: requests.Session, root: str) -> None:
        """Visit the landing page and its client stylesheet like a browser would."""
        headers = {"User-Agent": self.user_agent}
        try:
            response = session.get(root, headers=headers, timeout=self.timeout)
            root_html = response.text
        except requests.exceptions.RequestException as e:
            logger.warning("Warm-up request to %s failed: %s", root, e)
            return

        asset = find_client_asset(root_html)
        if not asset:
            return
        try:
            asset_url = urljoin(root + "/", asset)
            session.get(asset_url, headers={**headers, "Referer": root}, timeout=self.timeout)
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning("Failed to fetch client asset %s: %s", asset, e)
