"""
Server health probe: checks which public SearXNG instances answer searches on
page 1 and page 2, for picking a SEARXNG_BASE_URL list.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import requests

from searxng_scraper.search.clients import SearxngClient
from searxng_scraper.search.extractor import extract_results

logger = logging.getLogger(__name__)

INSTANCES_URL = "https://searx.space/data/instances.json"
PROBE_QUERY = "test"

FALLBACK_INSTANCES = [
    "https://baresearch.org",
    "https://copp.gg",
    "https://darmarit.org/searx",
    "https://etsi.me",
    "https://fairsuch.net",
    "https://find.xenorio.xyz",
    "https://kantan.cat",
    "https://opnxng.com",
    "https://paulgo.io",
    "https://searx.tiekoetter.com",
    "https://searxng.world",
]


@dataclass
class PageCheck:
    success: bool
    result_count: int = 0
    error: Optional[str] = None


@dataclass
class ServerReport:
    url: str
    status: str  # "good" | "ok" | "bad"
    pages: dict[int, PageCheck] = field(default_factory=dict)


def fetch_public_instances(session: Optional[requests.Session] = None, timeout: float = 15.0) -> list[str]:
    """HTTPS instance URLs listed on searx.space, or a fixed list if that fails."""
    if session is None:
        with requests.Session() as owned:
            return fetch_public_instances(owned, timeout)

    try:
        response = session.get(INSTANCES_URL, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error("Error fetching searx.space data: %s", e)
        return list(FALLBACK_INSTANCES)

    instances = data.get("instances") if isinstance(data, dict) else None
    if not isinstance(instances, dict):
        logger.error("Unexpected searx.space data shape: %.200r", data)
        return list(FALLBACK_INSTANCES)
    urls = [url for url in instances if isinstance(url, str) and url.startswith("https://")]
    logger.info("Found %d HTTPS SearXNG servers", len(urls))
    return urls


def check_page(client: SearxngClient, url: str, page: int) -> PageCheck:
    outcome = client.fetch(url, PROBE_QUERY, page=page, language="en")
    if not outcome.ok:
        return PageCheck(success=False, error=str(outcome.error))
    results = extract_results(outcome.html)
    return PageCheck(success=bool(results), result_count=len(results))


def probe_server(url: str, client: SearxngClient) -> ServerReport:
    page1 = check_page(client, url, 1)
    page2 = check_page(client, url, 2)
    if page1.success and page2.success:
        status = "good"
    elif page1.success:
        status = "ok"
    else:
        status = "bad"
    return ServerReport(url=url, status=status, pages={1: page1, 2: page2})


def probe_servers(urls: list[str], client: SearxngClient) -> list[ServerReport]:
    reports = []
    for index, url in enumerate(urls, start=1):
        logger.info("Progress: %d/%d %s", index, len(urls), url)
        reports.append(probe_server(url, client))
    return reports


def _page_line(page: int, check: PageCheck) -> str:
    if check.success:
        return f"  Page {page}: ✓ {check.result_count} results"
    return f"  Page {page}: ✗ {check.error or 'Failed'}"


def format_report(reports: list[ServerReport], generated_at: Optional[datetime] = None) -> str:
    generated_at = generated_at or datetime.now(timezone.utc)
    groups = {status: [r for r in reports if r.status == status] for status in ("good", "ok", "bad")}
    marks = {"good": "✓", "ok": "~", "bad": "✗"}
    titles = {
        "good": "Good Servers (Recommended for reliable searching)",
        "ok": "OK Servers (May work but pagination issues)",
        "bad": "Bad Servers (Not recommended)",
    }

    lines = [
        "SearXNG Server Test Report",
        "==========================",
        "",
        f"Generated on: {generated_at.isoformat()}",
        "",
        "Summary:",
        f"- Good servers (both page 1 and 2 work): {len(groups['good'])}",
        f"- OK servers (page 1 works, page 2 fails): {len(groups['ok'])}",
        f"- Bad servers (both pages fail): {len(groups['bad'])}",
    ]
    for status in ("good", "ok", "bad"):
        lines += ["", titles[status], "-" * len(titles[status])]
        lines += [f"{marks[status]} {r.url}" for r in groups[status]] or ["None"]

    lines += ["", "Detailed Results", "================"]
    for status in ("good", "ok", "bad"):
        lines += ["", f"{titles[status].split(' (')[0]}:"]
        if not groups[status]:
            lines.append("None")
        for report in groups[status]:
            lines.append(f"{report.url}:")
            lines += [_page_line(page, check) for page, check in sorted(report.pages.items())]
    return "\n".join(lines) + "\n"
