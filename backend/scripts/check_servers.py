"""
Probe public SearXNG servers: fetch the searx.space instance list (or use the
URLs given on the command line), search page 1 and page 2 on each, and print a
Good / OK / Bad report.

Run from backend with:
  python scripts/check_servers.py
  python scripts/check_servers.py https://searx.example.org https://other.example
  python scripts/check_servers.py --report searxng-server-report.txt
"""

import argparse
import os
import sys

# Add backend root so "searxng_scraper" is importable from scripts/ or from backend/
_backend_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _backend_root not in sys.path:
    sys.path.insert(0, _backend_root)

from searxng_scraper.config import Settings
from searxng_scraper.logging_config import configure_logging
from searxng_scraper.search.clients import SearxngClient
from searxng_scraper.search.probe import fetch_public_instances, format_report, probe_servers


def _section(title: str) -> None:
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def main() -> None:
    parser = argparse.ArgumentParser(description="Test SearXNG servers for page 1 and page 2 results.")
    parser.add_argument("urls", nargs="*", help="Servers to test (default: all HTTPS servers on searx.space)")
    parser.add_argument("--report", help="Also write the full report to this file")
    args = parser.parse_args()

    settings = Settings()
    configure_logging(settings.log_level)

    urls = args.urls or fetch_public_instances()
    if not urls:
        print("No servers found to test.")
        return

    _section(f"Testing {len(urls)} SearXNG servers")
    client = SearxngClient(user_agent=settings.user_agent, timeout=settings.request_timeout_seconds)
    reports = probe_servers(urls, client)
    report = format_report(reports)

    if args.report:
        with open(args.report, "w", encoding="utf-8") as f:
            f.write(report)
        print(f"Report written to: {args.report}")

    print(report)

    _section("SUMMARY")
    good = [r for r in reports if r.status == "good"]
    print(f"Good servers: {len(good)}")
    print(f"OK servers: {sum(1 for r in reports if r.status == 'ok')}")
    print(f"Bad servers: {sum(1 for r in reports if r.status == 'bad')}")
    if good:
        print("\nSEARXNG_BASE_URL=" + ";".join(r.url for r in good))


if __name__ == "__main__":
    main()
