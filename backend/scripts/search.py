"""
Run one search against the configured SearXNG servers and print the JSON payload.

Run from backend with:
  python scripts/search.py "OpenAI news"
  python scripts/search.py "OpenAI news" --detailed --language en --time-range month

Requires SEARXNG_BASE_URL in env (or .env), semicolon-separated.
"""

import argparse
import json
import os
import sys

# Add backend root so "searxng_scraper" is importable from scripts/ or from backend/
_backend_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _backend_root not in sys.path:
    sys.path.insert(0, _backend_root)

from searxng_scraper.config import Settings
from searxng_scraper.logging_config import configure_logging
from searxng_scraper.search import SearchError, run_search


def main() -> None:
    parser = argparse.ArgumentParser(description="Search public SearXNG servers.")
    parser.add_argument("query")
    parser.add_argument("--time-range", choices=["day", "week", "month", "year"])
    parser.add_argument("--language")
    parser.add_argument("--detailed", action="store_true", help="Collect several pages from several servers")
    args = parser.parse_args()

    settings = Settings()
    configure_logging(settings.log_level)

    arguments = {
        "query": args.query,
        "time_range": args.time_range,
        "language": args.language,
        "detailed": "true" if args.detailed else "false",
    }
    try:
        payload = run_search(arguments, settings)
    except SearchError as e:
        print(f"Search failed: {e}", file=sys.stderr)
        sys.exit(1)

    results = json.loads(payload)
    print(json.dumps(results, indent=2, ensure_ascii=False))
    print(f"\n{len(results)} results", file=sys.stderr)


if __name__ == "__main__":
    main()
