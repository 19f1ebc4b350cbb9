"""Tests for the server health probe."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
import requests

from searxng_scraper.search.probe import (
    FALLBACK_INSTANCES,
    PROBE_QUERY,
    fetch_public_instances,
    format_report,
    probe_server,
    probe_servers,
)

from conftest import FakeClient, failed_outcome, html_outcome, make_response, page_of, results_page


def _pages(page1_ok, page2_ok):
    def pages(page):
        ok = page1_ok if page == 1 else page2_ok
        if ok is None:
            return failed_outcome("https://s.example", page)
        return html_outcome("https://s.example", page_of("s", 3) if ok else results_page(), page)

    return pages


class TestFetchPublicInstances:
    def test_https_only(self):
        session = MagicMock()
        response = make_response()
        response.json.return_value = {
            "instances": {"https://a.example/": {}, "http://b.example/": {}, "https://c.example/": {}}
        }
        session.get.return_value = response
        assert fetch_public_instances(session) == ["https://a.example/", "https://c.example/"]

    @pytest.mark.parametrize("body", [[], ["https://a.example"], {"instances": []}, "text"])
    def test_fallback_on_unexpected_shape(self, body):
        session = MagicMock()
        response = make_response()
        response.json.return_value = body
        session.get.return_value = response
        assert fetch_public_instances(session) == FALLBACK_INSTANCES

    def test_owned_session_is_closed(self):
        with patch("searxng_scraper.search.probe.requests.Session") as session_cls:
            session = session_cls.return_value.__enter__.return_value
            session.get.side_effect = requests.exceptions.ConnectionError("down")
            assert fetch_public_instances() == FALLBACK_INSTANCES
        session_cls.return_value.__exit__.assert_called_once()

    def test_fallback_on_error(self):
        session = MagicMock()
        session.get.side_effect = requests.exceptions.ConnectionError("down")
        assert fetch_public_instances(session) == FALLBACK_INSTANCES


class TestProbeServer:
    def test_good(self):
        client = FakeClient({"https://s.example": _pages(True, True)})
        report = probe_server("https://s.example", client)
        assert report.status == "good"
        assert report.pages[1].result_count == 3
        assert client.calls == [("https://s.example", 1), ("https://s.example", 2)]

    def test_ok_when_page_two_fails(self):
        client = FakeClient({"https://s.example": _pages(True, None)})
        report = probe_server("https://s.example", client)
        assert report.status == "ok"
        assert "connection refused" in report.pages[2].error

    def test_bad_when_page_one_empty(self):
        client = FakeClient({"https://s.example": _pages(False, True)})
        assert probe_server("https://s.example", client).status == "bad"

    def test_uses_probe_query(self):
        client = MagicMock()
        client.fetch.return_value = html_outcome("https://s.example", page_of("s", 1))
        probe_server("https://s.example", client)
        assert client.fetch.call_args.args[1] == PROBE_QUERY


class TestFormatReport:
    def test_groups_servers(self):
        client = FakeClient({
            "https://good.example": _pages(True, True),
            "https://ok.example": _pages(True, False),
            "https://bad.example": _pages(None, None),
        })
        reports = probe_servers(["https://good.example", "https://ok.example", "https://bad.example"], client)
        text = format_report(reports, generated_at=datetime(2024, 1, 1, tzinfo=timezone.utc))

        assert "Generated on: 2024-01-01T00:00:00+00:00" in text
        assert "- Good servers (both page 1 and 2 work): 1" in text
        assert "- OK servers (page 1 works, page 2 fails): 1" in text
        assert "- Bad servers (both pages fail): 1" in text
        assert "✓ https://good.example" in text
        assert "~ https://ok.example" in text
        assert "✗ https://bad.example" in text
        assert "  Page 1: ✓ 3 results" in text

    def test_empty_groups_say_none(self):
        assert "None" in format_report([])
