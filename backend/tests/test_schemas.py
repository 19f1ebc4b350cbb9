"""Tests for search schemas."""

import pytest
from pydantic import ValidationError

from searxng_scraper.search.schemas import NO_SUMMARY, QueryRequest, SearchResult, TimeRange


class TestSearchResult:
    def test_valid_result(self):
        result = SearchResult(url="https://example.com", summary="text")
        assert result.model_dump() == {"url": "https://example.com", "summary": "text"}

    def test_summary_defaults_to_placeholder(self):
        assert SearchResult(url="https://example.com").summary == NO_SUMMARY

    def test_url_required_non_empty(self):
        with pytest.raises(ValidationError):
            SearchResult(summary="text")
        with pytest.raises(ValidationError):
            SearchResult(url="")

    def test_value_equality(self):
        assert SearchResult(url="https://a.example", summary="s") == SearchResult(url="https://a.example", summary="s")


class TestQueryRequest:
    def test_defaults(self):
        request = QueryRequest(query="python")
        assert request.time_range is None
        assert request.language is None
        assert request.page == 1
        assert request.detailed is False

    def test_time_range_values(self):
        for value in ("day", "week", "month", "year"):
            assert QueryRequest(query="q", time_range=value).time_range == TimeRange(value)

    def test_invalid_time_range(self):
        with pytest.raises(ValidationError):
            QueryRequest(query="q", time_range="decade")

    def test_blank_filters_become_none(self):
        request = QueryRequest(query="q", time_range="", language="  ")
        assert request.time_range is None
        assert request.language is None

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            QueryRequest(query="q", page=0)

    def test_frozen(self):
        request = QueryRequest(query="q")
        with pytest.raises(ValidationError):
            request.query = "other"
