"""Tests for the endoflife.date data source."""

import json
from unittest.mock import Mock, patch

import pytest
import requests

from eolcheck._lifecycle.cache import CacheStore
from eolcheck._lifecycle.models import LifecycleCycle
from eolcheck._lifecycle.source import (
    DEFAULT_TIMEOUT,
    ENDOFLIFE_API_BASE,
    EndOfLifeSource,
    fetch_eol_data,
    get_api_base_url,
    get_default_source,
)
from eolcheck.exceptions import DataSourceError

NODEJS_PAYLOAD = [
    {"cycle": "22", "releaseDate": "2024-04-24", "eol": "2027-04-30", "lts": "2024-10-29", "latest": "22.11.0"},
    {"cycle": 18, "releaseDate": "2022-04-19", "eol": "2025-04-30", "lts": "2022-10-25", "latest": "18.20.5"},
    {"cycle": "0.10", "releaseDate": "2013-03-11", "eol": True},
]


def _response(payload=None, status_code=200, reason="OK", json_error=None):
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def cache(tmp_path):
    return CacheStore(cache_dir=tmp_path / "cache")


@pytest.fixture
def source(cache, session):
    return EndOfLifeSource(cache=cache, base_url="https://eol.example/api/", session=session)


class TestFetch:
    def test_miss_fetches_and_caches(self, source, session, cache):
        session.get.return_value = _response(NODEJS_PAYLOAD)

        cycles = source.fetch("nodejs")

        session.get.assert_called_once_with("https://eol.example/api/nodejs.json", timeout=DEFAULT_TIMEOUT)
        assert [c.cycle for c in cycles] == ["22", "18", "0.10"]
        assert cycles[2].eol is True
        assert cache.get("nodejs") == cycles

    def test_hit_makes_no_request(self, source, session, cache):
        cached = [LifecycleCycle(cycle="20", eol="2026-04-30")]
        cache.set("nodejs", cached)

        assert source.fetch("nodejs") == cached
        session.get.assert_not_called()

    def test_force_refresh_makes_exactly_one_request(self, source, session, cache):
        cache.set("nodejs", [LifecycleCycle(cycle="20")])
        session.get.return_value = _response(NODEJS_PAYLOAD)

        cycles = source.fetch("nodejs", force_refresh=True)

        assert session.get.call_count == 1
        assert len(cycles) == 3
        assert len(cache.get("nodejs")) == 3

    def test_cache_write_failure_still_returns_data(self, source, session):
        session.get.return_value = _response(NODEJS_PAYLOAD)
        with patch("eolcheck._lifecycle.cache.tempfile.mkstemp", side_effect=OSError("read-only")):
            cycles = source.fetch("nodejs")
        assert len(cycles) == 3

    def test_empty_array_is_valid(self, source, session):
        session.get.return_value = _response([])
        assert source.fetch("nodejs") == []


class TestFetchErrors:
    def test_http_error(self, source, session, cache):
        session.get.return_value = _response(status_code=404, reason="Not Found")

        with pytest.raises(DataSourceError) as exc_info:
            source.fetch("not-a-product")

        assert exc_info.value.product == "not-a-product"
        assert str(exc_info.value) == "Failed to fetch EOL data for not-a-product: HTTP 404 Not Found"
        assert cache.get("not-a-product") is None

    def test_timeout(self, source, session):
        session.get.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(DataSourceError, match="timed out"):
            source.fetch("nodejs")
        assert session.get.call_count == 1

    def test_connection_error(self, source, session):
        session.get.side_effect = requests.exceptions.ConnectionError("offline")
        with pytest.raises(DataSourceError) as exc_info:
            source.fetch("nodejs")
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_invalid_json(self, source, session):
        session.get.return_value = _response(json_error=json.JSONDecodeError("bad", "doc", 0))
        with pytest.raises(DataSourceError, match="invalid JSON"):
            source.fetch("nodejs")

    def test_non_array_payload(self, source, session):
        session.get.return_value = _response({"message": "Product not found"})
        with pytest.raises(DataSourceError, match="unexpected response type"):
            source.fetch("nodejs")

    def test_malformed_records(self, source, session):
        session.get.return_value = _response([{"eol": "2020-01-01"}])
        with pytest.raises(DataSourceError, match="malformed"):
            source.fetch("nodejs")


class TestDefaults:
    def test_api_base_url_default(self):
        assert get_api_base_url() == ENDOFLIFE_API_BASE

    def test_api_base_url_override(self, monkeypatch):
        monkeypatch.setenv("EOLCHECK_API_BASE_URL", "http://localhost:8080/api/")
        assert get_api_base_url() == "http://localhost:8080/api"

    def test_default_source_is_shared(self):
        assert get_default_source() is get_default_source()

    def test_default_session_sends_user_agent(self):
        source = EndOfLifeSource()
        assert source.session.headers["User-Agent"].startswith("eol-check/")

    @patch("eolcheck._lifecycle.source.create_session")
    def test_fetch_eol_data_uses_default_source(self, mock_create_session):
        session = Mock(spec=requests.Session)
        session.get.return_value = _response(NODEJS_PAYLOAD)
        mock_create_session.return_value = session

        cycles = fetch_eol_data("nodejs")
        assert cycles[0].cycle == "22"

        # Second call is served from the cache
        fetch_eol_data("nodejs")
        assert session.get.call_count == 1

        fetch_eol_data("nodejs", refresh_cache=True)
        assert session.get.call_count == 2
