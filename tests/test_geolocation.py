"""Tests for the geolocation client."""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from sysview.data import geolocation
from sysview.data.geolocation import GeolocationClient
from sysview.models import GeoResult

PAYLOAD = {
    "ip": "203.0.113.7",
    "city": "Sofia",
    "region": "Sofia-Capital",
    "country": "BG",
    "loc": "42.6977,23.3219",
}


def _session(payload=None, status_error=None, get_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session = MagicMock()
    if get_error is not None:
        session.get.side_effect = get_error
    else:
        session.get.return_value = response
    return session


def test_successful_lookup():
    """Test fields are composed into location and coordinates."""
    client = GeolocationClient(session=_session(PAYLOAD))
    assert client.fetch() == GeoResult(location="Sofia, Sofia-Capital, BG", coordinates="42.6977,23.3219")


def test_request_uses_endpoint_and_timeout():
    """Test a single bounded GET to the configured endpoint."""
    session = _session(PAYLOAD)
    GeolocationClient(endpoint="https://geo.example/json", timeout=1.5, session=session).fetch()
    session.get.assert_called_once()
    args, kwargs = session.get.call_args
    assert args == ("https://geo.example/json",)
    assert kwargs["timeout"] == 1.5


@pytest.mark.parametrize(
    "session_kwargs",
    [
        {"get_error": requests.ConnectionError("unreachable")},
        {"get_error": requests.Timeout("slow")},
        {"payload": PAYLOAD, "status_error": requests.HTTPError("503 Server Error")},
        {"json_error": ValueError("Expecting value")},
        {"payload": ["not", "an", "object"]},
        {"payload": {"city": "Sofia", "region": "Sofia-Capital"}},
        {"payload": {**PAYLOAD, "loc": None}},
    ],
    ids=["connection", "timeout", "http-error", "bad-json", "not-object", "missing-fields", "null-field"],
)
def test_failures_fall_back_to_sentinel(session_kwargs, caplog):
    """Test every failure mode yields the sentinel and a warning."""
    client = GeolocationClient(session=_session(**session_kwargs))
    with caplog.at_level(logging.WARNING, logger="sysview.data.geolocation"):
        result = client.fetch()
    assert result == GeoResult.unavailable()
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_empty_strings_are_accepted():
    """Test blank but present fields still count as a result."""
    client = GeolocationClient(session=_session({**PAYLOAD, "region": ""}))
    assert client.fetch().location == "Sofia, , BG"


def test_close_closes_session():
    """Test close releases an injected session."""
    session = _session(PAYLOAD)
    GeolocationClient(session=session).close()
    session.close.assert_called_once()


def test_fetch_geolocation_uses_requests(monkeypatch):
    """Test the module-level helper goes through requests.get."""
    fake_get = _session(PAYLOAD).get
    monkeypatch.setattr(geolocation.requests, "get", fake_get)
    assert geolocation.fetch_geolocation().coordinates == "42.6977,23.3219"
    assert fake_get.call_args.kwargs["timeout"] == 5.0
