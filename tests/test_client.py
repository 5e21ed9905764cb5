"""Tests for TransactionStatsClient with a mocked requests session."""

import pytest
import requests
from unittest.mock import MagicMock

from api.client_example import TransactionStatsClient


@pytest.fixture
def client(mock_response):
    c = TransactionStatsClient("http://stats.test:3000/")
    c.session = MagicMock()
    c.session.get.return_value = mock_response(json_data={"ok": True})
    return c


def test_strips_trailing_slash():
    assert TransactionStatsClient("http://stats.test/").api_url == "http://stats.test"


@pytest.mark.parametrize("method, path", [
    ("get_statistics", "/api/statistics"),
    ("get_bar_chart", "/api/bar-chart"),
    ("get_pie_chart", "/api/pie-chart"),
    ("get_combined_data", "/api/combined-data"),
])
def test_month_endpoints(client, method, path):
    assert getattr(client, method)("03") == {"ok": True}
    args, kwargs = client.session.get.call_args
    assert args[0] == f"http://stats.test:3000{path}"
    assert kwargs["params"] == {"month": "03"}


def test_health_check(client):
    client.health_check()
    args, _ = client.session.get.call_args
    assert args[0] == "http://stats.test:3000/"


def test_server_error_raises(client, mock_response):
    resp = mock_response(status_code=500, json_data={"error": "Internal Server Error"})
    resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    client.session.get.return_value = resp
    with pytest.raises(requests.HTTPError):
        client.get_statistics("03")
