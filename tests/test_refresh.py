"""
Tests for data_pipeline/refresh.py and data_pipeline/scheduler.py

HTTP calls are mocked; no API server is needed.
"""
import pytest
import requests
from unittest.mock import patch, MagicMock

import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from data_pipeline.refresh import trigger_refresh
from data_pipeline.scheduler import run_refresh_job


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _response(body=None, status_error=None):
    response = MagicMock()
    response.json.return_value = body or {
        "success": True,
        "message": "Analytics data refreshed",
        "timestamp": "2026-03-02T06:00:00+00:00",
        "displayDate": "AL 1 DE MARZO",
        "grandTotal": 295000,
    }
    if status_error:
        response.raise_for_status.side_effect = status_error
    return response


# ---------------------------------------------------------------------------
# trigger_refresh
# ---------------------------------------------------------------------------

class TestTriggerRefresh:
    def test_calls_cron_endpoint(self, monkeypatch):
        monkeypatch.delenv("CRON_SECRET", raising=False)
        with patch("data_pipeline.refresh.requests.get", return_value=_response()) as mock_get:
            body = trigger_refresh()
        url = mock_get.call_args.args[0]
        assert url.endswith("/api/cron")
        assert mock_get.call_args.kwargs["headers"] == {}
        assert body["displayDate"] == "AL 1 DE MARZO"

    def test_sends_bearer_secret(self, monkeypatch):
        monkeypatch.setenv("CRON_SECRET", "s3cret")
        with patch("data_pipeline.refresh.requests.get", return_value=_response()) as mock_get:
            trigger_refresh()
        assert mock_get.call_args.kwargs["headers"] == {"Authorization": "Bearer s3cret"}

    def test_http_error_propagates(self):
        error = requests.HTTPError("401 Client Error")
        with patch("data_pipeline.refresh.requests.get", return_value=_response(status_error=error)):
            with pytest.raises(requests.HTTPError):
                trigger_refresh()


# ---------------------------------------------------------------------------
# run_refresh_job
# ---------------------------------------------------------------------------

class TestRunRefreshJob:
    def test_reports_success(self):
        with patch("data_pipeline.scheduler.trigger_refresh") as mock_refresh:
            assert run_refresh_job() is True
        mock_refresh.assert_called_once()

    def test_failure_is_logged_not_raised(self, caplog):
        with patch("data_pipeline.scheduler.trigger_refresh",
                   side_effect=requests.ConnectionError("connection refused")):
            assert run_refresh_job() is False
        assert "Refresh failed" in caplog.text

    def test_uses_package_refresh_module(self):
        with patch("data_pipeline.refresh.requests.get", return_value=_response()) as mock_get:
            assert run_refresh_job() is True
        mock_get.assert_called_once()
