"""Tests for app.py and utils/decorators.py."""

# pylint: disable=missing-function-docstring

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from leak_checker.app import app
from leak_checker.core.config import Settings
from leak_checker.utils.decorators import init_sentry, sentry_exception_catcher
from leak_checker.utils.exceptions import capture_exception, scrub_context


class TestApplication:
    """Tests for the assembled application."""

    def test_routes_registered(self):
        paths = {route.path for route in app.routes}

        assert {"/", "/api/lookup", "/healthcheck"} <= paths

    def test_lifespan_warns_about_missing_key(self, monkeypatch, caplog):
        monkeypatch.delenv("HIBP_API_KEY", raising=False)

        with caplog.at_level("INFO"):
            with TestClient(app) as client:
                response = client.get("/healthcheck")

        assert response.status_code == 200
        assert "Leak Checker starting..." in caplog.text
        assert "HIBP_API_KEY is not set" in caplog.text


class TestSentry:
    """Tests for Sentry helpers."""

    def test_init_sentry_disabled_without_dsn(self):
        with patch(
            "leak_checker.utils.decorators.get_settings",
            return_value=Settings(sentry_dsn=None, _env_file=None),
        ):
            assert init_sentry() is False

    def test_init_sentry_enabled_with_dsn(self):
        settings = Settings(sentry_dsn="https://key@sentry.test/1", _env_file=None)

        with (
            patch("leak_checker.utils.decorators.get_settings", return_value=settings),
            patch("leak_checker.utils.decorators.sentry_sdk.init") as mock_init,
        ):
            assert init_sentry() is True

        kwargs = mock_init.call_args.kwargs
        assert kwargs["dsn"] == "https://key@sentry.test/1"
        assert kwargs["send_default_pii"] is False

    async def test_catcher_reraises_async(self):
        @sentry_exception_catcher
        async def failing():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await failing()

    def test_catcher_reports_route_name(self):
        @sentry_exception_catcher
        def failing():
            raise ValueError("bad")

        with patch("leak_checker.utils.decorators.capture_exception") as mock_capture:
            with pytest.raises(ValueError):
                failing()

        error, context = mock_capture.call_args.args
        assert isinstance(error, ValueError)
        assert context == {"route": "failing"}

    async def test_catcher_reports_async_route_name(self):
        @sentry_exception_catcher
        async def submit():
            raise RuntimeError("boom")

        with patch("leak_checker.utils.decorators.capture_exception") as mock_capture:
            with pytest.raises(RuntimeError):
                await submit()

        assert mock_capture.call_args.args[1] == {"route": "submit"}


class TestCaptureException:
    """Tests for capture_exception and context scrubbing."""

    def test_logs_locally(self, caplog):
        with caplog.at_level("WARNING"):
            capture_exception(RuntimeError("logged"), level="warning")

        assert "RuntimeError: logged" in caplog.text

    def test_log_omits_email(self, caplog):
        with caplog.at_level("ERROR"):
            capture_exception(
                RuntimeError("x"), {"operation": "breach_lookup", "email": "a@example.com"}
            )

        assert "breach_lookup" in caplog.text
        assert "a@example.com" not in caplog.text

    def test_scrub_context(self):
        context = {"Email": "a@example.com", "api_key": "k", "status": 200}

        assert scrub_context(context) == {"status": 200}
        assert scrub_context(None) == {}

    def test_not_sent_without_dsn(self):
        with (
            patch(
                "leak_checker.utils.exceptions.get_settings",
                return_value=Settings(sentry_dsn=None, _env_file=None),
            ),
            patch("leak_checker.utils.exceptions.sentry_sdk.capture_exception") as mock_capture,
        ):
            capture_exception(RuntimeError("x"))

        mock_capture.assert_not_called()

    def test_sent_with_tags_when_configured(self):
        settings = Settings(sentry_dsn="https://key@sentry.test/1", _env_file=None)
        error = RuntimeError("x")

        with (
            patch("leak_checker.utils.exceptions.get_settings", return_value=settings),
            patch("leak_checker.utils.exceptions.sentry_sdk.new_scope") as mock_scope,
            patch("leak_checker.utils.exceptions.sentry_sdk.capture_exception") as mock_capture,
        ):
            capture_exception(
                error, {"operation": "classify", "status": 500, "email": "a@example.com"}
            )

        scope = mock_scope.return_value.__enter__.return_value
        scope.set_tag.assert_called_once_with("operation", "classify")
        scope.set_context.assert_called_once_with(
            "lookup", {"operation": "classify", "status": 500}
        )
        mock_capture.assert_called_once_with(error)
