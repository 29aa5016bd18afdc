"""Tests for core/lookup.py."""

# pylint: disable=missing-function-docstring,redefined-outer-name

import json

import pytest

from leak_checker.core.client import BreachLookupClient
from leak_checker.core.lookup import (
    LookupService,
    get_lookup_service,
    reset_lookup_service,
    set_lookup_service,
)
from leak_checker.core.outcomes import (
    ApiError,
    ApiErrorKind,
    BreachRecord,
    Breaches,
    NoBreaches,
    ValidationError,
)
from leak_checker.utils.exceptions import TransportError


@pytest.fixture
def service(test_settings, fake_client):
    return LookupService(settings=test_settings, client=fake_client)


class TestLookupScenarios:
    """End-to-end outcomes of a single lookup."""

    async def test_invalid_email(self, service, fake_client):
        outcome = await service.lookup("not-an-email")

        assert outcome == ValidationError("Please enter a valid email address.")
        assert fake_client.calls == []

    async def test_missing_api_key(self, keyless_settings, fake_client):
        service = LookupService(settings=keyless_settings, client=fake_client)

        outcome = await service.lookup("user@example.com")

        assert isinstance(outcome, ApiError)
        assert outcome.kind == ApiErrorKind.CONFIG_ERROR
        assert outcome.message.startswith("Missing API key")
        assert fake_client.calls == []

    async def test_validation_runs_before_key_check(self, keyless_settings):
        service = LookupService(settings=keyless_settings)

        outcome = await service.lookup("nope")

        assert isinstance(outcome, ValidationError)

    async def test_not_found_is_no_breaches(self, service, fake_client):
        fake_client.status = 404

        assert await service.lookup("user@example.com") == NoBreaches()

    async def test_breaches_found(self, service, fake_client):
        fake_client.status = 200
        fake_client.body = json.dumps([{"Name": "Adobe", "PwnCount": 152445165}])

        outcome = await service.lookup("user@example.com")

        assert outcome == Breaches((BreachRecord(name="Adobe", pwn_count=152445165),))
        record = outcome.records[0]
        assert record.title == ""
        assert record.data_classes == ()
        assert record.is_verified is False

    async def test_rate_limited(self, service, fake_client):
        fake_client.status = 429

        outcome = await service.lookup("user@example.com")

        assert outcome == ApiError(
            ApiErrorKind.RATE_LIMITED, "Rate limit exceeded. Try again in a moment."
        )
        assert len(fake_client.calls) == 1

    async def test_timeout_is_network_error(self, service, fake_client):
        fake_client.error = TransportError("Request timed out after 15 seconds")

        outcome = await service.lookup("user@example.com")

        assert outcome == ApiError(
            ApiErrorKind.NETWORK_ERROR,
            "Network error: Request timed out after 15 seconds",
        )


class TestLookupBoundary:
    """Failures never escape the lookup boundary."""

    async def test_trimmed_email_is_sent(self, service, fake_client):
        await service.lookup("  user@example.com  ")

        assert fake_client.calls == ["user@example.com"]

    async def test_unexpected_client_exception(self, service, fake_client):
        fake_client.error = RuntimeError("boom")

        outcome = await service.lookup("user@example.com")

        assert isinstance(outcome, ApiError)
        assert outcome.kind == ApiErrorKind.UNEXPECTED_STATUS

    async def test_none_input(self, service):
        assert isinstance(await service.lookup(None), ValidationError)

    async def test_logs_outcome_without_email(self, service, caplog):
        with caplog.at_level("INFO"):
            await service.lookup("secret.person@example.com")

        assert "Lookup finished: NoBreaches" in caplog.text
        assert "secret.person@example.com" not in caplog.text

    async def test_logs_error_kind(self, service, fake_client, caplog):
        fake_client.status = 503

        with caplog.at_level("INFO"):
            await service.lookup("user@example.com")

        assert "ApiError:ServiceUnavailable" in caplog.text


class TestServiceConstruction:
    """Tests for default client wiring."""

    def test_builds_client_from_settings(self, test_settings):
        service = LookupService(settings=test_settings)

        assert isinstance(service.client, BreachLookupClient)
        assert service.client.api_key == "test-api-key"

    def test_no_client_without_key(self, keyless_settings):
        service = LookupService(settings=keyless_settings)

        assert service.client is None


class TestModuleFunctions:
    """Tests for the default service accessors."""

    @pytest.fixture(autouse=True)
    def reset_service(self):
        reset_lookup_service()
        yield
        reset_lookup_service()

    def test_get_returns_same_instance(self, monkeypatch):
        monkeypatch.delenv("HIBP_API_KEY", raising=False)

        assert get_lookup_service() is get_lookup_service()

    def test_inject_custom_service(self, service):
        set_lookup_service(service)

        assert get_lookup_service() is service
