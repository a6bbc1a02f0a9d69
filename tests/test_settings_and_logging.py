import json
import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from growtrack.shared.config.settings import Settings, get_settings
from growtrack.shared.utils.logging import (
    JSONFormatter,
    get_logger,
    log_context,
    log_function_call,
    request_id_var,
)

REQUIRED = {
    "SUPABASE_URL": "https://example.supabase.co",
    "SUPABASE_ANON_KEY": "anon",
    "SUPABASE_JWT_SECRET": "secret",
}


def test_test_environment_settings():
    settings = get_settings()

    assert settings.is_testing
    assert settings.ANALYTICS_REQUIRED_TIER == "premium"
    assert settings.ANALYTICS_READING_MATCH_STRATEGY == "first_match"


def test_settings_normalise_case():
    settings = Settings(
        **REQUIRED,
        ANALYTICS_REQUIRED_TIER="Enterprise",
        ANALYTICS_READING_MATCH_STRATEGY="LATEST_AT_OR_BEFORE",
        LOG_LEVEL="debug",
    )

    assert settings.ANALYTICS_REQUIRED_TIER == "enterprise"
    assert settings.ANALYTICS_READING_MATCH_STRATEGY == "latest_at_or_before"
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "field, value",
    [
        ("ANALYTICS_REQUIRED_TIER", "gold"),
        ("ANALYTICS_READING_MATCH_STRATEGY", "nearest"),
        ("JWT_ALGORITHM", "RS256"),
        ("LOG_FORMAT", "xml"),
    ],
)
def test_settings_reject_unknown_values(field, value):
    with pytest.raises(PydanticValidationError):
        Settings(**REQUIRED, **{field: value})


def test_cors_origins_list():
    settings = Settings(**REQUIRED, CORS_ORIGINS="http://a.test, https://b.test")

    assert settings.cors_origins_list == ["http://a.test", "https://b.test"]


def test_json_formatter_includes_context_and_extra_fields():
    formatter = JSONFormatter("%(message)s")
    record = logging.LogRecord("growtrack.test", logging.INFO, __file__, 1, "hello", None, None)
    record.extra_fields = {"grow_id": "g1"}

    with log_context(request_id="req-1", user_id="u1"):
        payload = json.loads(formatter.format(record))

    assert payload["message"] == "hello"
    assert payload["request_id"] == "req-1"
    assert payload["user_id"] == "u1"
    assert payload["service"] == "growtrack-api"
    assert payload["extra"] == {"grow_id": "g1"}


def test_log_context_resets():
    with log_context(request_id="req-2"):
        assert request_id_var.get() == "req-2"

    assert request_id_var.get() == ""


def test_structured_logger_passes_extra_fields(caplog):
    logger = get_logger("growtrack.test.structured")

    with caplog.at_level(logging.INFO, logger="growtrack.test.structured"):
        logger.info("computed", extra={"readings": 3}, strategy="first_match")

    assert caplog.records[-1].extra_fields == {"readings": 3, "strategy": "first_match"}


@pytest.mark.asyncio
async def test_log_function_call_reraises(caplog):
    @log_function_call("failing")
    async def failing():
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        with pytest.raises(RuntimeError):
            await failing()

    assert any("Function failing failed: boom" in r.getMessage() for r in caplog.records)
