import pytest

from conftest import PREMIUM_USER, make_token

from growtrack.shared.core.exceptions import AuthenticationError
from growtrack.shared.core.security import SecurityManager, get_security_manager, verify_token


def test_valid_token_yields_user():
    token_data = verify_token(make_token(PREMIUM_USER))

    assert token_data.user_id == PREMIUM_USER
    assert token_data.email == f"{PREMIUM_USER}@example.com"
    assert token_data.role == "authenticated"
    assert token_data.expires_at is not None


def test_expired_token_is_rejected():
    with pytest.raises(AuthenticationError) as exc_info:
        verify_token(make_token(expires_in=-60))

    assert exc_info.value.message == "Token expired"
    assert exc_info.value.status_code == 401


def test_wrong_signature_is_rejected():
    with pytest.raises(AuthenticationError):
        verify_token(make_token(secret="not-the-project-secret"))


def test_wrong_audience_is_rejected():
    with pytest.raises(AuthenticationError):
        verify_token(make_token(audience="anon"))


def test_token_without_subject_is_rejected():
    with pytest.raises(AuthenticationError):
        verify_token(make_token(user_id=None))


def test_garbage_token_is_rejected():
    with pytest.raises(AuthenticationError):
        get_security_manager().verify_token("not-a-jwt")


def test_explicit_secret_overrides_settings():
    manager = SecurityManager(secret_key="custom-secret")

    assert manager.verify_token(make_token(secret="custom-secret")).user_id == PREMIUM_USER
