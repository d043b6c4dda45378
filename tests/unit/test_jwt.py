"""Bearer token issue/verify helpers."""

from datetime import timedelta

import pytest

from access_control.infrastructure.security.jwt import issue_token, token_subject, verify_token


def test_issued_token_names_the_user() -> None:
    claims = verify_token(issue_token("u1", scope="roles"))
    assert claims["sub"] == "u1"
    assert claims["scope"] == "roles"
    assert "exp" in claims
    assert token_subject(issue_token("u1")) == "u1"


def test_subject_claim_cannot_be_overridden_by_extra_claims() -> None:
    assert token_subject(issue_token("u1", sub="someone-else")) == "u1"


def test_expired_token_is_rejected() -> None:
    token = issue_token("u1", ttl=timedelta(seconds=-5))
    with pytest.raises(ValueError):
        verify_token(token)


def test_token_with_empty_subject_is_rejected() -> None:
    with pytest.raises(ValueError):
        token_subject(issue_token(""))


def test_garbage_is_rejected() -> None:
    with pytest.raises(ValueError):
        verify_token("not-a-jwt")
