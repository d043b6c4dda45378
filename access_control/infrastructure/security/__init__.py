"""Security helpers: bearer token issue and verification."""

from access_control.infrastructure.security.jwt import issue_token, token_subject, verify_token

__all__ = ["issue_token", "token_subject", "verify_token"]
