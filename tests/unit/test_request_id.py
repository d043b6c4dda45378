"""Request id sanitization."""

import pytest

from access_control.middleware.request_id import (
    REQUEST_ID_MAX_LENGTH,
    sanitize_request_id,
)


def test_safe_value_is_kept() -> None:
    assert sanitize_request_id("  req_42-a ") == "req_42-a"


@pytest.mark.parametrize(
    "raw", [None, "", "has space", "semi;colon", "x" * (REQUEST_ID_MAX_LENGTH + 1)]
)
def test_unsafe_value_is_replaced(raw: str | None) -> None:
    generated = sanitize_request_id(raw)
    assert generated != raw
    assert len(generated) == 32
