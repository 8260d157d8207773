from __future__ import annotations

import os

_FALLBACK_LABEL_ENV = "RIDER_FALLBACK_LABEL"
_TRAILING_GIVEN_TOKENS_ENV = "RIDER_NAME_TRAILING_GIVEN_TOKENS"

DEFAULT_FALLBACK_LABEL = "Unknown Rider"
DEFAULT_TRAILING_GIVEN_TOKENS = 1


def get_fallback_label() -> str:
    """Label shown for riders without any usable name data."""
    label = os.environ.get(_FALLBACK_LABEL_ENV, "").strip()
    return label or DEFAULT_FALLBACK_LABEL


def get_trailing_given_tokens() -> int:
    """How many trailing tokens of an all-uppercase name are the given name."""
    raw = os.environ.get(_TRAILING_GIVEN_TOKENS_ENV, "").strip()
    if not raw:
        return DEFAULT_TRAILING_GIVEN_TOKENS
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{_TRAILING_GIVEN_TOKENS_ENV} must be an integer, got {raw!r}") from None
    if value < 1:
        raise RuntimeError(f"{_TRAILING_GIVEN_TOKENS_ENV} must be at least 1, got {value}")
    return value
