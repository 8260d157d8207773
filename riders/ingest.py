"""Name handling for rider rows coming out of the ranking feeds.

Ranking rows carry a single full name (usually "SURNAME Given"), sometimes
prefixed with ``*`` to flag a junior rider. Before a row is stored we split
it into first/last name fields, keeping the feed's casing; display casing is
applied later by ``riders.names``.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Mapping

try:
    from .config import get_fallback_label, get_trailing_given_tokens
    from .names import resolve_name_groups, tokenize
except ImportError:  # pragma: no cover
    from config import get_fallback_label, get_trailing_given_tokens
    from names import resolve_name_groups, tokenize

_JUNIOR_MARKER_RE = re.compile(r"^\*\s*")
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE_RE = re.compile(r"\s+")

# Keys tried in order for the rider's full name.
_FULL_NAME_KEYS = ("IndividualFullName", "FullName")


def strip_junior_marker(value: str | None) -> tuple[str | None, bool]:
    if not value:
        return None, False
    s = value.strip()
    if not s.startswith("*"):
        return s or None, False
    return _JUNIOR_MARKER_RE.sub("", s).strip() or None, True


def split_rider_name(
    raw: str | None,
    *,
    trailing_given_tokens: int | None = None,
) -> tuple[str | None, str | None]:
    """Split a feed name into ``(first_name, last_name)`` without recasing."""

    tokens = tokenize(raw)
    if not tokens:
        return None, None
    if trailing_given_tokens is None:
        trailing_given_tokens = get_trailing_given_tokens()

    groups = resolve_name_groups(tokens, trailing_given_tokens=trailing_given_tokens)
    first = " ".join(groups.given) or None
    last = " ".join(groups.family) or None
    return first, last


def rider_name_fields(
    row: Mapping[str, Any],
    *,
    trailing_given_tokens: int | None = None,
) -> dict[str, Any]:
    """Derive the stored name fields for one ranking row.

    Returns ``name``, ``first_name``, ``last_name`` and ``is_junior``.
    """

    full_name = None
    for key in _FULL_NAME_KEYS:
        if row.get(key):
            full_name = row[key]
            break
    full_name, full_junior = strip_junior_marker(full_name)
    display_name, display_junior = strip_junior_marker(row.get("DisplayName"))

    name = full_name or display_name
    if not name:
        uci_id = row.get("UciId")
        name = get_fallback_label() if uci_id is None else f"{get_fallback_label()} {uci_id}"
    first_name, last_name = split_rider_name(name, trailing_given_tokens=trailing_given_tokens)
    return {
        "name": name,
        "first_name": first_name,
        "last_name": last_name,
        "is_junior": full_junior or display_junior,
    }


def rider_slug(name: str | None) -> str:
    """Stable identifier derived from a rider name: "Loïc Bruni" -> "loic-bruni"."""

    if not name:
        return ""
    s = unicodedata.normalize("NFD", name.lower())
    s = "".join(c for c in s if not unicodedata.combining(c))
    s = _NON_WORD_RE.sub("", s)
    return _WHITESPACE_RE.sub("-", s.strip())
