from __future__ import annotations

import logging
from typing import Any, Mapping

try:
    from .config import get_fallback_label
    from .models import NameRecord
    from .names import MissingNameError, normalize_rider_display_name
except ImportError:  # pragma: no cover
    # Support running with CWD=riders.
    from config import get_fallback_label
    from models import NameRecord
    from names import MissingNameError, normalize_rider_display_name

log = logging.getLogger(__name__)


def display_name_or_fallback(
    record: NameRecord | Mapping[str, Any],
    *,
    fallback: str | None = None,
) -> str:
    try:
        return normalize_rider_display_name(record)
    except MissingNameError:
        label = fallback or get_fallback_label()
        log.warning("rider record without usable name, showing %r", label)
        return label


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        s = value.strip()
        return s if s else None
    return value


def rider_to_public(rider: Mapping[str, Any]) -> dict[str, Any]:
    """Shape a rider row for rosters, leaderboards and exports.

    ``rider`` uses the riders table / feed keys: ``id``, ``uciId``, ``name``,
    ``firstName``, ``lastName``, ``team``, ``country``, ``gender``.
    """

    return {
        "id": rider.get("id"),
        "uci_id": _blank_to_none(rider.get("uciId")),
        "name": _blank_to_none(rider.get("name")),
        "display_name": display_name_or_fallback(rider),
        "team": _blank_to_none(rider.get("team")),
        "country": _blank_to_none(rider.get("country")),
        "gender": _blank_to_none(rider.get("gender")),
    }
