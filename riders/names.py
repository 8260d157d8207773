"""Rider display-name normalization.

Feeds deliver rider names as "SURNAME Given", "Given Surname", fully
upper-cased strings, or with separate first/last fields of varying quality.
Everything that shows a rider goes through ``normalize_rider_display_name``
to get a single "Given Family" form.

Stages:
- field resolution (explicit fields vs. parsing the raw name)
- tokenization on whitespace
- case classification (upper tokens and the leading upper run)
- group resolution and capitalization
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, NamedTuple, Union

from pydantic import ValidationError

try:
    from .config import get_trailing_given_tokens
    from .models import NameRecord
except ImportError:  # pragma: no cover
    # Support running with CWD=riders.
    from config import get_trailing_given_tokens
    from models import NameRecord

log = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

# Characters after which the next letter starts a new capitalized part.
_APOSTROPHES = {"'", "’"}
_PART_SEPARATORS = _APOSTROPHES | {"-"}

_DISPLAY_CACHE_SIZE = 4096


class MissingNameError(ValueError):
    """Raised when a record carries no usable name data at all."""


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExplicitFields:
    given: str
    family: str


@dataclass(frozen=True)
class ParsedFromRaw:
    raw: str


FieldSource = Union[ExplicitFields, ParsedFromRaw]


def resolve_field_source(
    *,
    raw_name: str | None,
    first_name: str | None,
    last_name: str | None,
) -> FieldSource:
    """Pick where the name groups come from.

    Explicit fields are only used when both are non-blank; otherwise the raw
    name is parsed.
    """

    given = (first_name or "").strip()
    family = (last_name or "").strip()
    if given and family:
        return ExplicitFields(given=given, family=family)

    raw = (raw_name or "").strip()
    if not raw:
        raise MissingNameError("rider record has no name, firstName or lastName")
    return ParsedFromRaw(raw=raw)


# ---------------------------------------------------------------------------
# Tokenization and case classification
# ---------------------------------------------------------------------------


def tokenize(value: str | None) -> list[str]:
    if not value:
        return []
    return [t for t in _WHITESPACE_RE.split(value) if t]


def is_upper_token(token: str) -> bool:
    letters = [c for c in token if c.isalpha()]
    return bool(letters) and all(c.isupper() for c in letters)


def leading_upper_run(tokens: list[str]) -> int:
    """Length of the prefix of ``tokens`` made of upper tokens only."""
    count = 0
    for tok in tokens:
        if not is_upper_token(tok):
            break
        count += 1
    return count


# ---------------------------------------------------------------------------
# Group resolution
# ---------------------------------------------------------------------------


class NameGroups(NamedTuple):
    given: tuple[str, ...]
    family: tuple[str, ...]


def resolve_name_groups(tokens: list[str], *, trailing_given_tokens: int = 1) -> NameGroups:
    """Split raw tokens into given and family groups.

    - One token: given name only.
    - "VAN DER POEL Mathieu": the leading upper run is the family name.
    - "SMITH JOHN": nothing to anchor on; the last ``trailing_given_tokens``
      tokens are the given name (the family group keeps at least one token).
    - "Loana lecomte": already natural, first token is the given name.
    """

    if trailing_given_tokens < 1:
        raise ValueError("trailing_given_tokens must be at least 1")
    if not tokens:
        return NameGroups(given=(), family=())
    if len(tokens) == 1:
        return NameGroups(given=(tokens[0],), family=())

    run = leading_upper_run(tokens)
    if 0 < run < len(tokens):
        return NameGroups(given=tuple(tokens[run:]), family=tuple(tokens[:run]))

    if run == len(tokens):
        split_at = len(tokens) - min(trailing_given_tokens, len(tokens) - 1)
        log.debug(
            "all-uppercase rider name %r, taking %d trailing token(s) as given name",
            " ".join(tokens),
            len(tokens) - split_at,
        )
        return NameGroups(given=tuple(tokens[split_at:]), family=tuple(tokens[:split_at]))

    return NameGroups(given=(tokens[0],), family=tuple(tokens[1:]))


# ---------------------------------------------------------------------------
# Capitalization
# ---------------------------------------------------------------------------


def _is_contraction_tail(word: str, idx: int) -> bool:
    # "van't": a lone letter closing the word after an apostrophe.
    if idx == 0 or word[idx - 1] not in _APOSTROPHES:
        return False
    if not any(c.isalpha() for c in word[: idx - 1]):
        return False
    return not any(c.isalpha() for c in word[idx + 1 :])


def capitalize_name_word(word: str) -> str:
    """Title-case one name word: "O'CONNOR" -> "O'Connor", "anne-marie" -> "Anne-Marie"."""

    lowered = word.lower()
    out: list[str] = []
    cap_next = True
    for idx, ch in enumerate(lowered):
        if ch.isalpha():
            if cap_next and not _is_contraction_tail(lowered, idx):
                ch = ch.upper()
            cap_next = False
        elif ch in _PART_SEPARATORS:
            cap_next = True
        out.append(ch)
    return "".join(out)


def format_display_name(groups: NameGroups) -> str:
    given = " ".join(capitalize_name_word(w) for w in groups.given)
    family = " ".join(capitalize_name_word(w) for w in groups.family)
    if not family:
        return given
    return f"{given} {family}"


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def name_groups_for(source: FieldSource, *, trailing_given_tokens: int = 1) -> NameGroups:
    if isinstance(source, ExplicitFields):
        return NameGroups(given=tuple(tokenize(source.given)), family=tuple(tokenize(source.family)))
    return resolve_name_groups(tokenize(source.raw), trailing_given_tokens=trailing_given_tokens)


@lru_cache(maxsize=_DISPLAY_CACHE_SIZE)
def _display_name(
    raw_name: str | None,
    first_name: str | None,
    last_name: str | None,
    trailing_given_tokens: int,
) -> str:
    source = resolve_field_source(raw_name=raw_name, first_name=first_name, last_name=last_name)
    return format_display_name(name_groups_for(source, trailing_given_tokens=trailing_given_tokens))


def normalize_rider_display_name(
    record: NameRecord | Mapping[str, Any],
    *,
    trailing_given_tokens: int | None = None,
) -> str:
    """Return the "Given Family" display form of a rider name record.

    ``record`` is a ``NameRecord`` or a feed mapping with ``name``,
    ``firstName`` and ``lastName`` keys. Raises ``MissingNameError`` when
    there is nothing to build a name from.
    """

    if not isinstance(record, NameRecord):
        try:
            record = NameRecord.model_validate(record)
        except ValidationError:
            log.debug("invalid rider name record: %r", record)
            raise

    if trailing_given_tokens is None:
        trailing_given_tokens = get_trailing_given_tokens()
    if trailing_given_tokens < 1:
        raise ValueError("trailing_given_tokens must be at least 1")

    return _display_name(
        record.raw_name,
        record.first_name,
        record.last_name,
        trailing_given_tokens,
    )
