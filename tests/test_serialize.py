from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from riders.serialize import display_name_or_fallback, rider_to_public


def test_display_name_normalized() -> None:
    assert display_name_or_fallback({"name": "O'CONNOR Liam"}) == "Liam O'Connor"


def test_missing_name_uses_default_label(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="riders.serialize"):
        assert display_name_or_fallback({"name": ""}) == "Unknown Rider"
    assert "without usable name" in caplog.text


def test_missing_name_explicit_fallback() -> None:
    assert display_name_or_fallback({}, fallback="TBD") == "TBD"


@patch.dict("os.environ", {"RIDER_FALLBACK_LABEL": "Coureur inconnu"})
def test_missing_name_label_from_environment() -> None:
    assert display_name_or_fallback({"name": "  "}) == "Coureur inconnu"


def test_rider_to_public() -> None:
    rider = {
        "id": 12,
        "uciId": "10009876543",
        "name": "VAN DER POEL Mathieu",
        "firstName": None,
        "lastName": None,
        "team": "Alpecin - Deceuninck",
        "country": "NL",
        "gender": "male",
        "cost": 250000,
    }
    assert rider_to_public(rider) == {
        "id": 12,
        "uci_id": "10009876543",
        "name": "VAN DER POEL Mathieu",
        "display_name": "Mathieu Van Der Poel",
        "team": "Alpecin - Deceuninck",
        "country": "NL",
        "gender": "male",
    }


def test_rider_to_public_blank_fields() -> None:
    out = rider_to_public({"id": 3, "name": " ", "team": "", "gender": "female"})
    assert out == {
        "id": 3,
        "uci_id": None,
        "name": None,
        "display_name": "Unknown Rider",
        "team": None,
        "country": None,
        "gender": "female",
    }
