from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def rider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep tests independent of the caller's environment.
    monkeypatch.delenv("RIDER_FALLBACK_LABEL", raising=False)
    monkeypatch.delenv("RIDER_NAME_TRAILING_GIVEN_TOKENS", raising=False)


@pytest.fixture()
def ranking_row() -> dict[str, object]:
    return {
        "ObjectId": 981234,
        "Rank": 3,
        "UciId": 10009876543,
        "IndividualFullName": "VAN DER POEL Mathieu",
        "DisplayName": "M. VAN DER POEL",
        "TeamName": "Alpecin - Deceuninck",
        "Points": 2150,
        "CountryIsoCode2": "NL",
    }
