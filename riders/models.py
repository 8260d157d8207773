from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NameRecord(BaseModel):
    """Name data for one rider as it arrives from a feed or the riders table.

    Accepts the feed keys (``name``, ``firstName``, ``lastName``) as well as
    the field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    raw_name: Optional[str] = Field(default=None, alias="name")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
