"""Domain models (Pydantic v2).

These models describe *what* a food truck permit is, not *how* it is fetched.
Field names follow the SF Mobile Food Schedule dataset as-is.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RawTruckRecord(BaseModel):
    """One row of the food truck schedule dataset.

    A record is a permit *for one day of the week*: the same truck appears
    once per day it operates.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    applicant: str = Field(
        ...,
        description="Business name of the food truck.",
    )
    location: str = Field(
        ...,
        description="Free-text address/description where the truck parks.",
    )
    starttime: str = Field(
        ...,
        description="Opening hour token, e.g. '9AM'.",
    )
    endtime: str = Field(
        ...,
        description="Closing hour token, e.g. '10PM'.",
    )
    dayorder: int = Field(
        ...,
        ge=0,
        le=6,
        description="Day of week the hours apply to (0 = Sunday).",
    )
    dayofweekstr: str | None = Field(
        default=None,
        description="Day name as published by the dataset (shown in debug logging).",
    )


class DisplayRow(BaseModel):
    """Projection of a `RawTruckRecord` down to what is printed."""

    model_config = ConfigDict(frozen=True)

    applicant: str
    location: str
