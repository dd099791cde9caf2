"""A single published rate observation."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..data.dates import to_calendar_date


class Observation(BaseModel):
    """Rate in effect from ``effective_date`` onwards (percent per annum)."""

    model_config = ConfigDict(frozen=True)

    effective_date: date
    rate: float = Field(ge=0.0)

    @field_validator("effective_date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        # Datetimes are reduced to their UK calendar date
        if isinstance(value, datetime):
            return to_calendar_date(value)
        return value

    def as_tuple(self) -> tuple[date, float]:
        return self.effective_date, self.rate
