from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from tzseries.utils.time import coerce_instant, load_zone

DEFAULT_TIMEZONE = "Asia/Shanghai"
DEFAULT_RANGE_DAYS = 30
MAX_RANGE_DAYS = 365


class DateRangeConfig(BaseModel):
    """Requested date window; either bound may be omitted."""

    model_config = ConfigDict(frozen=True)

    start_date: Optional[datetime] = Field(
        default=None, description="Inclusive start instant (naive values are UTC)."
    )
    end_date: Optional[datetime] = Field(
        default=None, description="Inclusive end instant (naive values are UTC)."
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE, description="IANA timezone used for day bucketing."
    )
    default_range_days: int = Field(
        default=DEFAULT_RANGE_DAYS,
        ge=0,
        description="Window length used to fill a missing bound.",
    )

    @classmethod
    def from_query(
        cls,
        *,
        start_date: object = None,
        end_date: object = None,
        timezone: Optional[str] = None,
        default_range_days: int = DEFAULT_RANGE_DAYS,
    ) -> "DateRangeConfig":
        """Build a config from raw request values.

        Malformed bounds raise InvalidDateError naming the bound instead of a
        pydantic ValidationError.
        """
        return cls(
            start_date=None if start_date is None else coerce_instant(start_date, "start"),
            end_date=None if end_date is None else coerce_instant(end_date, "end"),
            timezone=timezone,
            default_range_days=default_range_days,
        )

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _to_utc(cls, value: object, info: ValidationInfo) -> Optional[datetime]:
        if value is None:
            return None
        return coerce_instant(value, info.field_name.removesuffix("_date"))

    @field_validator("timezone", mode="before")
    @classmethod
    def _normalize_timezone(cls, value: object) -> str:
        if value is None:
            return DEFAULT_TIMEZONE
        text = str(value).strip()
        if not text:
            return DEFAULT_TIMEZONE
        load_zone(text)
        return text
