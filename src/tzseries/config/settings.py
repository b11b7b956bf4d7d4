from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from tzseries.config.range import (
    DEFAULT_RANGE_DAYS,
    DEFAULT_TIMEZONE,
    MAX_RANGE_DAYS,
    DateRangeConfig,
)
from tzseries.domain.series import TimeSeriesPoint
from tzseries.pipeline import process_time_series
from tzseries.transforms.aggregate import Extractor
from tzseries.utils.time import load_zone

SETTINGS_FILENAME = "tzseries.yaml"


class SeriesSettings(BaseModel):
    """Defaults injected into range normalization and validation."""

    timezone: str = Field(default=DEFAULT_TIMEZONE, description="IANA timezone")
    default_range_days: int = Field(default=DEFAULT_RANGE_DAYS, ge=0)
    max_range_days: int = Field(default=MAX_RANGE_DAYS, ge=1)

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

    @model_validator(mode="after")
    def _check_windows(self):
        if self.default_range_days > self.max_range_days:
            raise ValueError("default_range_days cannot exceed max_range_days")
        return self

    def range_config(
        self,
        start_date: object = None,
        end_date: object = None,
    ) -> DateRangeConfig:
        return DateRangeConfig.from_query(
            start_date=start_date,
            end_date=end_date,
            timezone=self.timezone,
            default_range_days=self.default_range_days,
        )

    def process(
        self,
        records: Iterable[Any],
        extract: Extractor,
        start_date: object = None,
        end_date: object = None,
        *,
        time_field: str = "created_at",
        now: Optional[datetime] = None,
    ) -> list[TimeSeriesPoint]:
        """Build a daily series using these settings for window, limit and timezone."""
        return process_time_series(
            records,
            self.range_config(start_date, end_date),
            extract,
            max_range_days=self.max_range_days,
            time_field=time_field,
            now=now,
        )


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def find_settings_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    directory = (start_dir or Path.cwd()).resolve()
    for path in [directory, *directory.parents]:
        candidate = path / SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_settings(start_dir: Optional[Path] = None) -> SeriesSettings:
    """Search from start_dir upward for tzseries.yaml and return parsed settings.

    Missing file means defaults. The file may hold the fields at the top level
    or under a ``series`` block; null values fall back to defaults.
    """
    path = find_settings_file(start_dir)
    if path is None:
        return SeriesSettings()
    data = _read_yaml(path)
    if data is None:
        return SeriesSettings()
    if not isinstance(data, dict):
        raise TypeError(f"{SETTINGS_FILENAME} must define a mapping at the top level")
    block = data.get("series", data)
    if block is None:
        return SeriesSettings()
    if not isinstance(block, dict):
        raise TypeError("series block must be a mapping")
    values = {k: v for k, v in block.items() if v is not None}
    return SeriesSettings.model_validate(values)
