"""Typed settings for the smart date engine.

Settings are plain Pydantic models so the parser, the suggestion engine and
the CLI can rely on validated values. Defaults reproduce the engine's
documented behaviour; a JSON file and ``SMARTDATE_*`` environment variables
may tune thresholds and preview formats.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from smartdate.errors import SettingsError, SettingsNotFoundError


DEFAULT_CONFIG_PATH = Path.home() / ".smartdate" / "config.json"

DATE_PREVIEW_FORMAT = "%b %d, %Y"
DATETIME_PREVIEW_FORMAT = "%b %d at %I:%M%p"


class EngineSettings(BaseModel):
    """Tunable thresholds for parsing and suggestion ranking."""

    model_config = ConfigDict(frozen=True)

    min_confidence: float = Field(0.3, ge=0.3, le=1.0, description="Parses scoring below this are dropped")
    natural_threshold: float = Field(
        0.5, ge=0.0, le=1.0, description="Input must parse above this to be echoed as a suggestion"
    )
    natural_boost: float = Field(0.2, ge=0.0, le=1.0, description="Bonus applied to the echoed input")
    empty_input_limit: int = Field(4, ge=1, description="Suggestions shown for empty input")
    contextual_limit: int = Field(8, ge=0, description="Cap on contextual (time/month/weekday) candidates")
    keyword_phrase_limit: int = Field(2, ge=0, description="Phrases taken from the matching keyword family")
    date_preview_format: str = Field(DATE_PREVIEW_FORMAT, description="strftime format for date previews")
    datetime_preview_format: str = Field(
        DATETIME_PREVIEW_FORMAT, description="strftime format for previews carrying a time"
    )

    @field_validator("date_preview_format", "datetime_preview_format")
    def _validate_format(cls, value: str) -> str:
        if "%" not in value:
            raise ValueError("preview format must contain at least one strftime directive")
        return value


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> EngineSettings:
    """Load settings from a JSON file or raise if missing/invalid."""

    if not path.exists():
        raise SettingsNotFoundError(f"Settings file not found at {path}", details={"path": str(path)})
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SettingsError(f"Settings file is not valid JSON: {exc}", details={"path": str(path)}) from exc
    try:
        return EngineSettings.model_validate(payload)
    except ValidationError as exc:
        raise SettingsError(f"Invalid configuration: {exc}", details={"path": str(path)}) from exc


def resolve_settings(
    path: Optional[Path] = None,
    *,
    overrides: Optional[Dict[str, Any]] = None,
) -> EngineSettings:
    """Effective settings: file (if given), then overrides, then environment."""

    base = load_settings(path) if path is not None else EngineSettings()
    merged = base.model_dump(mode="python")
    merged.update(overrides or {})
    merged = _apply_env_overrides(merged)
    try:
        return EngineSettings.model_validate(merged)
    except ValidationError as exc:
        raise SettingsError(f"Invalid configuration: {exc}") from exc


def save_settings(settings: EngineSettings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings as JSON."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.model_dump(mode="json"), indent=2), encoding="utf-8")


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    _set_env_override(data, "min_confidence", "SMARTDATE_MIN_CONFIDENCE", cast_float=True)
    _set_env_override(data, "date_preview_format", "SMARTDATE_DATE_FORMAT")
    _set_env_override(data, "datetime_preview_format", "SMARTDATE_DATETIME_FORMAT")
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_float: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_float:
        try:
            mapping[key] = float(raw)
        except ValueError as exc:
            raise SettingsError(f"{env_name} must be a number, got {raw!r}") from exc
    else:
        mapping[key] = raw
