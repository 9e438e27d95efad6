"""Configuration for the smart date engine."""

from smartdate.configuration.settings import (
    DATE_PREVIEW_FORMAT,
    DATETIME_PREVIEW_FORMAT,
    DEFAULT_CONFIG_PATH,
    EngineSettings,
    load_settings,
    resolve_settings,
    save_settings,
)

__all__ = [
    "DATE_PREVIEW_FORMAT",
    "DATETIME_PREVIEW_FORMAT",
    "DEFAULT_CONFIG_PATH",
    "EngineSettings",
    "load_settings",
    "resolve_settings",
    "save_settings",
]
