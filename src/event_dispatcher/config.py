"""Configuration models for the event dispatcher."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

ENV_PREFIX = "EVENT_DISPATCHER_"


class DispatcherSettings(BaseModel):
    """Settings controlling how events are dispatched to listeners."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dispatch_mode: Literal["snapshot", "live"] = Field(
        default="snapshot",
        description=(
            "'snapshot' iterates a copy of the listener list taken when dispatch starts; "
            "'live' walks the list being dispatched, so listeners mutating it can skip "
            "or repeat entries."
        ),
    )
    log_dispatch: bool = Field(
        default=False,
        description="If True every dispatch is logged as a structured event at INFO level.",
    )


DEFAULT_SETTINGS = DispatcherSettings()


def build_settings_from_dict(raw: Mapping[str, Any]) -> DispatcherSettings:
    """Utility helper to build :class:`DispatcherSettings` from a plain mapping."""

    try:
        return DispatcherSettings.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid dispatcher settings: {exc}") from exc


def load_settings(path: Path) -> DispatcherSettings:
    """Load settings from a JSON file at ``path``."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Unable to read dispatcher settings from {path}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError("Settings file must contain a JSON object")
    return build_settings_from_dict(data)


def settings_from_env(environ: Mapping[str, str] | None = None) -> DispatcherSettings:
    """Build settings from ``EVENT_DISPATCHER_*`` environment variables.

    Unset variables keep their defaults. ``EVENT_DISPATCHER_LOG_DISPATCH``
    accepts the boolean spellings pydantic does (``1``/``0``, ``true``/``false``,
    ``yes``/``no``, ``on``/``off``).
    """

    env = os.environ if environ is None else environ
    raw: Dict[str, Any] = {}

    mode = env.get(f"{ENV_PREFIX}DISPATCH_MODE")
    if mode is not None:
        raw["dispatch_mode"] = mode.strip().lower()

    flag = env.get(f"{ENV_PREFIX}LOG_DISPATCH")
    if flag is not None:
        raw["log_dispatch"] = flag.strip().lower()

    return build_settings_from_dict(raw)


__all__ = [
    "DEFAULT_SETTINGS",
    "DispatcherSettings",
    "build_settings_from_dict",
    "load_settings",
    "settings_from_env",
]
