"""Engine settings.

Values come from, in increasing priority: field defaults, ``HOUSE_CUP_*``
environment variables, an optional TOML file, and explicit overrides.
Nested fields use ``__`` in env names, e.g.
``HOUSE_CUP_SCORING__STRICT_PLACEMENTS=true``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings

from house_cup.validation.roster import validate_schedule

from .enums import EventType
from .errors import ConfigError, ScheduleError


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

class ScoringConfig(BaseModel):
    # Placement points offered for new events (1st: 5, 2nd: 3, 3rd: 1)
    default_schedule: dict[int, int] = Field(
        default_factory=lambda: {1: 5, 2: 3, 3: 1}
    )
    # category id -> event type -> schedule, overriding default_schedule
    schedules: dict[str, dict[EventType, dict[int, int]]] = Field(default_factory=dict)
    strict_placements: bool = False  # Reject results outside the schedule
    recent_events_limit: int = 5

    @field_validator("default_schedule")
    @classmethod
    def _check_default(cls, value: dict[int, int]) -> dict[int, int]:
        _check_schedule(value)
        return value

    @field_validator("schedules")
    @classmethod
    def _check_overrides(
        cls, value: dict[str, dict[EventType, dict[int, int]]]
    ) -> dict[str, dict[EventType, dict[int, int]]]:
        for by_type in value.values():
            for schedule in by_type.values():
                _check_schedule(schedule)
        return value

    def schedule_for(
        self, category_id: str, event_type: EventType | str
    ) -> dict[int, int]:
        """Placement points for a new event of *event_type* in *category_id*.

        Falls back to ``default_schedule`` when no override is configured.
        """
        by_type = self.schedules.get(category_id, {})
        return dict(by_type.get(EventType(event_type), self.default_schedule))


def _check_schedule(schedule: dict[int, int]) -> None:
    # pydantic only wraps ValueError into a ValidationError
    try:
        validate_schedule(schedule)
    except ScheduleError as exc:
        raise ValueError(str(exc)) from exc


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "json"  # or "console"


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "HOUSE_CUP_", "env_nested_delimiter": "__"}


def _read_toml(path: Path) -> dict[str, Any]:
    import tomli

    try:
        with path.open("rb") as fh:
            return tomli.load(fh)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed config file {path}: {exc}") from exc


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Build ``Settings``.

    A missing *config_path* is not an error; the engine runs on defaults.
    *overrides* replace whole top-level sections of the file's contents.
    Any invalid value raises ``ConfigError``.
    """
    raw: dict[str, Any] = {}
    if config_path is not None and Path(config_path).exists():
        raw = _read_toml(Path(config_path))
    raw.update(overrides or {})

    try:
        return Settings(**raw)
    except PydanticValidationError as exc:
        raise ConfigError(str(exc)) from exc
