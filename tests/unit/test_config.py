"""Test Settings loading from defaults, TOML files and the environment."""

import pytest

from house_cup.core.config import ScoringConfig, Settings, load_settings
from house_cup.core.enums import EventType
from house_cup.core.errors import ConfigError


class TestSettingsDefaults:
    def test_default_settings(self):
        settings = Settings()
        assert settings.scoring.default_schedule == {1: 5, 2: 3, 3: 1}
        assert settings.scoring.strict_placements is False
        assert settings.scoring.recent_events_limit == 5

    def test_observability_defaults(self):
        settings = Settings()
        assert settings.observability.log_level == "INFO"
        assert settings.observability.log_format == "json"


class TestEnvironment:
    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("HOUSE_CUP_SCORING__STRICT_PLACEMENTS", "true")
        assert Settings().scoring.strict_placements is True

    def test_log_level_env(self, monkeypatch):
        monkeypatch.setenv("HOUSE_CUP_OBSERVABILITY__LOG_LEVEL", "DEBUG")
        assert load_settings().observability.log_level == "DEBUG"


class TestLoadSettings:
    def test_no_path_gives_defaults(self):
        assert load_settings() == Settings()

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.toml")
        assert settings.scoring.strict_placements is False

    def test_toml_file(self, tmp_path):
        path = tmp_path / "house_cup.toml"
        path.write_text(
            "[scoring]\n"
            "strict_placements = true\n"
            "recent_events_limit = 3\n"
            "\n"
            "[scoring.default_schedule]\n"
            "1 = 10\n"
            "2 = 6\n"
            "\n"
            "[observability]\n"
            'log_format = "console"\n'
        )
        settings = load_settings(path)
        assert settings.scoring.strict_placements is True
        assert settings.scoring.recent_events_limit == 3
        assert settings.scoring.default_schedule == {1: 10, 2: 6}
        assert settings.observability.log_format == "console"

    def test_overrides_applied_last(self, tmp_path):
        path = tmp_path / "house_cup.toml"
        path.write_text('[observability]\nlog_level = "WARNING"\n')
        settings = load_settings(
            path, overrides={"observability": {"log_level": "ERROR"}}
        )
        assert settings.observability.log_level == "ERROR"

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[scoring\nstrict_placements = ")
        with pytest.raises(ConfigError, match="Malformed config file"):
            load_settings(path)

    def test_empty_default_schedule_rejected(self):
        with pytest.raises(ConfigError, match="default_schedule"):
            load_settings(overrides={"scoring": {"default_schedule": {}}})


class TestScheduleFor:
    def test_falls_back_to_default(self):
        scoring = ScoringConfig()
        assert scoring.schedule_for("kids", EventType.GROUP) == {1: 5, 2: 3, 3: 1}

    def test_override_by_category_and_type(self):
        scoring = ScoringConfig(schedules={"kids": {"group": {1: 20, 2: 10}}})
        assert scoring.schedule_for("kids", EventType.GROUP) == {1: 20, 2: 10}
        assert scoring.schedule_for("kids", "individual") == {1: 5, 2: 3, 3: 1}
        assert scoring.schedule_for("adults", "group") == {1: 5, 2: 3, 3: 1}

    def test_returned_schedule_is_a_copy(self):
        scoring = ScoringConfig()
        scoring.schedule_for("kids", "group")[1] = 99
        assert scoring.default_schedule[1] == 5

    def test_toml_overrides(self, tmp_path):
        path = tmp_path / "house_cup.toml"
        path.write_text(
            "[scoring.default_schedule]\n"
            "1 = 3\n"
            "\n"
            "[scoring.schedules.adults.group]\n"
            "1 = 20\n"
            "2 = 10\n"
            "3 = 5\n"
        )
        scoring = load_settings(path).scoring
        assert scoring.schedule_for("adults", "group") == {1: 20, 2: 10, 3: 5}
        assert scoring.schedule_for("adults", "individual") == {1: 3}

    def test_invalid_override_rejected(self):
        with pytest.raises(ConfigError, match="non-negative"):
            load_settings(
                overrides={"scoring": {"schedules": {"kids": {"group": {1: -5}}}}}
            )

    def test_unknown_event_type_in_override_rejected(self):
        with pytest.raises(ConfigError):
            load_settings(
                overrides={"scoring": {"schedules": {"kids": {"relay": {1: 5}}}}}
            )
