"""Tests for configuration models and the ConfigService."""

import json

import pytest
from pydantic import ValidationError

from aura_session.models.config_models import AppConfig, BehaviorConfig, SessionDefaults
from aura_session.services.config_service import ConfigService, get_config_service


def test_default_config():
    config = AppConfig()
    assert config.defaults.duration == 70
    assert config.defaults.sprints == 3
    assert config.defaults.energy == 3
    assert config.defaults.ambience == 4
    assert config.defaults.seed == "#8AA3FF"
    assert config.behavior == BehaviorConfig(fullscreen=True, sound=True)


@pytest.mark.parametrize(
    "field, value",
    [("duration", 44), ("duration", 121), ("sprints", 1), ("sprints", 6), ("energy", 0)],
)
def test_session_defaults_bounds(field, value):
    with pytest.raises(ValidationError):
        SessionDefaults(**{field: value})


def test_seed_is_stripped():
    assert SessionDefaults(seed="  warm ").seed == "warm"


def test_blank_seed_rejected():
    with pytest.raises(ValidationError):
        SessionDefaults(seed="   ")


class TestAppConfigDottedKeys:
    def test_get(self):
        assert AppConfig().get("behavior.sound") is True

    @pytest.mark.parametrize("key", ["defaults", "defaults.volume", "nope.duration", "set.x"])
    def test_get_unknown(self, key):
        with pytest.raises(KeyError):
            AppConfig().get(key)

    def test_set_returns_new_config(self):
        config = AppConfig()

        updated = config.set("defaults.sprints", 5)

        assert updated.defaults.sprints == 5
        assert config.defaults.sprints == 3

    def test_set_validates(self):
        with pytest.raises(ValidationError):
            AppConfig().set("defaults.duration", 500)

    def test_set_unknown(self):
        with pytest.raises(KeyError):
            AppConfig().set("defaults.volume", 1)


class TestConfigService:
    def test_first_load_writes_defaults(self, isolated_dirs):
        service = ConfigService()

        assert service.config == AppConfig()
        assert (isolated_dirs / "config.json").exists()

    def test_set_persists(self, isolated_dirs):
        ConfigService().set("defaults.duration", 95)

        data = json.loads((isolated_dirs / "config.json").read_text(encoding="utf-8"))
        assert data["defaults"]["duration"] == 95
        assert ConfigService().get("defaults.duration") == 95

    def test_reset(self):
        service = ConfigService()
        service.set("behavior.fullscreen", False)

        service.reset_config()

        assert service.config == AppConfig()
        assert ConfigService().config == AppConfig()

    def test_corrupt_file_raises_runtime_error(self, isolated_dirs):
        (isolated_dirs / "config.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(RuntimeError, match="Failed to load config"):
            ConfigService().load_config()

    def test_save_without_config_raises(self):
        with pytest.raises(RuntimeError):
            ConfigService().save_config()

    def test_get_config_service_is_cached(self):
        assert get_config_service() is get_config_service()
