"""Tests for refinance.core.config."""

import json
import os

import pytest
import yaml

from refinance.core.config import Config
from refinance.core.exceptions import ConfigurationError


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("paths.data_dir").endswith(".refinance-data")
        assert config.get("comparison.savings_goal") == 0.20
        assert config.get("solver.max_rate") == 20.0

    def test_custom_data_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("paths.data_dir") == tmp_dir
        assert config.get_log_dir() == os.path.join(tmp_dir, "logs")

    def test_log_dir_follows_data_dir_override(self, tmp_dir, monkeypatch):
        monkeypatch.setenv("REFINANCE_PATHS__DATA_DIR", os.path.join(tmp_dir, "elsewhere"))
        config = Config(data_dir=tmp_dir)
        assert config.get_log_dir() == os.path.join(tmp_dir, "elsewhere", "logs")

    def test_explicit_log_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"paths": {"log_dir": os.path.join(tmp_dir, "var")}})
        assert config.get_log_dir() == os.path.join(tmp_dir, "var")

    def test_custom_env_prefix(self, monkeypatch, tmp_dir):
        monkeypatch.setenv("MYAPP_COMPARISON__SAVINGS_GOAL", "0.3")
        config = Config(env_prefix="MYAPP_", data_dir=tmp_dir)
        assert config.get("comparison.savings_goal") == "0.3"

    def test_yaml_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"solver": {"max_rate": 15}}, f)

        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("solver.max_rate") == 15
        assert config.get("solver.min_rate") == 0.0

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"logging": {"level": "DEBUG"}}, f)

        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("logging.level") == "DEBUG"

    def test_unparseable_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            f.write("solver: [unclosed")

        with pytest.raises(ConfigurationError):
            Config(config_file=config_path, data_dir=tmp_dir)

    def test_env_overrides_file(self, tmp_dir, monkeypatch):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"storage": {"snapshot_key": "from-file"}}, f)

        monkeypatch.setenv("REFINANCE_STORAGE__SNAPSHOT_KEY", "from-env")
        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("storage.snapshot_key") == "from-env"

    def test_get_missing_key(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_snapshot_path(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get_snapshot_path() == os.path.join(tmp_dir, "refinancing-loan-data.json")

    def test_ensure_directories(self, tmp_dir):
        config = Config(data_dir=os.path.join(tmp_dir, "data"))
        config.ensure_directories()
        assert os.path.isdir(os.path.join(tmp_dir, "data"))
        assert os.path.isdir(os.path.join(tmp_dir, "data", "logs"))

    def test_validated(self, tmp_dir, monkeypatch):
        monkeypatch.setenv("REFINANCE_COMPARISON__SAVINGS_GOAL", "0.25")
        settings = Config(data_dir=tmp_dir).validated()
        assert settings.comparison.savings_goal == 0.25
        assert settings.solver.max_iterations == 100

    def test_validated_rejects_bad_values(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"comparison": {"savings_goal": 1.5}})
        with pytest.raises(ConfigurationError):
            config.validated()

