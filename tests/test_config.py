"""Tests for GraphConfig: YAML file + env var overrides."""

from __future__ import annotations

import pytest
import yaml

from causegraph.config import GraphConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def _reset(monkeypatch):
    """Reset singleton and clear env between tests."""
    for var in ("CAUSEGRAPH_NAME", "CAUSEGRAPH_STATE_DIR", "CAUSEGRAPH_RIGHT_NODES"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


class TestDefaults:
    def test_defaults(self):
        config = GraphConfig()
        assert config.name == "default"
        assert config.state_dir == ""
        assert config.right_nodes == []

    def test_missing_file_uses_defaults(self, tmp_path):
        config = GraphConfig.load(tmp_path / "nope.yaml")
        assert config == GraphConfig()

    def test_to_dict(self):
        assert GraphConfig(right_nodes=["a"]).to_dict() == {
            "name": "default",
            "state_dir": "",
            "right_nodes": ["a"],
        }


class TestYAMLLoading:
    def test_load_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.dump({"name": "weather", "state_dir": "/tmp/w", "right_nodes": ["rain", "sun"]})
        )
        config = GraphConfig.load(path)
        assert config.name == "weather"
        assert config.state_dir == "/tmp/w"
        assert config.right_nodes == ["rain", "sun"]

    def test_comma_separated_right_nodes(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"right_nodes": "rain, sun,"}))
        assert GraphConfig.load(path).right_nodes == ["rain", "sun"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert GraphConfig.load(path) == GraphConfig()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump(["rain", "sun"]))
        with pytest.raises(ValueError, match="expected a mapping"):
            GraphConfig.load(path)


class TestEnvOverrides:
    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"name": "weather", "right_nodes": ["rain"]}))
        monkeypatch.setenv("CAUSEGRAPH_NAME", "override")
        monkeypatch.setenv("CAUSEGRAPH_RIGHT_NODES", "hail,snow")
        config = GraphConfig.load(path)
        assert config.name == "override"
        assert config.right_nodes == ["hail", "snow"]

    def test_env_state_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CAUSEGRAPH_STATE_DIR", str(tmp_path))
        assert GraphConfig.load(tmp_path / "nope.yaml").state_dir == str(tmp_path)


class TestSingleton:
    def test_get_config_is_cached(self, tmp_path):
        first = get_config(tmp_path / "nope.yaml")
        assert get_config() is first

    def test_reset(self, tmp_path):
        first = get_config(tmp_path / "nope.yaml")
        reset_config()
        assert get_config(tmp_path / "nope.yaml") is not first
