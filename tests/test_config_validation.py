"""Tests for config validation."""

import pytest

from say_better.config import load_config


class TestConfigValidation:
    def test_unknown_provider(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  provider: openai\n")
        with pytest.raises(ValueError, match="provider"):
            load_config(yaml)

    def test_invalid_timeout(self, tmp_path):
        """timeout of 0 (below minimum of 1) raises ValueError."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  timeout: 0\n")
        with pytest.raises(ValueError, match="timeout"):
            load_config(yaml)

    def test_invalid_temperature(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  temperature: 3.5\n")
        with pytest.raises(ValueError, match="temperature"):
            load_config(yaml)

    def test_invalid_list_limit(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("history:\n  list_limit: 0\n")
        with pytest.raises(ValueError, match="list_limit"):
            load_config(yaml)

    def test_invalid_smtp_port(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("mail:\n  smtp_port: 70000\n")
        with pytest.raises(ValueError, match="smtp_port"):
            load_config(yaml)

    def test_unknown_key(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("llm:\n  haiku_model: x\n")
        with pytest.raises(TypeError):
            load_config(yaml)
