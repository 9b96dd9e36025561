"""
Unit tests for configuration loading and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from slip_codec import config


class TestConfig:
    """Test configuration models and TOML persistence."""

    def test_defaults(self):
        """Test default configuration values."""
        cfg = config.Config()

        assert cfg.logging.level == "INFO"
        assert cfg.logging.frame_dump is False

    def test_level_normalized(self):
        """Test log level names are upper-cased."""
        cfg = config.LoggingConfig(level="debug")

        assert cfg.level == "DEBUG"

    def test_invalid_level(self):
        """Test unknown log level is rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            config.LoggingConfig(level="LOUD")

    def test_load_missing_file(self, tmp_path):
        """Test missing file yields default configuration."""
        cfg = config.load_config(tmp_path / "missing.toml")

        assert cfg == config.Config()

    def test_load_toml(self, tmp_path):
        """Test loading configuration from TOML."""
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "warning"\nframe_dump = true\n')

        cfg = config.load_config(path)

        assert cfg.logging.level == "WARNING"
        assert cfg.logging.frame_dump is True

    def test_save_and_load(self, tmp_path):
        """Test saved configuration loads back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        cfg = config.Config(logging=config.LoggingConfig(level="ERROR", frame_dump=True))

        config.save_config(cfg, path)

        assert path.exists()
        assert config.load_config(path) == cfg

    def test_default_path_uses_xdg(self, tmp_path, monkeypatch):
        """Test default path honours XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert config.get_config_path() == tmp_path / "slip_codec" / "config.toml"


class TestSetupLogging:
    """Test logging configuration."""

    @pytest.fixture(autouse=True)
    def restore_levels(self):
        root = logging.getLogger()
        codec = logging.getLogger("slip_codec.slip")
        saved = (root.level, codec.level)
        yield
        root.setLevel(saved[0])
        codec.setLevel(saved[1])

    def test_frame_dump_enabled(self):
        """Test frame dumps open the codec logger to DEBUG."""
        cfg = config.Config(logging=config.LoggingConfig(level="WARNING", frame_dump=True))

        config.setup_logging(cfg)

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("slip_codec.slip").isEnabledFor(logging.DEBUG)

    def test_frame_dump_disabled(self):
        """Test codec frame dumps are suppressed by default."""
        cfg = config.Config(logging=config.LoggingConfig(level="DEBUG"))

        config.setup_logging(cfg)

        assert logging.getLogger().level == logging.DEBUG
        assert not logging.getLogger("slip_codec.slip").isEnabledFor(logging.DEBUG)
