"""Unit tests for the application context."""

import pytest

from src.pattern_lab.runtime.config.config_data import ConfigData, ConsoleConfig
from src.pattern_lab.runtime.context import (
    AppContext,
    config_path,
    get_config,
    get_context,
    merge_config,
    set_config,
    set_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        """Should have a default context available."""
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_level(self):
        """Should override config for the duration of the context manager."""
        original_config = get_config()
        original_url = original_config.database.url

        test_config = ConfigData()
        test_config.database.url = "sqlite://"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.database.url == "sqlite://"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.database.url == original_url
        assert after_config is original_config

    def test_with_context_keeps_unset_fields(self):
        """Fields not set on the override are inherited from the current config."""
        outer = ConfigData()
        outer.console.heading_style = "blue"

        with with_context(outer):
            inner = ConfigData()
            inner.logging.level = "DEBUG"

            with with_context(inner):
                config = get_config()
                assert config.logging.level == "DEBUG"
                assert config.console.heading_style == "blue"

            assert get_config().console.heading_style == "blue"

    def test_with_context_none_is_noop(self):
        original_config = get_config()
        with with_context(None):
            assert get_config() is original_config

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="must be ConfigData"):
            with with_context({"database": {"url": "sqlite://"}}):
                pass

    def test_with_context_restores_after_exception(self):
        original_config = get_config()
        override = ConfigData()
        override.app.name = "other"

        with pytest.raises(RuntimeError):
            with with_context(override):
                raise RuntimeError("boom")

        assert get_config() is original_config

    def test_set_config_replaces_configuration(self):
        original = get_context()
        replacement = ConfigData()
        replacement.app.name = "replaced"

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_context(original)

        assert get_config() is original.config

    def test_nested_override_keeps_sibling_fields(self):
        """Setting one field of a section leaves the section's other fields inherited."""
        outer = ConfigData()
        outer.logging.file = "/tmp/pattern-lab.log"

        with with_context(outer):
            inner = ConfigData()
            inner.logging.format = "json"

            with with_context(inner):
                config = get_config()
                assert config.logging.format == "json"
                assert config.logging.file == "/tmp/pattern-lab.log"

            assert get_config().logging.format == "plain"


class TestMergeConfig:
    def test_only_explicit_fields_are_applied(self):
        base = ConfigData()
        base.database.url = "sqlite:///base.db"
        base.database.echo = True

        override = ConfigData()
        override.database.timeout = 5

        merged = merge_config(base, override)

        assert merged.database.url == "sqlite:///base.db"
        assert merged.database.echo is True
        assert merged.database.timeout == 5

    def test_section_passed_to_constructor(self):
        base = ConfigData()
        base.console.title_style = "magenta"

        merged = merge_config(base, ConfigData(console=ConsoleConfig(color=False)))

        assert merged.console.color is False
        assert merged.console.title_style == "magenta"

    def test_empty_override_changes_nothing(self):
        base = ConfigData()
        base.app.name = "lab"
        assert merge_config(base, ConfigData()) == base


class TestConfigPath:
    def test_defaults_to_working_directory(self, monkeypatch):
        monkeypatch.delenv("PATTERN_LAB_CONFIG", raising=False)
        assert str(config_path()) == "config.yaml"

    def test_environment_variable(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PATTERN_LAB_CONFIG", str(tmp_path / "lab.yaml"))
        assert config_path() == tmp_path / "lab.yaml"
