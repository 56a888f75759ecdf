"""Unit tests for themekit.yaml loading and saving."""

from __future__ import annotations

import pytest

from themekit.core.config_loader import (
    THEME_CONFIG_FILE,
    get_theme_config_path,
    load_theme_config,
    save_theme_config,
    theme_config_exists,
)
from themekit.core.errors import ThemeConfigError
from themekit.core.ir import ThemeColors, ThemeConfig, ThemeDefaults


class TestLoadThemeConfig:
    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_theme_config(tmp_path)
        assert config == ThemeConfig()
        assert config.min_pass_rate == 70
        assert config.defaults.primary == "#3B82F6"

    def test_missing_file_without_defaults(self, tmp_path):
        with pytest.raises(ThemeConfigError, match="not found"):
            load_theme_config(tmp_path, use_defaults=False)

    def test_empty_file(self, tmp_path):
        (tmp_path / THEME_CONFIG_FILE).write_text("", encoding="utf-8")
        assert load_theme_config(tmp_path) == ThemeConfig()
        with pytest.raises(ThemeConfigError, match="Empty"):
            load_theme_config(tmp_path, use_defaults=False)

    def test_loads_values(self, tmp_path):
        (tmp_path / THEME_CONFIG_FILE).write_text(
            "colors:\n"
            "  primary: '#000000'\n"
            "  secondary: '#FFFFFF'\n"
            "defaults:\n"
            "  radius: 1rem\n"
            "min_pass_rate: 60\n",
            encoding="utf-8",
        )
        config = load_theme_config(tmp_path)
        assert config.colors.primary == "#000000"
        assert config.colors.destructive is None
        assert config.defaults.radius == "1rem"
        assert config.defaults.warning == "#F59E0B"
        assert config.min_pass_rate == 60

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / THEME_CONFIG_FILE).write_text("colors: [unclosed\n", encoding="utf-8")
        with pytest.raises(ThemeConfigError, match="Invalid YAML"):
            load_theme_config(tmp_path)

    def test_non_mapping(self, tmp_path):
        (tmp_path / THEME_CONFIG_FILE).write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ThemeConfigError, match="mapping"):
            load_theme_config(tmp_path)

    @pytest.mark.parametrize(
        "content",
        ["min_pass_rate: 150\n", "defaults:\n  primary: blue\n"],
    )
    def test_schema_errors(self, tmp_path, content):
        (tmp_path / THEME_CONFIG_FILE).write_text(content, encoding="utf-8")
        with pytest.raises(ThemeConfigError, match="schema"):
            load_theme_config(tmp_path)


class TestSaveThemeConfig:
    def test_round_trip(self, tmp_path):
        config = ThemeConfig(
            colors=ThemeColors(primary="#000000", secondary="#FFFFFF"),
            defaults=ThemeDefaults(radius="0.25rem"),
            min_pass_rate=75,
        )
        path = save_theme_config(tmp_path, config)
        assert path == get_theme_config_path(tmp_path)
        assert theme_config_exists(tmp_path)
        assert load_theme_config(tmp_path) == config

    def test_omits_unset_colors(self, tmp_path):
        save_theme_config(tmp_path, ThemeConfig(colors=ThemeColors(primary="#000000")))
        content = (tmp_path / THEME_CONFIG_FILE).read_text(encoding="utf-8")
        assert "destructive: null" not in content
        assert "primary: '#000000'" in content
