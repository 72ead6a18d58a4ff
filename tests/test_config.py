"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from vuecheck.config.loader import ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "CI",
        "VUECHECK_FAIL_EXIT",
        "VUECHECK_EXCLUDE_DIRS",
        "VUECHECK_TEMPLATE_PRODUCER",
        "VUECHECK_SCRIPT_PRODUCER",
    ):
        monkeypatch.delenv(name, raising=False)


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.check.fail_exit is False
        assert cfg.check.exclude_dirs == []
        assert cfg.producers.template is None
        assert cfg.cache.max_entries == 10
        assert cfg.cache.cleanup_interval_s == 60
        assert cfg.output.context_lines == 2
        assert cfg.output.show_progress is True

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".vuecheck.toml").write_text(
            '[check]\n'
            'only_typescript = true\n'
            'exclude_dirs = ["src/legacy"]\n'
            '[producers]\n'
            'template = "engines.vls:template"\n'
            '[output]\n'
            'context_lines = 0\n'
            'unknown_key = 1\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.check.only_typescript is True
        assert cfg.check.exclude_dirs == ["src/legacy"]
        assert cfg.producers.template == "engines.vls:template"
        assert cfg.output.context_lines == 0

    def test_single_exclude_dir_string(self, tmp_path: Path):
        (tmp_path / ".vuecheck.toml").write_text('[check]\nexclude_dirs = "src/old"\n')
        assert load_config(tmp_path).check.exclude_dirs == ["src/old"]

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text("[check]\nfail_exit = true\n")
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.check.fail_exit is True

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".vuecheck.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_section_must_be_table(self, tmp_path: Path):
        (tmp_path / ".vuecheck.toml").write_text('check = "yes"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_fail_exit_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VUECHECK_FAIL_EXIT", "1")
        assert load_config(tmp_path).check.fail_exit is True

    def test_exclude_dirs_appended(self, tmp_path: Path, monkeypatch):
        import os

        (tmp_path / ".vuecheck.toml").write_text('[check]\nexclude_dirs = ["a"]\n')
        monkeypatch.setenv("VUECHECK_EXCLUDE_DIRS", os.pathsep.join(["b", "c"]))
        assert load_config(tmp_path).check.exclude_dirs == ["a", "b", "c"]

    def test_producer_overrides(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VUECHECK_TEMPLATE_PRODUCER", "x.y:t")
        monkeypatch.setenv("VUECHECK_SCRIPT_PRODUCER", "x.y:s")
        cfg = load_config(tmp_path)
        assert cfg.producers.template == "x.y:t"
        assert cfg.producers.script == "x.y:s"

    def test_ci_disables_progress(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CI", "true")
        assert load_config(tmp_path).output.show_progress is False

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VUECHECK_FAIL_EXIT", "maybe")
        assert load_config(tmp_path).check.fail_exit is False
