# SPDX-License-Identifier: MIT
"""Tests for [tool.semver] configuration loading."""

from pathlib import Path

import pytest

from semver_tribe import (
    FILE_NAME,
    TAG_FORMAT,
    ConfigError,
    SemverConfig,
    find_pyproject,
    load_config,
)


def _write_pyproject(directory: Path, body: str) -> Path:
    path = directory / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\nversion = "1.0.0"\n\n' + body)
    return path


class TestFromPyproject:
    """Tests for SemverConfig.from_pyproject."""

    def test_defaults_without_table(self, tmp_path: Path):
        config = SemverConfig.from_pyproject(_write_pyproject(tmp_path, ""))
        assert config.tag_format == TAG_FORMAT
        assert config.file_name == FILE_NAME
        assert config.project_dir == tmp_path

    def test_custom_settings(self, tmp_path: Path):
        path = _write_pyproject(
            tmp_path,
            '[tool.semver]\nformat = "release-%M.%m.%p%s"\nfile = "VERSION"\n',
        )
        config = SemverConfig.from_pyproject(path)
        assert config.tag_format == "release-%M.%m.%p%s"
        assert config.file_name == "VERSION"

    def test_partial_settings(self, tmp_path: Path):
        path = _write_pyproject(tmp_path, '[tool.semver]\nformat = "%M.%m"\n')
        config = SemverConfig.from_pyproject(path)
        assert config.tag_format == "%M.%m"
        assert config.file_name == FILE_NAME

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.semver\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            SemverConfig.from_pyproject(path)

    def test_wrong_type(self, tmp_path: Path):
        path = _write_pyproject(tmp_path, "[tool.semver]\nformat = 3\n")
        with pytest.raises(ConfigError, match="tool.semver.format"):
            SemverConfig.from_pyproject(path)

    def test_empty_string(self, tmp_path: Path):
        path = _write_pyproject(tmp_path, '[tool.semver]\nfile = ""\n')
        with pytest.raises(ConfigError, match="tool.semver.file"):
            SemverConfig.from_pyproject(path)

    def test_semver_not_a_table(self, tmp_path: Path):
        path = _write_pyproject(tmp_path, '[tool]\nsemver = "yes"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            SemverConfig.from_pyproject(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            SemverConfig.from_pyproject(tmp_path / "pyproject.toml")


class TestLoadConfig:
    """Tests for find_pyproject and load_config."""

    def test_finds_pyproject_in_ancestor(self, tmp_path: Path):
        _write_pyproject(tmp_path, '[tool.semver]\nformat = "%M.%m.%p"\n')
        nested = tmp_path / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_pyproject(nested) == (tmp_path / "pyproject.toml").resolve()
        assert load_config(nested).tag_format == "%M.%m.%p"

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        _write_pyproject(tmp_path, '[tool.semver]\nfile = "VERSION"\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().file_name == "VERSION"
