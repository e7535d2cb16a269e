"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsindex.config import API_KEY_ENV, AppConfig
from docsindex.errors import ConfigError


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should create config with default values."""
        monkeypatch.delenv(API_KEY_ENV, raising=False)
        config = AppConfig()

        assert config.content_dir == Path("content")
        assert config.collection == "docs"
        assert config.path_prefix == "/docs/en"
        assert config.url_prefix == "/docs"
        assert config.lvl0 == "Documentation"
        assert config.exclude_pattern == "^_"
        assert config.version is None
        assert config.db_path == Path("data/docsindex.db")
        assert config.algolia_index == "docs"
        assert config.algolia_api_key is None

    def test_api_key_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should pick up the admin key from the environment."""
        monkeypatch.setenv(API_KEY_ENV, "secret")

        assert AppConfig().algolia_api_key == "secret"

    def test_explicit_api_key_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(API_KEY_ENV, "secret")

        assert AppConfig(algolia_api_key="other").algolia_api_key == "other"

    def test_resolve_db_path_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(db_path=Path("/absolute/path/db.db"))

        assert config.resolve_db_path(Path("/base")) == Path("/absolute/path/db.db")

    def test_resolve_db_path_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        config = AppConfig(db_path=Path("relative/db.db"))

        assert config.resolve_db_path(base_dir=None) == Path("relative/db.db")

    def test_resolve_db_path_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig(db_path=Path("relative/db.db"))

        resolved = config.resolve_db_path(base_dir=Path("/base/directory"))

        assert resolved == Path("/base/directory/relative/db.db")

    def test_resolve_content_dir(self) -> None:
        config = AppConfig()

        assert config.resolve_content_dir(Path("/site")) == Path("/site/content")
        assert AppConfig(content_dir=Path("/abs")).resolve_content_dir(Path("/site")) == Path("/abs")


class TestResolveVersion:
    """Test version resolution."""

    def test_explicit_version(self, tmp_path: Path) -> None:
        """An explicit version is used without reading the file."""
        config = AppConfig(version="1.0", version_file=tmp_path / "missing")

        assert config.resolve_version() == "1.0"

    def test_version_file(self, tmp_path: Path) -> None:
        """Should read the version file once and keep the value."""
        version_file = tmp_path / "VERSION"
        version_file.write_text("3.1.4\n")
        config = AppConfig(version_file=version_file)

        assert config.resolve_version() == "3.1.4"
        version_file.write_text("9.9.9")
        assert config.resolve_version() == "3.1.4"

    def test_no_version(self) -> None:
        assert AppConfig().resolve_version() is None

    def test_missing_version_file(self, tmp_path: Path) -> None:
        """An unreadable version file is reported as a configuration error."""
        config = AppConfig(version_file=tmp_path / "VERSION")

        with pytest.raises(ConfigError, match="Failed to read version file"):
            config.resolve_version()
