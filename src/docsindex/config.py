"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from docsindex.errors import ConfigError
from docsindex.utils.files import read_version

API_KEY_ENV = "ALGOLIA_ADMIN_API_KEY"


@dataclass(slots=True)
class AppConfig:
    content_dir: Path = Path("content")
    collection: str = "docs"
    path_prefix: str = "/docs/en"
    url_prefix: str = "/docs"
    lvl0: str = "Documentation"
    exclude_pattern: str = "^_"
    version: str | None = None
    version_file: Path | None = None
    db_path: Path = Path("data/docsindex.db")
    algolia_app_id: str | None = None
    algolia_index: str = "docs"
    algolia_api_key: str | None = None

    def __post_init__(self) -> None:
        if self.algolia_api_key is None:
            self.algolia_api_key = os.environ.get(API_KEY_ENV)

    def resolve_db_path(self, base_dir: Path | None = None) -> Path:
        if Path(self.db_path).is_absolute() or base_dir is None:
            return Path(self.db_path)
        return base_dir / self.db_path

    def resolve_content_dir(self, base_dir: Path | None = None) -> Path:
        if Path(self.content_dir).is_absolute() or base_dir is None:
            return Path(self.content_dir)
        return base_dir / self.content_dir

    def resolve_version(self) -> str | None:
        """Return the configured version, reading ``version_file`` once if needed."""
        if self.version is None and self.version_file is not None:
            try:
                self.version = read_version(Path(self.version_file))
            except OSError as exc:
                raise ConfigError(f"Failed to read version file {self.version_file}: {exc}") from exc
        return self.version
