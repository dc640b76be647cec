from __future__ import annotations

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .compat import tomllib
from .exceptions import ConfigIOError, ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "profilemutex.toml"


class ConfigStorage:
    """Filesystem interaction for rule configuration files."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._path = Path(path or DEFAULT_CONFIG_NAME).expanduser().resolve()

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def ensure_directory(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(
                f"Unable to create configuration directory: {exc}"
            ) from exc

    def backup_existing_config(self, suffix: str = "backup") -> Optional[Path]:
        if not self._path.exists():
            return None
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
        backup_name = f"{self._path.name}.{suffix}.{timestamp}.bak"
        backup_path = self._path.with_name(backup_name)
        try:
            shutil.copy2(self._path, backup_path)
            return backup_path
        except OSError as exc:  # pragma: no cover
            logger.warning(
                "Failed to create configuration backup at %s: %s", backup_path, exc
            )
            return None

    def write_default(self, content: str) -> None:
        self.ensure_directory()
        try:
            self._path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ConfigIOError(f"Failed to write configuration file: {exc}") from exc

    def read_config(self) -> Dict[str, Any]:
        try:
            with self._path.open("rb") as fh:
                return tomllib.load(fh)
        except FileNotFoundError as exc:
            raise ConfigIOError(f"Configuration file not found: {self._path}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigValidationError(
                f"Configuration file {self._path} is not valid TOML: {exc}"
            ) from exc
        except OSError as exc:
            raise ConfigIOError(f"Unable to read configuration: {exc}") from exc


__all__ = ["ConfigStorage", "DEFAULT_CONFIG_NAME"]
