"""The global phpvm configuration file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .dirs import PhpvmError, file_exists, phpvm_path


def _config_file() -> Path:
    return phpvm_path() / "config.json"


@dataclass
class Config:
    """Default, current and installed PHP versions."""

    default: str = ""
    current: str = ""
    versions: list[str] = field(default_factory=list)

    def set_default(self, version: str) -> None:
        self.default = version
        write_config(self)

    def set_current(self, version: str) -> None:
        self.current = version
        write_config(self)

    def save(self) -> None:
        write_config(self)

    def to_dict(self) -> dict[str, Any]:
        return {"default": self.default, "current": self.current, "versions": list(self.versions)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a configuration, ignoring fields of the wrong type."""
        def text(key: str) -> str:
            value = data.get(key)
            return value if isinstance(value, str) else ""

        versions = data.get("versions")
        if not isinstance(versions, list) or not all(isinstance(v, str) for v in versions):
            versions = []
        return cls(text("default"), text("current"), list(versions))


def config_exists() -> bool:
    """Tell whether the configuration file is present."""
    return file_exists(_config_file())


def get_config() -> Config:
    """Read the configuration, falling back to an empty one."""
    try:
        data = json.loads(_config_file().read_text()) if config_exists() else None
    except (PhpvmError, OSError, ValueError):
        data = None
    return Config.from_dict(data) if isinstance(data, dict) else Config()


def write_config(cfg: Config) -> None:
    """Write the configuration file."""
    _config_file().write_text(json.dumps(cfg.to_dict(), separators=(",", ":")))