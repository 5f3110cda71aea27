"""Installed PHP versions and the per-shell current version."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .dirs import PhpvmError, file_exists, get_env_dir

BREW_OPT_DIR = Path("/opt/homebrew/opt")
LINKED_DIRS = ("bin", "sbin")
SHELL_CONFIG_NAME = "config.json"


def version_path(version: str) -> Path:
    """Where Homebrew installs the given PHP version."""
    return BREW_OPT_DIR / f"php@{version}"


def version_exists(version: str) -> bool:
    """Tell whether the given PHP version is installed."""
    try:
        return file_exists(version_path(version))
    except OSError:
        return False


def _force_symlink(src: Path, link: Path) -> None:
    """Point ``link`` at ``src``, replacing an existing link or file."""
    if link.is_dir() and not link.is_symlink():
        link = link / src.name
    if link.is_symlink() or link.exists():
        link.unlink()
    link.symlink_to(src)


def set_version(version: str) -> None:
    """Link the version's bin and sbin into the environment directory."""
    if not version_exists(version):
        raise PhpvmError("version does not exist")

    src = version_path(version)
    target = get_env_dir()
    target.mkdir(parents=True, exist_ok=True)

    for name in LINKED_DIRS:
        _force_symlink(src / name, target / name)

    write_current(version)


@dataclass
class ShellConf:
    """State kept for one shell environment."""

    current: str = ""

    def write(self) -> None:
        """Write the shell state into the environment directory."""
        path = get_env_dir() / SHELL_CONFIG_NAME
        path.write_text(json.dumps({"current": self.current}, separators=(",", ":")))


def shell_config_exists() -> bool:
    """Tell whether the environment directory has a state file."""
    return file_exists(get_env_dir() / SHELL_CONFIG_NAME)


def write_current(version: str) -> None:
    """Record the version as current for this environment."""
    shell = get_shell()
    shell.current = version
    shell.write()


def get_current() -> str:
    """The version current for this environment, or an empty string."""
    return get_shell().current


def get_shell() -> ShellConf:
    """Read the shell state, falling back to an empty one."""
    try:
        if not shell_config_exists():
            return ShellConf()
        data = json.loads((get_env_dir() / SHELL_CONFIG_NAME).read_text())
    except (PhpvmError, OSError, ValueError):
        return ShellConf()
    current = data.get("current") if isinstance(data, dict) else None
    return ShellConf(current=current if isinstance(current, str) else "")