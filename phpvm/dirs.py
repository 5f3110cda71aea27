"""Locations of phpvm state on disk."""

from __future__ import annotations

import os
from pathlib import Path

SESSION_VARIABLE = "PHPVM_SESSION"


class PhpvmError(Exception):
    """Raised when phpvm cannot carry out an operation."""


def file_exists(name: str | os.PathLike[str]) -> bool:
    """Tell whether a path exists; errors other than absence propagate."""
    try:
        os.stat(name)
    except FileNotFoundError:
        return False
    return True


def _home() -> Path:
    home = os.environ.get("HOME") or (os.environ.get("USERPROFILE") if os.name == "nt" else "")
    if not home:
        raise PhpvmError("$HOME is not defined")
    return Path(home)


def phpvm_path() -> Path:
    """The directory holding the global phpvm configuration."""
    return _home() / ".phpvm"


def get_env_dir() -> Path:
    """The directory for the current shell session, or the global one."""
    session = os.environ.get(SESSION_VARIABLE, "")
    if not session:
        return phpvm_path()
    return _home() / ".local/state/phpvm_multishell" / session