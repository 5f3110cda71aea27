"""Choosing a PHP version from a project's composer.json."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .config import get_config
from .constraints import Constraint, Version
from .dirs import PhpvmError
from .versions import get_current, set_version


def get_php_from_composer(directory: str | os.PathLike[str] | None = None) -> str:
    """The PHP requirement of composer.json, with carets removed."""
    composer_path = Path(directory or Path.cwd()) / "composer.json"
    if not composer_path.exists():
        raise PhpvmError("no composer.json found in current directory")
    try:
        data = json.loads(composer_path.read_text())
    except (OSError, ValueError) as exc:
        raise PhpvmError(f"cannot read {composer_path}: {exc}") from exc
    require = data.get("require") if isinstance(data, dict) else None
    php = require.get("php") if isinstance(require, dict) else None
    if not isinstance(php, str) or not php:
        raise PhpvmError("no PHP version found in composer.json")
    return php.replace("^", "")


def version_matches(version: str, directory: str | os.PathLike[str] | None = None) -> bool:
    """Tell whether the version satisfies the project's PHP requirement."""
    return Constraint.parse(get_php_from_composer(directory)).check(Version.parse(version))


def available_versions() -> list[Version]:
    """Versions recorded in the configuration, newest first."""
    return sorted(map(Version.parse, get_config().versions), reverse=True)


def get_appropriate_version(directory: str | os.PathLike[str] | None = None) -> str | None:
    """The newest recorded version fitting the project, or None if the current one fits."""
    constraint = Constraint.parse(get_php_from_composer(directory))
    current = get_current()
    if current and version_matches(current, directory):
        return None
    match = next((v for v in available_versions() if constraint.check(v)), None)
    if match is None:
        raise PhpvmError("no matching version found")
    return match.original()


def set_appropriate_version(directory: str | os.PathLike[str] | None = None) -> bool:
    """Switch to the version the project needs; False if it could not be set."""
    version = get_appropriate_version(directory)
    if version is None:
        return True
    try:
        set_version(version)
    except PhpvmError:
        return False
    get_config().set_current(version)
    return True