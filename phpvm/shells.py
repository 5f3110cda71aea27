"""Shell snippets that put the selected PHP version on the PATH."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Env:
    """What the generated shell setup should do."""

    dir: str | os.PathLike[str]
    use_on_cd: bool = False
    multi_shell: bool = False
    now: bool = False
    session_id: str = ""


def _script(env: Env, hook: str, export: str, path: str, quiet: str) -> str:
    directory = os.fspath(env.dir)
    blocks = [hook] if env.use_on_cd else []
    if env.multi_shell:
        blocks.append(export % env.session_id)
    blocks.append(path % (directory, directory))
    blocks.append(f"phpvm {'use' if env.now else 'default'} {quiet}")
    return "\n".join(blocks) + "\n"


def gen_zsh(env: Env) -> str:
    """Setup script for zsh."""
    return _script(
        env,
        "function chpwd() {\n    phpvm use &>/dev/null\n}",
        'export PHPVM_SESSION="%s"',
        'export PATH="%s/bin:%s/sbin:$PATH"',
        "&>/dev/null",
    )


def gen_bash(env: Env) -> str:
    """Setup script for bash."""
    return _script(
        env,
        '__phpvmcd() {\n    \\cd "$@" || return $?\n    phpvm use\n}\n\nalias cd=__phpvmcd',
        'export PHPVM_SESSION="%s"',
        'export PATH="%s/bin:%s/sbin:$PATH"',
        "&>/dev/null",
    )


def gen_fish(env: Env) -> str:
    """Setup script for fish."""
    return _script(
        env,
        "function __phpvmoncd --on-event cd\n    phpvm use > /dev/null ^ /dev/null\nend",
        'set -gx PHPVM_SESSION "%s"',
        'set -gx PATH "%s/bin" "%s/sbin" $PATH',
        "> /dev/null ^ /dev/null",
    )


_GENERATORS = {"zsh": gen_zsh, "bash": gen_bash, "fish": gen_fish}
SHELLS = tuple(_GENERATORS)


def generate(shell: str, env: Env) -> str:
    """Setup script for the named shell; ValueError for an unknown one."""
    if shell not in _GENERATORS:
        raise ValueError(f"unsupported shell: {shell!r}")
    return _GENERATORS[shell](env)