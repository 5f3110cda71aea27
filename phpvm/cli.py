"""The phpvm command line."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from collections.abc import Sequence

from .collections import uniq_append
from .composer import get_appropriate_version, set_appropriate_version
from .config import config_exists, get_config
from .dirs import SESSION_VARIABLE, PhpvmError, get_env_dir
from .shells import Env, generate
from .versions import set_version, version_exists

VERSION_TEXT = "PHPVM version 1.1.1"


def _fail(message: object) -> int:
    print(message, file=sys.stderr)
    return 1


def _cmd_cd(args: argparse.Namespace) -> int:
    print("cd called")
    try:
        set_appropriate_version()
    except (PhpvmError, ValueError):
        pass
    return 0


def _cmd_default(args: argparse.Namespace) -> int:
    try:
        exists = config_exists()
    except (PhpvmError, OSError):
        exists = False
    if not exists:
        return _fail("Config file does not exist")

    config = get_config()
    if not config.default:
        return _fail("no default version set")

    try:
        set_version(config.default)
    except (PhpvmError, OSError) as exc:
        return _fail(exc)
    config.set_current(config.default)
    return 0


def _cmd_env(args: argparse.Namespace) -> int:
    session = f"{os.getpid()}_{time.time_ns() // 1000}"
    os.environ[SESSION_VARIABLE] = session if args.multi_shell else ""

    try:
        directory = get_env_dir()
    except PhpvmError:
        return 1

    env = Env(
        dir=directory,
        use_on_cd=args.use_on_cd,
        multi_shell=args.multi_shell,
        # A multi-shell session selects its version straight away.
        now=args.multi_shell,
        session_id=session,
    )
    try:
        print(generate(args.shell, env))
    except ValueError:
        pass
    return 0


def _record(version: str, use: bool, make_default: bool) -> int:
    config = get_config()
    config.versions = uniq_append(config.versions, version)
    if use:
        try:
            set_version(version)
        except (PhpvmError, OSError) as exc:
            return _fail(exc)
        config.current = version
    if make_default:
        config.default = version
    config.save()
    return 0


def _cmd_install(args: argparse.Namespace) -> int:
    version = args.version
    if version_exists(version):
        if not args.use:
            print(f"Version {version} already installed")
        return _record(version, args.use, args.default)

    try:
        subprocess.run(
            ["brew", "install", f"php@{version}"],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        return _fail(exc)

    print(f"Version {version} installed")
    return _record(version, args.use, args.default)


def _cmd_use(args: argparse.Namespace) -> int:
    config = get_config()
    if args.version is not None:
        version = args.version
    else:
        try:
            found = get_appropriate_version()
        except (PhpvmError, ValueError):
            if not config.default:
                return 1
            found = config.default
        if found is None:
            # The current version already satisfies the project.
            return 0
        version = found

    if not version_exists(version):
        print(f"Version {version} does not exist")
        return 1

    try:
        set_version(version)
    except (PhpvmError, OSError) as exc:
        print(f"Error setting version: {version}\n{exc}", end="")
        return 1

    print(f"Version {version} set successfully")
    config.versions = uniq_append(config.versions, version)
    if args.default:
        config.default = version
    config.current = version
    config.save()
    return 0


def _cmd_print(args: argparse.Namespace) -> int:
    print(args.message)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for all phpvm commands."""
    parser = argparse.ArgumentParser(
        prog="phpvm", description="A simple CLI tool for managing your PHP version"
    )
    commands = parser.add_subparsers(dest="command")

    cd = commands.add_parser("cd", help="Use composer php requirements")
    cd.set_defaults(handler=_cmd_cd)

    default = commands.add_parser("default", aliases=["d"], help="Apply default version")
    default.set_defaults(handler=_cmd_default)

    env = commands.add_parser(
        "env", help="Print and set up required environment variables for"
    )
    env.add_argument("shell")
    env.add_argument("-c", "--use-on-cd", action="store_true", help="Use phpvm cd on cd")
    env.add_argument(
        "-m", "--multi-shell", action="store_true", help="Different phpversion per shell"
    )
    env.add_argument("-n", "--now", action="store_true", help="run phpvm use now")
    env.set_defaults(handler=_cmd_env)

    install = commands.add_parser("install", aliases=["i"], help="Install a version of PHP")
    install.add_argument("version")
    install.add_argument(
        "-u", "--use", action="store_true", help="Set as the version once installed"
    )
    install.add_argument(
        "-d", "--default", action="store_true", help="Set as the version as the default version"
    )
    install.set_defaults(handler=_cmd_install)

    use = commands.add_parser("use", aliases=["u"], help="Set a version of PHP to use")
    use.add_argument("version", nargs="?")
    use.add_argument(
        "-d", "--default", action="store_true", help="Set as the version as the default version"
    )
    use.set_defaults(handler=_cmd_use)

    version = commands.add_parser("version", help="Show current version")
    version.set_defaults(handler=_cmd_print, message=VERSION_TEXT)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run phpvm and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())