# phpvm

A small command-line tool for switching between PHP versions installed with
Homebrew. It links the `bin` and `sbin` directories of the selected
`php@<version>` keg (looked up under `/opt/homebrew/opt/php@<version>`) into
the environment directory and keeps a record of the versions you have used or
installed, your default version and the one you are using now.

## Installation

```sh
pip install .
```

This installs the `phpvm` command. There are no runtime dependencies.

## Shell setup

Add the output of `phpvm env` to your shell start-up file:

```sh
# zsh (~/.zshrc)
eval "$(phpvm env zsh)"

# bash (~/.bashrc)
eval "$(phpvm env bash)"

# fish (~/.config/fish/config.fish)
phpvm env fish | source
```

The snippet puts `<dir>/bin` and `<dir>/sbin` in front of `PATH`, where `<dir>`
is the environment directory. Shells other than `zsh`, `bash` and `fish` print
nothing.

Options for `phpvm env`:

- `-c`, `--use-on-cd`: add a hook that runs `phpvm use` whenever you change
  directory (a `chpwd` function in zsh, a `cd` alias in bash, a `cd` event
  handler in fish), so the version follows the `require.php` constraint of each
  project's `composer.json`.
- `-m`, `--multi-shell`: give each shell its own PHP version. The snippet
  exports `PHPVM_SESSION` with a session id made of the process id and the
  current time, and the shell's links live under
  `~/.local/state/phpvm_multishell/<session>`. With this option the snippet
  runs `phpvm use` when the shell starts; without it, `phpvm default`.
- `-n`, `--now`: accepted, but it does not change the snippet; which command
  runs at start-up is decided by `--multi-shell` alone.

## Commands

```sh
phpvm install 8.3           # brew install php@8.3 and record it
phpvm install 8.3 --use     # ...and switch to it
phpvm install 8.3 --default # ...and make it the default

phpvm use 8.2               # switch to an installed version and record it
phpvm use                   # pick a version from composer.json
phpvm use 8.2 --default     # switch and make it the default

phpvm default               # switch to the default version
phpvm cd                    # apply the composer.json requirement of the current directory
phpvm version               # print "PHPVM version 1.1.1"
```

Short aliases: `i` for `install`, `u` for `use`, `d` for `default`.

Details:

- `install` skips `brew` when the keg already exists; it then prints
  `Version <v> already installed` unless `--use` is given. Either way the
  version is added to the recorded list.
- `use` with no version reads `require.php` from `composer.json` in the current
  directory. If the version current in this shell already satisfies it, nothing
  changes. Otherwise the newest recorded version that satisfies it is used. If
  there is no `composer.json`, no requirement or no match, the default version
  is used, and the command exits with status 1 when there is no default.
- `default` exits with an error when the configuration file is missing or no
  default is set.
- `cd` prints `cd called` and then switches as `use` without a version does,
  but silently and without falling back to the default.

Carets are removed from the `require.php` value before it is read, so `^8.1`
is treated as `8.1`, which matches any `8.1.x`.

## Files

- `~/.phpvm/config.json` holds the default version, the current version and the
  list of recorded versions.
- `config.json` in the environment directory (`~/.phpvm`, or the per-session
  directory in multi-shell mode) records the version active in that shell.

## Using it from Python

The pieces behind the command can be used directly:

- `phpvm.constraints.Version.parse` and `phpvm.constraints.Constraint.parse`
  read semantic versions and constraints (`=`, `!=`, `>`, `<`, `>=`, `<=`,
  `~`, `^`, `~>`, `=>`, `=<`, wildcards `x`/`X`/`*`, hyphen ranges
  `1.0 - 2.0`, terms joined by commas or spaces, alternatives joined by `||`).
  `Constraint.check` returns a boolean and `Constraint.validate` the list of
  reasons a version fails.
- `phpvm.shells.generate(shell, env)` returns the setup script for `zsh`,
  `bash` or `fish` from a `phpvm.shells.Env`, and raises `ValueError` for any
  other shell.
- `phpvm.composer.get_appropriate_version(directory)` and
  `set_appropriate_version(directory)` do the `composer.json` matching for a
  given directory.
- `phpvm.config.get_config()` returns a `Config` with `default`, `current` and
  `versions`; `Config.save()` writes it back.

## What it does not do

phpvm only switches between versions Homebrew has installed under
`/opt/homebrew/opt`. It has no command to uninstall a version or to list the
recorded versions, and it does not download or build PHP itself.