import json
import subprocess

import pytest

from phpvm.cli import build_parser, main


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    (home_dir / ".phpvm").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("PHPVM_SESSION", raising=False)
    opt = tmp_path / "opt"
    opt.mkdir()
    monkeypatch.setattr("phpvm.versions.BREW_OPT_DIR", opt)
    return home_dir


def _install(home, version):
    base = home.parent / "opt" / f"php@{version}"
    (base / "bin").mkdir(parents=True)
    (base / "sbin").mkdir()
    return base


def _config(home):
    return json.loads((home / ".phpvm" / "config.json").read_text())


def _write_config(home, **data):
    (home / ".phpvm" / "config.json").write_text(json.dumps(data))


def test_version_command(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == "PHPVM version 1.1.1"


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "phpvm" in capsys.readouterr().out


def test_parser_aliases():
    parser = build_parser()
    args = parser.parse_args(["i", "8.2", "-u"])
    assert args.version == "8.2"
    assert args.use is True
    assert args.default is False


def test_use_installed_version(home, capsys):
    base = _install(home, "8.2")
    assert main(["use", "8.2"]) == 0
    assert "Version 8.2 set successfully" in capsys.readouterr().out
    assert (home / ".phpvm" / "bin").resolve() == (base / "bin").resolve()
    config = _config(home)
    assert config["current"] == "8.2"
    assert config["versions"] == ["8.2"]
    assert config["default"] == ""


def test_use_with_default_flag(home):
    _install(home, "8.3")
    assert main(["u", "8.3", "--default"]) == 0
    assert _config(home)["default"] == "8.3"


def test_use_missing_version(home, capsys):
    assert main(["use", "9.9"]) == 1
    assert "Version 9.9 does not exist" in capsys.readouterr().out


def test_use_without_composer_or_default_fails(home, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["use"]) == 1


def test_use_falls_back_to_default(home, tmp_path, monkeypatch):
    _install(home, "8.1")
    _write_config(home, default="8.1", current="", versions=["8.1"])
    monkeypatch.chdir(tmp_path)
    assert main(["use"]) == 0
    assert _config(home)["current"] == "8.1"


def test_default_without_config(home, capsys):
    assert main(["default"]) == 1
    assert "Config file does not exist" in capsys.readouterr().err


def test_default_without_default_version(home, capsys):
    _write_config(home, default="", current="", versions=[])
    assert main(["d"]) == 1
    assert "no default version set" in capsys.readouterr().err


def test_default_applies_version(home):
    base = _install(home, "8.2")
    _write_config(home, default="8.2", current="", versions=["8.2"])
    assert main(["default"]) == 0
    assert _config(home)["current"] == "8.2"
    assert (home / ".phpvm" / "sbin").resolve() == (base / "sbin").resolve()


def test_install_already_installed(home, capsys):
    _install(home, "8.2")
    assert main(["install", "8.2", "-d"]) == 0
    assert "Version 8.2 already installed" in capsys.readouterr().out
    config = _config(home)
    assert config["versions"] == ["8.2"]
    assert config["default"] == "8.2"


def test_install_runs_brew(home, monkeypatch, capsys):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        _install(home, "8.3")
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert main(["install", "8.3", "--use"]) == 0
    assert calls == [["brew", "install", "php@8.3"]]
    assert "Version 8.3 installed" in capsys.readouterr().out
    config = _config(home)
    assert config["current"] == "8.3"
    assert config["versions"] == ["8.3"]


def test_install_brew_failure(home, monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert main(["install", "8.0"]) == 1
    assert not (home / ".phpvm" / "config.json").exists()


def test_env_zsh(home, capsys):
    assert main(["env", "zsh"]) == 0
    out = capsys.readouterr().out
    phpvm_dir = home / ".phpvm"
    assert f'export PATH="{phpvm_dir}/bin:{phpvm_dir}/sbin:$PATH"' in out
    assert "phpvm default &>/dev/null" in out


def test_env_multi_shell(home, capsys):
    assert main(["env", "bash", "-m", "-c"]) == 0
    out = capsys.readouterr().out
    assert "phpvm_multishell" in out
    assert "export PHPVM_SESSION=" in out
    assert "alias cd=__phpvmcd" in out


def test_env_unknown_shell_prints_nothing(home, capsys):
    assert main(["env", "tcsh"]) == 0
    assert capsys.readouterr().out == ""


def test_cd_switches_to_matching_version(home, tmp_path, monkeypatch, capsys):
    _install(home, "8.2")
    _write_config(home, default="", current="", versions=["8.2"])
    project = tmp_path / "project"
    project.mkdir()
    (project / "composer.json").write_text(json.dumps({"require": {"php": ">=8.1"}}))
    monkeypatch.chdir(project)
    assert main(["cd"]) == 0
    assert "cd called" in capsys.readouterr().out
    assert _config(home)["current"] == "8.2"


def test_cd_without_composer_is_harmless(home, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["cd"]) == 0
    assert capsys.readouterr().out.strip() == "cd called"