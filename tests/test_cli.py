import pytest

from kuttl import cli
from kuttl.version import get


@pytest.fixture(autouse=True)
def dev_version(monkeypatch):
    monkeypatch.setenv("KUTTL_DEV_VERSION", "v1.2.3")


def test_parser_prog_name():
    assert cli.build_parser().prog == "kubectl-kuttl"


def test_version_command_prints_info(capsys):
    assert cli.main(["version"]) == 0
    out = capsys.readouterr().out
    assert out == f"KUTTL Version: {get()!r}\n"
    assert "v1.2.3" in out


def test_version_flag(capsys):
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "kubectl-kuttl version v1.2.3"


def test_version_flag_dev_default(monkeypatch, capsys):
    monkeypatch.delenv("KUTTL_DEV_VERSION")
    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "kubectl-kuttl version dev"


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "CLI to Test Kubernetes" in out
    assert "kubectl kuttl version" in out


def test_unknown_command_fails(capsys):
    assert cli.main(["no-such-command"]) == 255
    assert "invalid choice" in capsys.readouterr().err


def test_help_exits_cleanly(capsys):
    assert cli.main(["version", "--help"]) == 0
    assert "Print the current installed KUTTL package version." in capsys.readouterr().out