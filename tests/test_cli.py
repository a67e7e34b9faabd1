import pytest

from sdkvm.cli import help_text, main


def test_help_text_for_error_starts_with_banner():
    text = help_text(True)
    assert text.splitlines()[1] == "This is an incorrect parameter"
    assert text.endswith(help_text(False))


def test_help_text_mentions_version():
    assert "Version: 0.0.1" in help_text(False)


def test_main_help(capsys):
    assert main(["help"]) == 0
    assert capsys.readouterr().out == help_text(False)


@pytest.mark.parametrize("argv", [[], ["help", "extra"], ["use", "jdk"], ["bogus"]])
def test_main_bad_arguments_prints_error_help(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == help_text(True)


def test_main_show_lists_repository(tmp_path, monkeypatch, capsys):
    repo = tmp_path / "repo"
    (repo / "jdk" / "17").mkdir(parents=True)
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "application.properties").write_text(
        f"repositoryBasePath={repo}\n", encoding="utf-8"
    )
    work = tmp_path / "bin"
    work.mkdir()
    monkeypatch.chdir(work)
    assert main(["show"]) == 0
    assert capsys.readouterr().out == "jdk\t17\n"


def test_main_show_without_config(tmp_path, monkeypatch, capsys):
    work = tmp_path / "bin"
    work.mkdir()
    monkeypatch.chdir(work)
    assert main(["show"]) == 1
    assert "Failed to open file" in capsys.readouterr().err


def test_main_use_without_config_reports(tmp_path, monkeypatch, capsys):
    work = tmp_path / "bin"
    work.mkdir()
    monkeypatch.chdir(work)
    assert main(["use", "jdk", "17"]) == 0
    assert "Config load failed" in capsys.readouterr().err