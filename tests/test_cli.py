from unittest.mock import patch

import pytest

from vidcheck import cli


@pytest.fixture
def ids_file(tmp_path):
    path = tmp_path / "ids.txt"
    path.write_text("youtu.be/abcdefghijk,https://youtu.be/OgNdaaaaaaa,Snaaaaaaaaa\n")
    return path


def test_no_file_prints_usage(capsys):
    assert cli.main([]) == 0
    assert "Please provide a file as an argument." in capsys.readouterr().out


def test_missing_file_is_fatal(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.txt"), "--no-prompt"]) == 1
    assert "Couldn't read" in capsys.readouterr().err


def test_no_prompt_reports_without_copying(ids_file, capsys):
    with patch("vidcheck.cli.copy_urls") as copy:
        assert cli.main([str(ids_file), "--no-prompt"]) == 0
    out = capsys.readouterr().out
    assert "abcdefghijk: Succeeded with the attomic number (152) with the format V VII." in out
    assert "OgNdaaaaaaa: Accumulated attomic number exceeded limits." in out
    assert "Found 2 valid URLs." in out
    copy.assert_not_called()


def test_yes_copies_accepted_urls(ids_file):
    with patch("vidcheck.cli.copy_urls", return_value=True) as copy:
        assert cli.main([str(ids_file), "--yes"]) == 0
    (urls,), _ = copy.call_args
    assert sorted(urls) == ["youtu.be/Snaaaaaaaaa", "youtu.be/abcdefghijk"]


def test_prompt_accepts_y(ids_file, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "y")
    with patch("vidcheck.cli.copy_urls", return_value=True) as copy:
        assert cli.main([str(ids_file)]) == 0
    copy.assert_called_once()


def test_prompt_declined(ids_file, monkeypatch, capsys):
    answers = iter(["n", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    with patch("vidcheck.cli.copy_urls") as copy:
        assert cli.main([str(ids_file)]) == 0
    copy.assert_not_called()
    assert "without copying" in capsys.readouterr().out


def test_no_valid_ids(tmp_path, monkeypatch, capsys):
    path = tmp_path / "ids.txt"
    path.write_text("Laaaaaaaaaa,short")
    monkeypatch.setattr("builtins.input", lambda prompt="": "")
    assert cli.main([str(path)]) == 0
    assert "without finding any valid URLs" in capsys.readouterr().out


def test_tokens_normalized_once(tmp_path, capsys):
    path = tmp_path / "ids.txt"
    path.write_text("ww/w.abcdefghijk")
    assert cli.main([str(path), "--no-prompt"]) == 0
    out = capsys.readouterr().out
    assert "www.abcdefghijk: Video ID was not the right length." in out
    assert "without finding any valid URLs" in out


def test_unknown_log_level_is_fatal(ids_file, capsys):
    assert cli.main([str(ids_file), "--no-prompt", "--log-level", "chatty"]) == 1
    assert "Unknown log level" in capsys.readouterr().err
