"""Tests for the vanityurls command line."""

import pytest

from vanityurls.cli import main

DOCUMENT = """\
host: example.org
paths:
  /pkg:
    repo: https://github.com/acme/pkg
  /pkg/v2:
    repo: https://github.com/acme/pkg-v2
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("PORT", "HOST", "VANITY_CONFIG", "VANITY_CONFIG_URL", "VANITY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "vanity.yaml"
    path.write_text(DOCUMENT)
    return path


def test_no_command_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 0
    assert "usage: vanityurls" in capsys.readouterr().out


def test_resolve_requires_path() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["resolve"])
    assert exc_info.value.code == 2


def test_config_and_url_are_exclusive() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["check", "--config", "a.yaml", "--url", "https://x"])
    assert exc_info.value.code == 2


class TestCheck:
    def test_lists_entries(self, config_file, capsys) -> None:
        main(["check", "--config", str(config_file)])

        out = capsys.readouterr().out
        assert "host: example.org" in out
        assert "cache-control: public, max-age=86400" in out
        assert "2 path(s):" in out
        assert "/pkg/v2  git  https://github.com/acme/pkg-v2" in out

    def test_uses_environment(self, config_file, monkeypatch, capsys) -> None:
        monkeypatch.setenv("VANITY_CONFIG", str(config_file))
        main(["check"])
        assert "2 path(s):" in capsys.readouterr().out

    def test_invalid_config_exits_1(self, tmp_path, capsys) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("cache_max_age: -5\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--config", str(path)])

        assert exc_info.value.code == 1
        assert "cache_max_age is negative" in capsys.readouterr().err

    def test_missing_file_exits_1(self, tmp_path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--config", str(tmp_path / "nope.yaml")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestResolve:
    def test_longest_prefix(self, config_file, capsys) -> None:
        main(["resolve", "/pkg/v2/internal", "--config", str(config_file)])

        out = capsys.readouterr().out
        assert "path:    /pkg/v2" in out
        assert "subpath: internal" in out
        assert "import:  example.org/pkg/v2" in out

    def test_no_match_exits_1(self, config_file, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "/other", "--config", str(config_file)])
        assert exc_info.value.code == 1
        assert "/other: no match" in capsys.readouterr().err


class TestServe:
    def test_bad_config_exits_before_binding(self, tmp_path, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["serve", "--config", str(tmp_path / "nope.yaml")])
        assert exc_info.value.code == 1
