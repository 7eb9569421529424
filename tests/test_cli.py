"""Tests for deeplinker.cli — CLI entrypoint, resolve and routes commands."""

import logging
from pathlib import Path

import pytest

from deeplinker.cli import main

LINKS_YAML = """\
links:
  - name: HOME
    path: ""
  - name: PROFILE
    path: profile
  - name: PROFILE_OTHER
    path: profile/{id}
  - name: SETTINGS
    path: settings
"""


@pytest.fixture
def links_file(tmp_path: Path) -> str:
    path = tmp_path / "links.yaml"
    path.write_text(LINKS_YAML, encoding="utf-8")
    return str(path)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_resolve_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", "--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "deeplinker" in capsys.readouterr().out


class TestCLIMissingArgs:
    def test_resolve_missing_uri(self, links_file: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", links_file])
        assert exc_info.value.code == 2

    def test_routes_missing_table(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2


class TestResolveCommand:
    def test_prints_destination_and_params(
        self, links_file: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["resolve", links_file, "deeplinker://example.com/profile/42"])
        out = capsys.readouterr().out
        assert "PROFILE_OTHER" in out
        assert '{"id": 42}' in out

    def test_marks_default(self, links_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", links_file, "deeplinker://example.com/unknown"])
        out = capsys.readouterr().out
        assert "HOME" in out
        assert "(default)" in out

    def test_multiple_uris(self, links_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", links_file, "x://h/profile", "x://h/settings"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        assert "PROFILE" in lines[0]
        assert "SETTINGS" in lines[1]

    def test_malformed_exits_one(self, links_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", links_file, "x://h/profile/abc", "x://h/settings"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Parameter 'id'" in captured.err
        assert "SETTINGS" in captured.out

    def test_fallback_on_malformed(self, links_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "--fallback-on-malformed", links_file, "x://h/profile/abc"])
        assert "HOME" in capsys.readouterr().out

    def test_scheme_filter(self, links_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["resolve", "--scheme", "deeplinker", links_file, "https://h/settings"])
        out = capsys.readouterr().out
        assert "HOME" in out
        assert "(default)" in out

    def test_default_option(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "links.yaml"
        path.write_text("links:\n  - name: SETTINGS\n    path: settings\n", encoding="utf-8")
        main(["resolve", "--default", "LANDING", str(path), "x://h/nope"])
        assert "LANDING" in capsys.readouterr().out

    def test_missing_table_exits_one(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", str(tmp_path / "nope.yaml"), "x://h/"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_duplicate_names_exit_one(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "links.yaml"
        path.write_text(
            "links:\n  - name: A\n    path: a\n  - name: A\n    path: b\n",
            encoding="utf-8",
        )
        with pytest.raises(SystemExit) as exc_info:
            main(["resolve", str(path), "x://h/a"])
        assert exc_info.value.code == 1
        assert "Duplicate destination name 'A'" in capsys.readouterr().err

    def test_verbose_emits_match_records(
        self, links_file: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="deeplinker"):
            main(["-v", "resolve", links_file, "x://h/profile/3"])
        assert any("Matched" in r.getMessage() for r in caplog.records)


class TestRoutesCommand:
    def test_non_utf8_table_exits_one(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "links.yaml"
        path.write_bytes(b"links:\n  - name: \xff\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(path)])
        assert exc_info.value.code == 1
        assert "not UTF-8" in capsys.readouterr().err

    def test_lists_entries_in_order(self, links_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", links_file])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["NAME", "PATH"]
        names = [line.split()[0] for line in lines[2:6]]
        assert names == ["HOME", "PROFILE", "PROFILE_OTHER", "SETTINGS"]
        assert "profile/{id}" in out
        assert "Default destination: HOME" in out

    def test_empty_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "links.yaml"
        path.write_text("links: []\n", encoding="utf-8")
        main(["routes", str(path)])
        assert "No links registered." in capsys.readouterr().out
