"""Tests for the CLI commands, called directly."""

import json
from pathlib import Path

import pytest

from dds.cli.commands import config, demo, isbn


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for var in ("DDS_CONFIG_FILE", "DDS_DEMO__NAME", "DDS_DEMO__METADATA"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestDemoCommand:
    def test_student_metadata_survives_tampering(self, capsys: pytest.CaptureFixture[str]) -> None:
        demo.demo()

        out = capsys.readouterr().out
        assert "Johan" in out
        assert "Stockholm" in out  # caller's own mapping did change
        assert "Truesec" in out
        assert "Student metadata unchanged" in out

    def test_uses_configured_demo_data(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config_file = tmp_path / "dds.yaml"
        config_file.write_text("demo:\n  name: Grace\n  id: 7\n  metadata:\n    Navy: Rear Admiral\n")
        monkeypatch.setenv("DDS_CONFIG_FILE", str(config_file))

        demo.demo()

        out = capsys.readouterr().out
        assert "Grace" in out
        assert "Rear Admiral" in out
        assert "Student metadata unchanged" in out


class TestIsbnCommand:
    def test_valid_isbns_print_canonical_form(self, capsys: pytest.CaptureFixture[str]) -> None:
        isbn.isbn("0-596-52068-9", "ISBN 978-0-596-52068-7")

        out = capsys.readouterr().out
        assert "0596520689" in out
        assert "9780596520687" in out

    def test_invalid_isbn_exits_nonzero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            isbn.isbn("0-596-52068-9", "0 512 52068 9")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "0596520689" in captured.out
        assert "checksum" in captured.err


class TestConfigCommand:
    def test_show_prints_effective_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        config.show()

        shown = json.loads(capsys.readouterr().out)
        assert shown["demo"]["name"] == "Johan"
        assert shown["logging"]["level"] == "INFO"

    def test_validate_accepts_good_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "dds.yaml"
        path.write_text("logging:\n  level: DEBUG\n")

        config.validate(path)

        assert "is valid" in capsys.readouterr().out

    def test_validate_rejects_bad_file(self, tmp_path: Path) -> None:
        path = tmp_path / "dds.yaml"
        path.write_text("demo:\n  id: not-a-number\n")

        with pytest.raises(SystemExit) as exc_info:
            config.validate(path)

        assert exc_info.value.code == 1

    def test_validate_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            config.validate(tmp_path / "missing.yaml")
