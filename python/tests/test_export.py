"""
Unit tests for password export.
"""

from datetime import datetime

import pytest

from passforge.config import GeneratorConfig
from passforge.exceptions import ExportError
from passforge.export import default_filename, export_passwords, format_export


WHEN = datetime(2024, 1, 31, 23, 59, 59)


class TestExport:
    """Test export file format and writing."""

    def test_default_filename(self):
        """Test the timestamped default file name."""
        assert default_filename(WHEN) == "passwords_20240131_235959.txt"

    def test_format_header_and_lines(self):
        """Test header and numbered password lines."""
        config = GeneratorConfig(length=12, include_special=False)
        text = format_export(["aB3$fG7!jK2@", "aaaaaaaa"], config, WHEN)
        lines = text.splitlines()

        assert lines[0] == "# Generated passwords"
        assert lines[1] == "# Date: 2024-01-31 23:59:59"
        assert lines[2] == "# Settings: length=12, types=lowercase, uppercase, digits"
        assert lines[3] == "#" + "=" * 50
        assert lines[4] == ""
        assert lines[5] == "1. aB3$fG7!jK2@ (Strong)"
        assert lines[6] == "2. aaaaaaaa (Very weak)"
        assert text.endswith("\n")

    def test_export_writes_file(self, tmp_path):
        """Test writing to an explicit path."""
        target = tmp_path / "out.txt"
        path = export_passwords(["abc", "def"], GeneratorConfig(), target, WHEN)

        assert path == target
        content = target.read_text(encoding="utf-8")
        assert "1. abc (" in content
        assert "2. def (" in content

    def test_export_default_location(self, tmp_path, monkeypatch):
        """Test the default file lands in the working directory."""
        monkeypatch.chdir(tmp_path)
        path = export_passwords(["abc"], GeneratorConfig(), now=WHEN)

        assert path.name == "passwords_20240131_235959.txt"
        assert (tmp_path / path.name).exists()

    def test_export_accepts_iterators(self, tmp_path):
        """Test a generator expression can be exported."""
        target = tmp_path / "gen.txt"
        export_passwords((p for p in ["x1", "y2"]), GeneratorConfig(), target, WHEN)
        assert "2. y2" in target.read_text(encoding="utf-8")

    def test_export_error(self, tmp_path):
        """Test unwritable destinations raise ExportError."""
        with pytest.raises(ExportError):
            export_passwords(["abc"], GeneratorConfig(), tmp_path, WHEN)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
