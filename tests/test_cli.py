"""
Tests for the command line interface.
"""

import json

import pytest

from vertical_script.cli import EXIT_FAILURE, EXIT_OK, EXIT_OVERFLOW_REFUSED, main
from vertical_script.core.models import DocumentState, ScriptRecord
from vertical_script.core.utils.serialization import save_document


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "settings" / "appsettings.json")


@pytest.fixture
def fitting_file(tmp_path, sample_document):
    path = tmp_path / "fitting.json"
    save_document(path, sample_document)
    return path


@pytest.fixture
def overflowing_file(tmp_path):
    path = tmp_path / "overflowing.json"
    save_document(path, DocumentState(records=[ScriptRecord("A", "ok"), ScriptRecord("B", "字" * 5000)]))
    return path


class TestLayoutCommand:

    def test_layout_when_fitting_then_summary_and_ok(self, capsys, settings_path, fitting_file):
        code = main(["--settings", settings_path, "layout", str(fitting_file)])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Pages: 1" in out
        assert "Records: 3" in out
        assert "Overflow: none" in out

    def test_layout_when_overflow_then_listed_and_failure(self, capsys, settings_path, overflowing_file):
        code = main(["--settings", settings_path, "layout", str(overflowing_file)])

        out = capsys.readouterr().out
        assert code == EXIT_FAILURE
        assert "1 record(s) do not fit on one page: 2" in out

    def test_layout_when_json_then_status_object(self, capsys, settings_path, overflowing_file):
        main(["--settings", settings_path, "layout", str(overflowing_file), "--json"])

        status = json.loads(capsys.readouterr().out)
        assert status["overflowRecords"] == [1]
        assert status["currentPage"] == 1

    def test_layout_when_file_missing_then_failure(self, tmp_path, settings_path):
        code = main(["--settings", settings_path, "layout", str(tmp_path / "missing.json")])

        assert code == EXIT_FAILURE

    def test_layout_when_file_not_utf8_then_failure(self, tmp_path, settings_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"version": 1, "document": {"records": [{"body": "\xff\xfe"}]}}')

        code = main(["--settings", settings_path, "layout", str(path)])

        assert code == EXIT_FAILURE

    def test_layout_when_role_label_chars_not_positive_then_usage_error(self, settings_path, fitting_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["--settings", settings_path, "--role-label-chars", "0", "layout", str(fitting_file)])

        assert exc_info.value.code == 2


class TestExportCommand:

    def test_export_when_fitting_then_pdf_written(self, tmp_path, settings_path, fitting_file):
        output = tmp_path / "out.pdf"

        code = main(["--settings", settings_path, "export", str(fitting_file), str(output)])

        assert code == EXIT_OK
        assert output.read_bytes().startswith(b"%PDF")

    def test_export_when_overflow_then_refused(self, tmp_path, settings_path, overflowing_file):
        output = tmp_path / "out.pdf"

        code = main(["--settings", settings_path, "export", str(overflowing_file), str(output)])

        assert code == EXIT_OVERFLOW_REFUSED
        assert not output.exists()

    def test_export_when_output_unwritable_then_failure(self, tmp_path, settings_path, fitting_file):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        code = main(["--settings", settings_path, "export", str(fitting_file), str(blocker / "out.pdf")])

        assert code == EXIT_FAILURE
