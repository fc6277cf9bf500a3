from vertical_script import __version__, _version_from_pyproject


def test_version_from_pyproject_when_other_table_first_then_project_version(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[tool.other]\nversion = "9.9.9"\n\n[project]\nname = "x"\nversion = "1.2.3"\n\n'
        '[tool.after]\nversion = "0.0.1"\n',
        encoding="utf-8",
    )

    assert _version_from_pyproject(pyproject) == "1.2.3"


def test_version_from_pyproject_when_no_project_table_then_fallback(tmp_path):
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[tool.other]\nversion = "9.9.9"\n', encoding="utf-8")

    assert _version_from_pyproject(pyproject) == "0.0.0"


def test_package_version_when_imported_then_set():
    assert __version__ == "0.3.0"
