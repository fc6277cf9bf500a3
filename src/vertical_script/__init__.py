"""Top-level package for the vertical script editor core.

Provides subpackages:
- vertical_script.layout – geometry, column wrapping and page composition
- vertical_script.attention – overflow attention tracking and layout status
- vertical_script.output – PDF export (finalize output)
- vertical_script.core – document model and versioned file format
- vertical_script.settings – persisted application settings
"""
from pathlib import Path

DIST_NAME = "vertical-script"


def _version_from_pyproject(pyproject: Path) -> str:
    """Read ``version`` from the [project] table of a source checkout."""
    in_project = False
    for line in pyproject.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if stripped.startswith("["):
            in_project = stripped == "[project]"
        elif in_project and stripped.split("=", 1)[0].strip() == "version":
            return stripped.split("=", 1)[1].strip().strip('"').strip("'")
    return "0.0.0"


def _get_version() -> str:
    """Installed distribution version, else the checkout's pyproject.toml."""
    from importlib.metadata import version as pkg_version, PackageNotFoundError
    try:
        return pkg_version(DIST_NAME)
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        return _version_from_pyproject(pyproject)
    return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
