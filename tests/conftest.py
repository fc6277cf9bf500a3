import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import vertical_script
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from vertical_script.core.models import DocumentState, ScriptRecord
from vertical_script.layout import LayoutSettings


# Common test fixtures
@pytest.fixture
def grid_settings():
    """
    Settings with a simple integer grid.

    Page 100 x 120, no margins, 10pt cells, 2-cell role band:
    10 columns per page, 10 body characters per column, 1-column gap.
    """
    return LayoutSettings(
        page_width=100,
        page_height=120,
        margin_left=0,
        margin_right=0,
        margin_top=0,
        margin_bottom=0,
        column_advance=10,
        role_label_chars=2,
        record_gap_chars=1,
        page_gap=5,
        font_size=10,
    )


@pytest.fixture
def record_factory():
    def _create(columns: int = 1, chars_per_column: int = 10, role: str = "A"):
        """Record whose body wraps to exactly `columns` full columns."""
        return ScriptRecord(role, "あ" * (columns * chars_per_column))
    return _create


@pytest.fixture
def sample_document():
    return DocumentState(
        records=[
            ScriptRecord("太郎", "おはようございます。"),
            ScriptRecord("花子", "おはよう。\n今日は早いね。"),
            ScriptRecord("ト書き", ""),
        ],
        page_number_enabled=True,
        role_dictionary={"太郎": "#ff0000"},
    )
