"""
Settings persistence for the editor.

This module handles persistent application preferences with robust
error handling. Any malformed data results in a graceful fallback to
defaults, never an exception at load time.
"""
import json
import logging
import math
import os
import platform
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from vertical_script.layout.config import LayoutSettings

logger = logging.getLogger(__name__)

APP_DIR_NAME = "VerticalScenarioEditor"
SETTINGS_FILE_NAME = "appsettings.json"


def _positive_number(value: Any) -> Optional[float]:
    """Finite positive float from a JSON number, or None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        # integers beyond float range
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


@dataclass
class AppSettings:
    zoom_scale: float = 1.0
    role_label_height_chars: float = 4.0
    show_break_markers: bool = False

    @staticmethod
    def validated_role_label_height(value: Any) -> float:
        """
        Parse a role label height entered by the user.

        Raises:
            ValueError: If the value is not a number or not positive
        """
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"Role label height must be a number: {value!r}") from e
        if not math.isfinite(number) or number <= 0:
            raise ValueError(f"Role label height must be greater than 0: {value!r}")
        return number

    def layout_settings(self, base: Optional[LayoutSettings] = None) -> LayoutSettings:
        """Layout settings with this role label band height applied."""
        return (base or LayoutSettings()).with_role_label_chars(self.role_label_height_chars)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppSettings":
        """Build settings, keeping defaults for missing or mistyped fields."""
        defaults = cls()
        values: Dict[str, Any] = {}
        for f in fields(cls):
            default = getattr(defaults, f.name)
            value = data.get(f.name, default)
            if isinstance(default, bool):
                values[f.name] = value if isinstance(value, bool) else default
            else:
                number = _positive_number(value)
                if number is None:
                    if f.name in data:
                        logger.warning(f"Ignoring invalid setting {f.name}={value!r}")
                    number = default
                values[f.name] = number
        return cls(**values)


def get_settings_path() -> Path:
    """
    Default location of the settings file.

    Windows: %APPDATA%/VerticalScenarioEditor/appsettings.json
    macOS:   ~/Library/Application Support/VerticalScenarioEditor/appsettings.json
    Other:   $XDG_CONFIG_HOME (or ~/.config)/VerticalScenarioEditor/appsettings.json
    """
    system = platform.system()
    if system == "Windows":
        base = os.environ.get("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Roaming"
    elif system == "Darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        base = os.environ.get("XDG_CONFIG_HOME")
        root = Path(base) if base else Path.home() / ".config"
    return root / APP_DIR_NAME / SETTINGS_FILE_NAME


class SettingsStore:
    """Lightweight JSON-backed store for persisting editor preferences."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else get_settings_path()
        self.settings = AppSettings()
        self.load_error: Optional[str] = None
        self.load()

    def load(self) -> AppSettings:
        """Reload from disk; any failure falls back to defaults."""
        self.settings = AppSettings()
        self.load_error = None

        if not self.path.exists():
            return self.settings

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                self.settings = AppSettings.from_dict(data)
            else:
                self.load_error = "Settings file does not contain an object"
        except json.JSONDecodeError as e:
            self.load_error = f"Settings file is corrupted: {e}"
        except Exception as e:
            self.load_error = f"Failed to read settings: {e}"
            self.settings = AppSettings()

        if self.load_error:
            logger.warning(f"{self.load_error}; using defaults")
        return self.settings

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(self.settings), indent=2), encoding="utf-8")
        logger.debug(f"Saved settings to {self.path}")

    def set_role_label_height_chars(self, value: Any) -> None:
        """Validate, apply and persist a new role label band height."""
        self.settings.role_label_height_chars = AppSettings.validated_role_label_height(value)
        self.save()
