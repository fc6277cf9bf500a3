"""Persisted application settings."""

from .store import AppSettings, SettingsStore, get_settings_path

__all__ = ["AppSettings", "SettingsStore", "get_settings_path"]
