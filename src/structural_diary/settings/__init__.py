"""Persistent diary preferences."""

from .store import SETTING_KEYS, DiarySettings, SettingsStore, coerce_setting

__all__ = ["SETTING_KEYS", "DiarySettings", "SettingsStore", "coerce_setting"]
