"""
Settings persistence model.

This module handles all persistent diary preferences with robust error
handling. Any malformed data should result in graceful fallback to
defaults, never an exception at load time.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal

from structural_diary.builder.selection import (
    DEFAULT_GLOBAL_QUOTA,
    SelectionConfig,
    SelectionMode,
    parse_template,
)

logger = logging.getLogger(__name__)

# Keys written by the original note-taking plugin's data.json
LEGACY_KEYS = {
    "fileWithQuestions": "questions_file",
    "questionsTemplate": "questions_template",
    "showHeaders": "show_headers",
    "useAdvancedTemplate": "use_advanced_template",
    "globalNumberOfQuestions": "global_number_of_questions",
}

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass
class DiarySettings:
    questions_file: Optional[str] = None
    questions_template: str = ""
    show_headers: bool = False
    use_advanced_template: bool = False
    global_number_of_questions: int = DEFAULT_GLOBAL_QUOTA

    @property
    def selection_mode(self) -> SelectionMode:
        return SelectionMode.TEMPLATE if self.use_advanced_template else SelectionMode.GLOBAL

    def to_selection_config(self) -> SelectionConfig:
        """Build the sampler configuration these settings describe."""
        return SelectionConfig(
            mode=self.selection_mode,
            global_quota=max(0, self.global_number_of_questions),
            template=parse_template(self.questions_template),
            include_headers=self.show_headers,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SETTING_KEYS = tuple(f.name for f in fields(DiarySettings))


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def coerce_setting(key: str, value: Any) -> Any:
    """
    Convert a raw value (e.g. a command line string) to the setting's type.

    Raises:
        KeyError: If ``key`` is not a known setting
        ValueError: If the value cannot be converted or is out of range
    """
    if key not in SETTING_KEYS:
        raise KeyError(f"Unknown setting {key!r} (expected one of: {', '.join(SETTING_KEYS)})")

    if key in ("show_headers", "use_advanced_template"):
        parsed = _parse_bool(value)
        if parsed is None:
            raise ValueError(f"{key} expects true/false, got {value!r}")
        return parsed

    if key == "global_number_of_questions":
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} expects an integer, got {value!r}") from None
        if number < 0:
            raise ValueError(f"{key} must be non-negative: {number}")
        return number

    if key == "questions_file":
        text = "" if value is None else str(value).strip()
        return text or None

    return "" if value is None else str(value)


class SettingsStore(QObject):
    """Lightweight JSON-backed store for persisting diary preferences."""

    settingsChanged = Signal(str)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = Path(path)
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
                if not isinstance(self.data, dict):
                    raise ValueError("settings root is not an object")
                self._migrate()
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted: {e}"
                self.data = {}
            except (OSError, ValueError) as e:
                self._load_error = f"Failed to read settings: {e}"
                self.data = {}

        if self._load_error:
            logger.warning(f"{self._load_error}. Using defaults")

        # New or unreadable file: start from explicit defaults
        if "version" not in self.data:
            self.data = {"version": self.CURRENT_VERSION, **DiarySettings().to_dict()}

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def _migrate(self) -> None:
        """Bring stored settings up to the current layout.

        Settings saved before the global mode existed always used the
        per-section template, so a stored file without the
        use_advanced_template key keeps template mode.
        """
        changed = False
        for legacy, key in LEGACY_KEYS.items():
            if legacy in self.data:
                value = self.data.pop(legacy)
                self.data.setdefault(key, value)
                changed = True

        if "use_advanced_template" not in self.data:
            self.data["use_advanced_template"] = True
            changed = True

        if self.data.get("version") != self.CURRENT_VERSION:
            self.data["version"] = self.CURRENT_VERSION
            changed = True

        if changed:
            logger.debug(f"Migrated settings at {self.path}")
            self._save()

    def get_settings(self) -> DiarySettings:
        """Get settings with robust error handling.

        Each malformed field falls back to its default on its own.
        Never raises.
        """
        defaults = DiarySettings()
        values: Dict[str, Any] = {}
        for key in SETTING_KEYS:
            raw = self.data.get(key)
            if raw is None:
                continue
            try:
                values[key] = coerce_setting(key, raw)
            except ValueError as e:
                logger.warning(f"Ignoring stored {key}: {e}")
        return replace(defaults, **values)

    def set_settings(self, settings: DiarySettings) -> None:
        self.update(**settings.to_dict())

    def update(self, **changes: Any) -> DiarySettings:
        """
        Change one or more settings and persist them.

        Emits settingsChanged once per key whose value actually changed.

        Raises:
            KeyError: For unknown keys
            ValueError: For values of the wrong type
        """
        coerced = {key: coerce_setting(key, value) for key, value in changes.items()}
        current = self.get_settings().to_dict()

        changed = [key for key, value in coerced.items() if current.get(key) != value]
        self.data.update(coerced)
        self._save()

        for key in changed:
            self.settingsChanged.emit(key)
        return self.get_settings()

    def reset(self) -> DiarySettings:
        """Restore defaults and persist them."""
        self.data = {"version": self.CURRENT_VERSION, **DiarySettings().to_dict()}
        self._load_error = None
        self._save()
        for key in SETTING_KEYS:
            self.settingsChanged.emit(key)
        return self.get_settings()

    def _save(self) -> None:
        """Safely write settings with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            temp_path = self.path.with_suffix(".tmp")
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")

            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            if temp_path:
                try:
                    if temp_path.exists():
                        temp_path.unlink()
                except OSError:
                    pass
