"""
Module: builder.selection.mode

Purpose:
    Enum defining how the number of questions is decided during
    sampling.

Key Classes:
    - SelectionMode: Two-state enum for quota resolution

Used By:
    - builder.selection.config: SelectionConfig
    - builder.selection.sampler: sample
    - settings.store: DiarySettings
"""

from __future__ import annotations

from enum import Enum


class SelectionMode(Enum):
    """
    Controls how quotas are resolved.

    Attributes:
        GLOBAL: One quota for the whole document. Every section's lines
                are pooled and the quota is drawn from the pool.
        TEMPLATE: One quota per section, taken from the quota template.
                  Sections missing from the template get a random quota.

    Example:
        >>> SelectionMode.parse("template")
        <SelectionMode.TEMPLATE: 'template'>
    """

    GLOBAL = "global"
    TEMPLATE = "template"

    @classmethod
    def parse(cls, value: str | SelectionMode) -> SelectionMode:
        """
        Parse a mode name (case-insensitive).

        Raises:
            ValueError: If the name is not a known mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown selection mode {value!r} (expected one of: {choices})") from None
