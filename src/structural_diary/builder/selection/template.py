"""
Module: builder.selection.template

Purpose:
    Parse and hold the per-section quota template used in TEMPLATE mode.
    The template string looks like "1-3;2-2;5-0": entries separated by
    ";", each entry "<section index>-<quota>" with 1-based indices.

    Parsing is lenient. A malformed entry is skipped and its section
    falls back to the random default quota; the rest of the template
    still applies.

Key Functions:
    - parse_template(): Template string -> QuotaTemplate

Key Classes:
    - QuotaTemplate: Read-only mapping of section index -> quota

Used By:
    - builder.selection.config: SelectionConfig
    - settings.store: DiarySettings.to_selection_config()
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = ";"
PAIR_SEPARATOR = "-"


def _parse_int(value: str) -> Optional[int]:
    """Plain decimal integer with an optional sign, else None.

    Stricter than int(): digit group underscores ("1_0") and non-ASCII
    digits are rejected.
    """
    text = value.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def parse_entry(entry: str) -> Optional[Tuple[int, int]]:
    """
    Parse a single "<index>-<quota>" entry.

    Negative quotas are kept as 0. Indices below 1 never match a
    section and are rejected.

    Returns:
        (index, quota) or None if the entry is malformed

    Example:
        >>> parse_entry("3-2")
        (3, 2)
        >>> parse_entry("3--2")
        (3, 0)
        >>> parse_entry("x-2") is None
        True
    """
    index_text, separator, quota_text = entry.partition(PAIR_SEPARATOR)
    if not separator:
        return None

    index = _parse_int(index_text)
    quota = _parse_int(quota_text)
    if index is None or quota is None or index < 1:
        return None
    return index, max(0, quota)


class QuotaTemplate(Mapping[int, int]):
    """
    Read-only mapping from 1-based section index to quota.

    A missing index means "no override": the sampler draws a random
    quota for that section instead.

    Example:
        >>> template = parse_template("1-2;3-0")
        >>> template.get(1), template.get(2), template.get(3)
        (2, None, 0)
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[int, int]] = None) -> None:
        self._entries: Dict[int, int] = dict(entries or {})

    def __getitem__(self, index: int) -> int:
        return self._entries[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QuotaTemplate):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"QuotaTemplate({self.to_string()!r})"

    def to_string(self) -> str:
        """Render back to the "1-2;3-0" form, ordered by section index."""
        return ENTRY_SEPARATOR.join(
            f"{index}{PAIR_SEPARATOR}{quota}" for index, quota in sorted(self._entries.items())
        )

    @classmethod
    def parse(cls, text: Optional[str]) -> QuotaTemplate:
        return parse_template(text)


def parse_template(text: Optional[str]) -> QuotaTemplate:
    """
    Parse a quota template string.

    Args:
        text: Template like "1-3;2-2;" (None or "" for no overrides)

    Returns:
        QuotaTemplate with every well-formed entry. Later entries for the
        same index override earlier ones. Never raises.

    Example:
        >>> parse_template("1-3;oops;2-x;4-1;").to_string()
        '1-3;4-1'
    """
    entries: Dict[int, int] = {}
    if not text:
        return QuotaTemplate(entries)

    for raw_entry in text.split(ENTRY_SEPARATOR):
        if not raw_entry.strip():
            continue
        parsed = parse_entry(raw_entry)
        if parsed is None:
            logger.debug(f"Ignoring malformed template entry {raw_entry!r}")
            continue
        index, quota = parsed
        entries[index] = quota

    return QuotaTemplate(entries)
