"""
Module: sections

Purpose:
    Provides the Section dataclass - the unit produced by the sectionizer
    and consumed by the sampler. A section is one heading plus the
    question lines that follow it, in document order.

Key Functions:
    - Section.implicit(lines): Leading section with no heading
    - Section.from_heading(heading_line, lines): Section opened by a heading
    - Section.line_count: Number of question lines (heading excluded)

Dependencies:
    - dataclasses (std)

Used By:
    - builder.sectioning.sectionizer: partition()
    - builder.selection.sampler: sample()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

HEADER_MARKER = "# "


def heading_label(heading_line: str) -> str:
    """
    Extract the display label from a heading line.

    Strips leading ``#`` characters and whitespace. Lines that only
    contain the marker somewhere in the middle keep their full text.

    Example:
        >>> heading_label("## Rationality")
        'Rationality'
        >>> heading_label("Q # 1")
        'Q # 1'
    """
    stripped = heading_line.strip()
    if stripped.startswith("#"):
        return stripped.lstrip("#").strip()
    return stripped


@dataclass(frozen=True)
class Section:
    """
    One headed block of question lines (immutable).

    Attributes:
        header: Heading label without markup, "" for the implicit leading section
        lines: Trimmed, non-empty question lines (heading line excluded)
        heading_line: Raw trimmed heading line as written, "" when implicit

    Invariants:
        - lines never contains empty strings
        - lines never contains the heading line itself

    Example:
        >>> s = Section.from_heading("# A", ["q1", "q2"])
        >>> s.header, s.line_count
        ('A', 2)
    """

    header: str
    lines: Tuple[str, ...] = ()
    heading_line: str = ""

    def __post_init__(self) -> None:
        """Validate section on construction."""
        if any(not line for line in self.lines):
            raise ValueError(f"Section {self.header!r} contains empty lines")

    @classmethod
    def implicit(cls, lines: Iterable[str] = ()) -> Section:
        """Create the header-less section that precedes the first heading."""
        return cls(header="", lines=tuple(lines))

    @classmethod
    def from_heading(cls, heading_line: str, lines: Iterable[str] = ()) -> Section:
        """Create a section opened by ``heading_line``."""
        heading_line = heading_line.strip()
        return cls(
            header=heading_label(heading_line),
            lines=tuple(lines),
            heading_line=heading_line,
        )

    @property
    def line_count(self) -> int:
        """Number of question lines available for sampling."""
        return len(self.lines)

    @property
    def has_heading(self) -> bool:
        """True unless this is the implicit leading section."""
        return bool(self.heading_line)

    @property
    def is_empty(self) -> bool:
        return not self.lines
