"""
Module: builder.sectioning.sectionizer

Purpose:
    Split a flat question document into ordered sections. A new section
    starts on every line containing the header marker ("# "). Blank lines
    are dropped and every kept line is trimmed.

Key Functions:
    - partition(): Document text -> list of Section
    - iter_content_lines(): Trimmed, non-empty lines of a document

Dependencies:
    - core.models.sections: Section, HEADER_MARKER

Used By:
    - builder.controller: generate_questions()
    - cli: sections command
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from structural_diary.core.models import HEADER_MARKER, Section

logger = logging.getLogger(__name__)


def is_heading(line: str) -> bool:
    """
    Check whether a line opens a new section.

    The marker may appear anywhere in the line, not only as a prefix,
    so "Q # 1" is a heading too.
    """
    return HEADER_MARKER in line


def iter_content_lines(text: str) -> Iterator[str]:
    """Yield the trimmed, non-empty lines of ``text`` in order."""
    for raw in text.split("\n"):
        line = raw.strip()
        if line:
            yield line


def partition(text: str) -> List[Section]:
    """
    Partition document text into sections.

    Algorithm:
    1. Walk lines in order, dropping whitespace-only lines
    2. On a heading line, close the current section if it holds anything
       (its heading or at least one line), then open a new one
    3. Append the final section unconditionally

    Args:
        text: Raw document text

    Returns:
        Sections in document order. Never empty: a document with no
        content yields one empty implicit section.

    Invariants:
        - Concatenating all headings and lines reproduces every non-empty
          trimmed line of the document in order
        - Deterministic: the same text always yields equal sections

    Example:
        >>> [s.header for s in partition("# A\\nq1\\n# B\\nq2")]
        ['A', 'B']
    """
    sections: List[Section] = []
    heading: Optional[str] = None
    lines: List[str] = []

    def close() -> None:
        if heading is None:
            sections.append(Section.implicit(lines))
        else:
            sections.append(Section.from_heading(heading, lines))

    for raw in text.split("\n"):
        if is_heading(raw):
            if heading is not None or lines:
                close()
            heading = raw.strip()
            lines = []
            continue

        line = raw.strip()
        if line:
            lines.append(line)

    close()

    logger.debug(
        f"Partitioned document into {len(sections)} sections "
        f"({sum(s.line_count for s in sections)} lines)"
    )
    return sections
