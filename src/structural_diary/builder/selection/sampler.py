"""
Module: builder.selection.sampler

Purpose:
    Pick a random subset of question lines from partitioned sections.
    Lines are drawn without replacement; the working pool is a fresh
    copy per call and picks are removed by position, so textually
    identical questions are still distinct candidates.

Key Functions:
    - sample(): Main entry point, sections + config -> output lines
    - sample_lines(): Same picks as OutputLine entries tagged heading or question
    - draw_without_replacement(): Draw k lines from a pool
    - resolve_quota(): Per-section quota in TEMPLATE mode
    - join_output(): Join output lines into the final text block

Algorithm:
    GLOBAL:
    1. Pool every section's lines (headings are never in a pool)
    2. Clamp the quota to [0, pool size]
    3. Draw one index at a time and swap-remove it from the pool
    TEMPLATE:
    1. Resolve each section's quota (template entry or random default)
    2. Clamp to [0, line count]
    3. 0 -> nothing, >= line count -> all lines in document order,
       otherwise draw as in GLOBAL mode on the section's own lines
    4. Optionally emit the heading before the section's picks

Dependencies:
    - core.models: Section
    - builder.selection.config: SelectionConfig

Used By:
    - builder.controller: generate_questions()
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Sequence

from structural_diary.core.models import Section

from .config import SelectionConfig
from .mode import SelectionMode
from .random_source import RandomSource, make_random

logger = logging.getLogger(__name__)

OUTPUT_SEPARATOR = "\n\n\n"


class OutputLine(NamedTuple):
    """One output entry and whether it is a section heading."""

    text: str
    is_heading: bool = False


def clamp_quota(quota: int, available: int) -> int:
    """Clamp a quota to [0, available]."""
    return max(0, min(quota, available))


def draw_without_replacement(
    pool: Sequence[str],
    quota: int,
    rng: RandomSource,
) -> List[str]:
    """
    Draw ``quota`` lines from ``pool`` in draw order.

    Each draw picks an index uniformly over the remaining pool and
    removes that position by swapping the last entry into it. The
    caller's sequence is never modified.

    Args:
        pool: Candidate lines
        quota: Number of lines to draw (clamped to [0, len(pool)])
        rng: Random source

    Returns:
        Drawn lines, one per distinct pool position

    Example:
        >>> draw_without_replacement(["a", "b", "c"], 2, ScriptedRandom([0, 1]))
        ['a', 'b']
    """
    working = list(pool)
    count = clamp_quota(quota, len(working))
    picked: List[str] = []

    for _ in range(count):
        index = rng.randrange(len(working))
        picked.append(working[index])
        last = working.pop()
        if index < len(working):
            working[index] = last

    return picked


def resolve_quota(
    index: int,
    section: Section,
    config: SelectionConfig,
    rng: RandomSource,
) -> int:
    """
    Quota for the section at 1-based ``index`` in TEMPLATE mode.

    Template entries win; otherwise ``config.default_quota`` decides.
    Empty sections always get 0 without consulting the random source.
    The result is clamped to [0, section.line_count].
    """
    if section.line_count == 0:
        return 0

    quota = config.template.get(index)
    if quota is None:
        quota = config.default_quota(section.line_count, rng)
        logger.debug(f"Section {index} ({section.header!r}): random quota {quota}")

    return clamp_quota(quota, section.line_count)


def sample_section(section: Section, quota: int, rng: RandomSource) -> List[str]:
    """
    Pick ``quota`` lines from one section.

    A quota covering the whole section returns every line in
    document order without drawing.
    """
    if quota <= 0:
        return []
    if quota >= section.line_count:
        return list(section.lines)
    return draw_without_replacement(section.lines, quota, rng)


def _sample_global(sections: Sequence[Section], config: SelectionConfig, rng: RandomSource) -> List[OutputLine]:
    pool = [line for section in sections for line in section.lines]
    quota = clamp_quota(config.global_quota, len(pool))
    if quota < config.global_quota:
        logger.debug(f"Requested {config.global_quota} questions, only {len(pool)} available")
    return [OutputLine(line) for line in draw_without_replacement(pool, quota, rng)]


def _sample_template(sections: Sequence[Section], config: SelectionConfig, rng: RandomSource) -> List[OutputLine]:
    output: List[OutputLine] = []

    for index, section in enumerate(sections, start=1):
        quota = resolve_quota(index, section, config, rng)
        picked = sample_section(section, quota, rng)

        if config.include_headers and section.has_heading:
            output.append(OutputLine(section.heading_line, is_heading=True))
        output.extend(OutputLine(line) for line in picked)

    return output


def sample_lines(
    sections: Sequence[Section],
    config: SelectionConfig,
    rng: Optional[RandomSource] = None,
) -> List[OutputLine]:
    """
    Select output entries from sections, keeping headings tagged.

    Same draws as sample(); each entry records whether it is a heading
    so callers can count questions without comparing text.
    """
    if rng is None:
        rng = make_random()

    if config.mode is SelectionMode.TEMPLATE:
        lines = _sample_template(sections, config, rng)
    else:
        lines = _sample_global(sections, config, rng)

    logger.debug(f"Sampled {len(lines)} output lines from {len(sections)} sections ({config.mode.value})")
    return lines


def sample(
    sections: Sequence[Section],
    config: SelectionConfig,
    rng: Optional[RandomSource] = None,
) -> List[str]:
    """
    Select question lines from sections.

    Args:
        sections: Sections in document order (from partition())
        config: Selection configuration
        rng: Random source, a fresh random.Random() when omitted

    Returns:
        Output lines in output order (headings interleaved when
        config.include_headers is set in TEMPLATE mode)

    Invariants:
        - No pool position is drawn twice
        - Never raises for any sections and a valid config

    Example:
        >>> sections = partition("# A\\nq1\\nq2\\n# B\\nq3")
        >>> len(sample(sections, SelectionConfig.global_mode(2)))
        2
    """
    return [line.text for line in sample_lines(sections, config, rng)]


def join_output(lines: Sequence[str]) -> str:
    """Join output lines with the blank-line gap used in diary notes."""
    return OUTPUT_SEPARATOR.join(lines)
