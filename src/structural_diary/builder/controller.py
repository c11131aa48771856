"""
Module: builder.controller

Purpose:
    Orchestrate the question generation pipeline.
    Load -> Partition -> Sample -> Join -> (optionally) Write

Key Functions:
    - generate_questions(): Text + config -> GenerationResult
    - generate_from_settings(): Stored settings -> GenerationResult
    - write_result(): Insert into / create a Markdown note

Key Classes:
    - GenerationResult: Output text plus what it was built from
    - DiaryError: Exception for pipeline failures outside the core

Dependencies:
    - builder.sectioning: partition()
    - builder.selection: sample_lines(), SelectionConfig
    - builder.output: Markdown writing
    - common: built-in question document

Used By:
    - cli: generate command
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple

from structural_diary.common import load_question_source
from structural_diary.core.models import Section

from .output import OutputError, write_output
from .sectioning import partition
from .selection import RandomSource, SelectionConfig, SelectionMode, join_output, sample_lines

if TYPE_CHECKING:
    from structural_diary.settings import DiarySettings

logger = logging.getLogger(__name__)


class DiaryError(Exception):
    """Error during the generation pipeline."""
    pass


@dataclass(frozen=True)
class GenerationResult:
    """
    Result of one generation run (immutable).

    Attributes:
        text: Output lines joined with the blank-line gap
        lines: Output lines in output order
        sections: Sections the document was split into
        mode: Selection mode that produced the output
        heading_count: How many entries of lines are section headings

    Example:
        >>> result = generate_questions("# A\\nq1\\nq2", SelectionConfig.global_mode(1))
        >>> result.question_count
        1
    """

    text: str
    lines: Tuple[str, ...]
    sections: Tuple[Section, ...]
    mode: SelectionMode
    heading_count: int = 0

    @property
    def question_count(self) -> int:
        """Number of question lines in the output (headings excluded)."""
        return len(self.lines) - self.heading_count

    @property
    def is_empty(self) -> bool:
        return not self.lines


def generate_questions(
    text: str,
    config: SelectionConfig,
    rng: Optional[RandomSource] = None,
) -> GenerationResult:
    """
    Run partition + sample + join on a question document.

    Args:
        text: Raw question document
        config: Selection configuration
        rng: Random source, fresh per call when omitted

    Returns:
        GenerationResult with the joined output text

    Example:
        >>> generate_questions(DEFAULT_QUESTIONS, SelectionConfig.global_mode(3)).question_count
        3
    """
    start_time = time.perf_counter()

    sections = partition(text)
    entries = sample_lines(sections, config, rng)
    lines = [entry.text for entry in entries]
    result = GenerationResult(
        text=join_output(lines),
        lines=tuple(lines),
        sections=tuple(sections),
        mode=config.mode,
        heading_count=sum(1 for entry in entries if entry.is_heading),
    )

    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"Picked {len(lines)} lines from {len(sections)} sections "
        f"({config.mode.value} mode) in {duration_ms:.1f}ms"
    )
    return result


def generate_from_settings(
    settings: DiarySettings,
    rng: Optional[RandomSource] = None,
) -> GenerationResult:
    """
    Generate questions using stored settings.

    Reads the configured questions file, falling back to the built-in
    document when it is unset or unreadable.
    """
    text = load_question_source(settings.questions_file)
    return generate_questions(text, settings.to_selection_config(), rng)


def write_result(
    result: GenerationResult,
    *,
    target: Optional[Path] = None,
    directory: Optional[Path] = None,
) -> Path:
    """
    Write generated text into a Markdown note.

    Inserts at the end of ``target`` when it is an existing Markdown
    file, otherwise creates a dated note in ``directory``.

    Raises:
        DiaryError: If the note cannot be written
    """
    try:
        path = write_output(result.text, target=target, directory=directory)
    except OutputError as e:
        raise DiaryError(f"Failed to write questions: {e}") from e

    logger.info(f"Wrote {len(result.lines)} lines to {path}")
    return path
