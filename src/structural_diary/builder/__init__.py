"""
Module: builder

Purpose:
    Question generation pipeline. Splits a question document into
    sections, samples lines from them and writes the result into a
    Markdown note.

Key Functions:
    - partition(): Split document text into sections
    - sample(): Select lines from sections
    - generate_questions(): Main entry point for the pipeline

Key Classes:
    - SelectionConfig: Configuration for sampling
    - GenerationResult: Output of one run

Used By:
    - structural_diary.cli: Command line interface
"""

from .controller import DiaryError, GenerationResult, generate_from_settings, generate_questions, write_result
from .sectioning import partition
from .selection import SelectionConfig, SelectionMode, parse_template, sample

__all__ = [
    # Pipeline
    "generate_questions",
    "generate_from_settings",
    "write_result",
    "GenerationResult",
    "DiaryError",
    # Sectioning
    "partition",
    # Selection
    "sample",
    "parse_template",
    "SelectionConfig",
    "SelectionMode",
]
