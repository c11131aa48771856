"""
Module: builder.selection

Purpose:
    Question sampling. Draws a bounded number of lines without
    replacement, either from the whole document or per section
    following a quota template.

Key Functions:
    - sample(): Main entry point for sampling
    - sample_lines(): Sampling with headings tagged as OutputLine entries
    - parse_template(): Parse "1-3;2-2" quota templates

Key Classes:
    - SelectionConfig: Configuration for sampling
    - SelectionMode: GLOBAL or TEMPLATE
    - QuotaTemplate: Section index -> quota mapping

Used By:
    - builder.controller: Main pipeline
    - settings.store: Builds SelectionConfig from stored settings
"""

from .config import DEFAULT_GLOBAL_QUOTA, SelectionConfig, random_default_quota
from .mode import SelectionMode
from .random_source import RandomSource, ScriptedRandom, make_random
from .sampler import (
    OUTPUT_SEPARATOR,
    OutputLine,
    clamp_quota,
    draw_without_replacement,
    join_output,
    resolve_quota,
    sample,
    sample_lines,
    sample_section,
)
from .template import QuotaTemplate, parse_template

__all__ = [
    "DEFAULT_GLOBAL_QUOTA",
    "OUTPUT_SEPARATOR",
    "OutputLine",
    "QuotaTemplate",
    "RandomSource",
    "ScriptedRandom",
    "SelectionConfig",
    "SelectionMode",
    "clamp_quota",
    "draw_without_replacement",
    "join_output",
    "make_random",
    "parse_template",
    "random_default_quota",
    "resolve_quota",
    "sample",
    "sample_lines",
    "sample_section",
]
