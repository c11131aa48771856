"""
Module: builder.selection.config

Purpose:
    Configuration dataclass for the sampler.
    Immutable configuration with validation on construction.

Key Classes:
    - SelectionConfig: Main configuration for question sampling

Key Functions:
    - random_default_quota(): Uniform quota in [0, line_count]

Dependencies:
    - dataclasses (std)

Used By:
    - builder.selection.sampler: sample()
    - builder.controller: generate_questions()
    - settings.store: DiarySettings.to_selection_config()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .mode import SelectionMode
from .random_source import RandomSource
from .template import QuotaTemplate, parse_template

DEFAULT_GLOBAL_QUOTA = 5

DefaultQuotaFn = Callable[[int, RandomSource], int]


def random_default_quota(line_count: int, rng: RandomSource) -> int:
    """
    Quota for a section the template does not mention.

    Uniform over [0, line_count] inclusive, drawn fresh on every run.
    """
    return rng.randint(0, max(0, line_count))


@dataclass(frozen=True)
class SelectionConfig:
    """
    Configuration for the sampler (immutable).

    Attributes:
        mode: GLOBAL pools all sections, TEMPLATE samples per section
        global_quota: Number of lines to draw in GLOBAL mode
        template: Per-section quotas for TEMPLATE mode
        include_headers: Emit each section's heading before its lines
                         (TEMPLATE mode only)
        default_quota: Quota for sections missing from the template,
                       called as default_quota(line_count, rng)

    Invariants:
        - global_quota >= 0
        - template quotas >= 0

    Example:
        >>> config = SelectionConfig.from_template("1-2;3-0", include_headers=True)
        >>> config.mode
        <SelectionMode.TEMPLATE: 'template'>
        >>> config.template.get(3)
        0
    """

    mode: SelectionMode = SelectionMode.GLOBAL
    global_quota: int = DEFAULT_GLOBAL_QUOTA
    template: QuotaTemplate = field(default_factory=QuotaTemplate)
    include_headers: bool = False
    default_quota: DefaultQuotaFn = field(default=random_default_quota, compare=False)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.mode, SelectionMode):
            object.__setattr__(self, "mode", SelectionMode.parse(self.mode))
        if isinstance(self.template, str):
            object.__setattr__(self, "template", parse_template(self.template))
        if self.global_quota < 0:
            raise ValueError(f"global_quota must be non-negative: {self.global_quota}")
        negative = {index: quota for index, quota in self.template.items() if quota < 0}
        if negative:
            raise ValueError(f"template quotas must be non-negative: {negative}")

    @classmethod
    def global_mode(cls, quota: int = DEFAULT_GLOBAL_QUOTA) -> SelectionConfig:
        """Config drawing ``quota`` lines from the whole document."""
        return cls(mode=SelectionMode.GLOBAL, global_quota=quota)

    @classmethod
    def from_template(
        cls,
        template: str | QuotaTemplate,
        *,
        include_headers: bool = False,
        default_quota: DefaultQuotaFn = random_default_quota,
    ) -> SelectionConfig:
        """Config for per-section sampling from a template string or mapping."""
        if isinstance(template, str):
            template = parse_template(template)
        return cls(
            mode=SelectionMode.TEMPLATE,
            template=template,
            include_headers=include_headers,
            default_quota=default_quota,
        )

    @property
    def uses_template(self) -> bool:
        return self.mode is SelectionMode.TEMPLATE

    @property
    def emits_headers(self) -> bool:
        """Headers are only emitted in TEMPLATE mode."""
        return self.uses_template and self.include_headers
