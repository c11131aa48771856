"""
Module: builder.selection.random_source

Purpose:
    Random source capability injected into the sampler. Anything with
    ``randrange`` and ``randint`` works, so ``random.Random`` is used as-is
    and tests can pass a scripted source to pin exact draw sequences.

Key Classes:
    - RandomSource: Protocol for the sampler's random draws
    - ScriptedRandom: Replays a fixed list of draws

Key Functions:
    - make_random(): Fresh generator, optionally seeded
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol


class RandomSource(Protocol):
    """Subset of ``random.Random`` used by the sampler."""

    def randrange(self, stop: int) -> int:
        """Return an int in [0, stop)."""
        ...

    def randint(self, a: int, b: int) -> int:
        """Return an int in [a, b]."""
        ...


def make_random(seed: Optional[int] = None) -> random.Random:
    """
    Create a fresh generator for one invocation.

    Args:
        seed: Optional seed for reproducible output (CLI --seed)
    """
    return random.Random(seed)


class ScriptedRandom:
    """
    Deterministic random source replaying a fixed sequence of draws.

    Every call consumes the next value from the script. Values are checked
    against the requested range so a bad script fails loudly.

    Example:
        >>> rng = ScriptedRandom([2, 0])
        >>> rng.randrange(5), rng.randint(0, 3)
        (2, 0)
    """

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws: List[int] = list(draws)
        self.calls: List[tuple[str, int, int]] = []

    @property
    def remaining(self) -> int:
        return len(self._draws)

    def _next(self, kind: str, low: int, high: int) -> int:
        if not self._draws:
            raise IndexError(f"Scripted random source exhausted on {kind}({low}, {high})")
        value = self._draws.pop(0)
        if not low <= value <= high:
            raise ValueError(f"Scripted draw {value} outside [{low}, {high}] for {kind}")
        self.calls.append((kind, low, high))
        return value

    def randrange(self, stop: int) -> int:
        return self._next("randrange", 0, stop - 1)

    def randint(self, a: int, b: int) -> int:
        return self._next("randint", a, b)
