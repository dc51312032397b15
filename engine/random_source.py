# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Injectable randomness.

Every stochastic decision in the engine goes through a ``RandomSource`` so
that games can be replayed from a seed and tests can script exact draws.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from typing import Hashable, Protocol, TypeVar

K = TypeVar("K", bound=Hashable)


class RandomSource(Protocol):
    def uniform(self) -> float:
        """Return a float in [0, 1)."""
        ...

    def weighted_choice(self, weights: Mapping[K, float]) -> K:
        """Return a key drawn with probability proportional to its weight."""
        ...


def pick_weighted(weights: Mapping[K, float], roll: float) -> K:
    """Map a uniform roll in [0, 1) onto a weighted key.

    Non-positive weights are never chosen unless every weight is
    non-positive, in which case the last key is returned.
    """
    if not weights:
        raise ValueError("Cannot choose from an empty weight mapping")
    total = sum(w for w in weights.values() if w > 0)
    keys = list(weights)
    if total <= 0:
        return keys[-1]
    r = roll * total
    last_positive = keys[-1]
    for key in keys:
        w = weights[key]
        if w <= 0:
            continue
        last_positive = key
        r -= w
        if r < 0:
            return key
    return last_positive


class SeededRandom:
    """Deterministic random source backed by ``random.Random``."""

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        self.rng = random.Random(seed)

    def uniform(self) -> float:
        return self.rng.random()

    def weighted_choice(self, weights: Mapping[K, float]) -> K:
        return pick_weighted(weights, self.rng.random())


class ScriptedRandom:
    """Replays scripted draws, then falls back to a seeded generator.

    ``uniforms`` feeds ``uniform()``; ``choices`` feeds ``weighted_choice()``
    with the exact keys to return, in order.
    """

    def __init__(self, uniforms: Iterable[float] = (),
                 choices: Iterable[Hashable] = (), seed: int = 0):
        self._uniforms = list(uniforms)
        self._choices = list(choices)
        self._fallback = SeededRandom(seed)

    def uniform(self) -> float:
        if self._uniforms:
            return self._uniforms.pop(0)
        return self._fallback.uniform()

    def weighted_choice(self, weights: Mapping[K, float]) -> K:
        if self._choices:
            return self._choices.pop(0)
        return self._fallback.weighted_choice(weights)

    @property
    def exhausted(self) -> bool:
        return not self._uniforms and not self._choices
