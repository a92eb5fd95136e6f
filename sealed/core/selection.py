"""Uniform random choice with an injectable source."""

from __future__ import annotations

import random
from collections.abc import Sequence

__all__ = ["choose"]


def choose[T](candidates: Sequence[T], rng: random.Random | None = None) -> T:
    """Pick one candidate with equal probability.

    Args:
        candidates: Non-empty sequence to pick from.
        rng: Random source. Defaults to the process-wide generator of the
            `random` module, which the interpreter seeds from OS entropy.

    Raises:
        ValueError: If `candidates` is empty.
    """
    if not candidates:
        raise ValueError("cannot choose from an empty sequence")
    if rng is None:
        return random.choice(candidates)
    return rng.choice(candidates)
