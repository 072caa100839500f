from __future__ import annotations

"""Seed helpers for reproducible randomised checks."""

import random
from typing import Sequence


def seed_everything(seed: int) -> random.Random:
    """Seed Python's global PRNG and return a dedicated ``Random`` instance."""

    random.seed(seed)
    return random.Random(seed)


def random_text(
    rng: random.Random, alphabet: Sequence[str], *, max_length: int = 12
) -> str:
    """Draw a string of up to *max_length* characters from *alphabet*."""

    length = rng.randint(0, max_length)
    return "".join(rng.choice(alphabet) for _ in range(length))
