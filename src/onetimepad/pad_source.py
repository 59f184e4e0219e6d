"""Random index sources for generating pad material.

A source is any callable taking the alphabet length and returning an index
in ``[0, size)``. None of the sources here are guaranteed to be secure;
callers needing stronger guarantees should inject their own.
"""
import random
import secrets
from typing import Callable, Optional

RandomIndexFn = Callable[[int], int]


def system_random_index(size: int) -> int:
    """Draw an index from the operating system's randomness source."""
    return secrets.randbelow(size)


def seeded_random_index(seed: Optional[int] = None) -> RandomIndexFn:
    """Return a reproducible source backed by its own `random.Random`."""
    rng = random.Random(seed)

    def random_index(size: int) -> int:
        return rng.randrange(size)

    return random_index


DEFAULT_RANDOM_INDEX: RandomIndexFn = system_random_index
