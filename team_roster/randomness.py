"""Sources of randomness consumed by the team assigner."""

import random
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything able to shuffle a sequence and sample from it without replacement."""

    def shuffle(self, items: Sequence[T]) -> List[T]:
        ...

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        ...


class SystemRandomSource:
    """Random source backed by a ``random.Random`` instance.

    Uses the operating system's entropy unless another generator is given,
    e.g. a seeded ``random.Random`` in tests.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.SystemRandom()

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of the items; the input is left untouched."""
        shuffled = list(items)
        self.rng.shuffle(shuffled)
        return shuffled

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        """Return k distinct items in random order."""
        return self.rng.sample(list(items), k)


class OrderedRandomSource:
    """Source that never reorders anything, for repeatable rosters."""

    def shuffle(self, items: Sequence[T]) -> List[T]:
        return list(items)

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        if k < 0 or k > len(items):
            raise ValueError(f"Sample larger than population or is negative: {k}")
        return list(items)[:k]
