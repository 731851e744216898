"""
Word Allocator - Non-repeating word draws per category.

Each category id owns a pool:
- words: the category's word list (as last registered)
- bag: indices into words that have not been served this cycle

Drawing pops an index off the end of the bag. When the bag runs dry it is
refilled with a fresh shuffled permutation of 0..n-1, so n consecutive
draws from an n-word pool serve every word exactly once. The (n+1)-th
draw starts a new cycle and may repeat anything.

Re-registering a pool with the same number of words keeps the bag (the
"no repeat yet" progress survives); a different word count resets it.
"""

from __future__ import annotations
import logging
import random
import threading
from dataclasses import dataclass, field
from typing import Sequence

from ..catalog import WordEntry
from ..errors import EmptyPool, PoolNotFound

logger = logging.getLogger(__name__)


@dataclass
class WordPool:
    """Allocator state for one category id."""
    words: Sequence[WordEntry]
    bag: list[int] = field(default_factory=list)


def shuffled_indices(n: int, rng: random.Random) -> list[int]:
    """Fisher-Yates shuffle of range(n)."""
    indices = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randrange(i + 1)
        indices[i], indices[j] = indices[j], indices[i]
    return indices


class WordAllocator:
    """
    Serves words without repetition until a category is exhausted.

    One allocator is shared by every request in the process; a single lock
    makes register_pool and draw atomic with respect to each other.

    Usage:
        allocator = WordAllocator(rng=random.Random(42))
        allocator.register_pool("animals", category.words)
        entry = allocator.draw("animals")
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self._pools: dict[str, WordPool] = {}
        self._lock = threading.Lock()

    def register_pool(self, category_id: str, words: Sequence[WordEntry]) -> None:
        """
        Associate a category id with a word list.

        The bag is reset only if the word count changed; otherwise the
        existing bag is kept and the word reference swapped.
        """
        with self._lock:
            existing = self._pools.get(category_id)
            if existing is None or len(existing.words) != len(words):
                if existing is not None:
                    logger.debug(
                        f"Word count for {category_id} changed "
                        f"({len(existing.words)} -> {len(words)}), resetting bag"
                    )
                self._pools[category_id] = WordPool(
                    words=words,
                    bag=shuffled_indices(len(words), self.rng),
                )
                return

            existing.words = words

    def draw(self, category_id: str) -> WordEntry:
        """Draw the next unserved word for a category."""
        with self._lock:
            pool = self._pools.get(category_id)
            if pool is None:
                raise PoolNotFound(f"No pool for categoryId {category_id}")

            if not pool.words:
                raise EmptyPool(f"Category {category_id} has no words")

            if not pool.bag:
                pool.bag = shuffled_indices(len(pool.words), self.rng)

            index = pool.bag.pop()
            return pool.words[index]

    def has_pool(self, category_id: str) -> bool:
        with self._lock:
            return category_id in self._pools

    def remaining(self, category_id: str) -> int:
        """Words left before the pool reshuffles."""
        with self._lock:
            pool = self._pools.get(category_id)
            if pool is None:
                raise PoolNotFound(f"No pool for categoryId {category_id}")
            return len(pool.bag)
