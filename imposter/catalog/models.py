"""
Category models - words, categories and the lookup catalog.

Categories come from two places:
- The built-in catalog (read-only, built once at process start)
- Custom categories sent by the client when creating a game
  (ephemeral, they only live on in the allocator pool they seed)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class WordEntry:
    """A secret word and the optional hint imposters receive instead."""
    word: str
    hint: str | None = None


@dataclass(frozen=True)
class Category:
    """A named, ordered list of words."""
    id: str
    name: str
    words: tuple[WordEntry, ...] = ()

    @classmethod
    def build(cls, id: str, name: str, words: Iterable[tuple[str, str | None]]) -> "Category":
        """Build a category from (word, hint) pairs."""
        return cls(
            id=id,
            name=name,
            words=tuple(WordEntry(word=w, hint=h) for w, h in words),
        )


class CategoryCatalog:
    """
    Read-only lookup of categories by id.

    The service receives a catalog instead of reaching for a module global,
    so tests can hand it a small or deliberately broken catalog.
    """

    def __init__(self, categories: Iterable[Category]):
        self._categories: dict[str, Category] = {}
        for category in categories:
            if category.id in self._categories:
                raise ValueError(f"Duplicate category id: {category.id}")
            self._categories[category.id] = category

    def get(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)

    def summaries(self) -> list[dict[str, str]]:
        """Id and name of every category, in catalog order."""
        return [{"id": c.id, "name": c.name} for c in self._categories.values()]

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._categories

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories.values())

    def __len__(self) -> int:
        return len(self._categories)
