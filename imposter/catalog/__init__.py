"""
Catalog Module - Word categories.

The built-in catalog is static and read-only; it is loaded once at
process start and never mutated at runtime. Custom categories supplied
with a create-game request use the same WordEntry / Category types.
"""

from .models import WordEntry, Category, CategoryCatalog
from .builtin import (
    BUILTIN_CATEGORIES,
    create_builtin_catalog,
    get_category,
    list_categories,
)

__all__ = [
    "WordEntry",
    "Category",
    "CategoryCatalog",
    "BUILTIN_CATEGORIES",
    "create_builtin_catalog",
    "get_category",
    "list_categories",
]
