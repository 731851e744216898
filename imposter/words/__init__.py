"""
Words Module - Per-category word allocation.

Guarantees sampling without replacement within a category until every
word has been served once, then reshuffles.
"""

from .allocator import WordAllocator, WordPool, shuffled_indices

__all__ = [
    "WordAllocator",
    "WordPool",
    "shuffled_indices",
]
