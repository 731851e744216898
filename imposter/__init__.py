"""
Imposter - Word game session backend.

One word is drawn from a category pool, a few players are secretly made
imposters, and every player reveals their own role exactly once.

The backend provides:
- A non-repeating word allocator per category
- An in-memory session store with TTL expiry
- The one-shot reveal protocol
- A small REST API for the mobile client
"""

__version__ = "1.0.0"
