"""
Game limits enforced when a game is created.

These mirror what the mobile client offers and keep a single request
from pinning a worker on an oversized custom category.
"""

MIN_PLAYERS = 3
MAX_PLAYERS = 20
MIN_IMPOSTERS = 1

MAX_CATEGORY_IDS = 10
MAX_CUSTOM_CATEGORIES = 50
MAX_TOTAL_WORDS = 5000

MAX_WORD_LENGTH = 64
MAX_HINT_LENGTH = 140

# Reference deployment values, in milliseconds
DEFAULT_GAME_TTL_MS = 45 * 60 * 1000
DEFAULT_CLEANUP_EVERY_MS = 5 * 60 * 1000

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:8081",
    "http://localhost:19006",
]
