"""
Session Module - Manages ephemeral game sessions.

A session represents one play of the game:
- Created with a chosen word and a fixed imposter set
- Each player number reveals its role exactly once
- Expires after a fixed TTL

Sessions are EPHEMERAL:
- No persistence to database
- A restart drops every session
"""

from .manager import SessionManager, GameSession, new_session_id
from .sweeper import SessionSweeper

__all__ = [
    "SessionManager",
    "GameSession",
    "SessionSweeper",
    "new_session_id",
]
