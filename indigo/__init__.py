"""Core engine package for the Indigo card game."""

__all__ = [
    "cards",
    "deck",
    "players",
    "strategy",
    "scoring",
    "interaction",
    "game",
    "config",
    "logging_utils",
]
