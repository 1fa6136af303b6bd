"""Computer opponents and the headless arena for Indigo."""

from .random_bot import RandomStrategy

__all__ = ["RandomStrategy"]
