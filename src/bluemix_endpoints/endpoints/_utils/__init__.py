# _utils/__init__.py

from .env import env_fallback

__all__ = [
    "env_fallback",
]
