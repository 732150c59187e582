# schemas/__init__.py

from .endpoints import ServiceEndpoint

__all__ = [
    "ServiceEndpoint",
]
