"""
Transport package.

Holds the binding between the rules client and an authenticated
``httpx.Client``. Bind once at startup, then share the binding with every
repository that needs it.
"""

from .binding import TransportBinding

__all__ = ["TransportBinding"]
