"""
Infrastructure Layer Package

This package contains the implementation of the domain gateway on top of
httpx, plus the HTTP transport factory it relies on.
"""

from openkarotz.infrastructure import gateways

__all__ = ["gateways"]
