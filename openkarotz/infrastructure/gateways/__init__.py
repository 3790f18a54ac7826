"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer.
"""

from .karotz_gateway import OpenKarotzGateway

__all__ = ["OpenKarotzGateway"]
