"""
Gateways Package - Domain Layer

This package contains the interface describing the OpenKarotz API.
The HTTP implementation is provided by the infrastructure layer.
"""

from .karotz_gateway import IKarotzGateway

__all__ = ["IKarotzGateway"]
