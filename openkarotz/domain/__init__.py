"""
Domain Layer Package

This package contains the rules of the OpenKarotz protocol: the command
table, input validation and the gateway contract. It has no dependency on
HTTP libraries or configuration.
"""

from openkarotz.domain import entities, gateways, services

__all__ = ["entities", "gateways", "services"]
