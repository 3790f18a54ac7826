"""
Main module - Main/Composition Root Layer

This module wires the layers together for applications and for the
command-line client.

Its primary responsibilities include:
- Loading settings from the environment and .env files
- Building the gateway through the dependency container
- Exposing the command-line entry point
"""

from .config import AppSettings, get_settings
from .container import AppContainer, gateway_lifespan, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "gateway_lifespan",
    "init_container",
    "get_container",
]
