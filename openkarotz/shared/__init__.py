"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the client.

Its primary responsibilities include:
- Defining cross-layer constants (e.g., environment names, log levels)
- Centralizing structured logging setup
- Serving as a common place for definitions that do not belong
  exclusively to Domain, Application, or Infrastructure
"""

from .consts import (
    CGI_BIN_PREFIX,
    DEFAULT_TIMEOUT_SECONDS,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import (
    bind_log_context,
    clear_log_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

__all__ = [
    "CGI_BIN_PREFIX",
    "DEFAULT_TIMEOUT_SECONDS",
    "EnumEnvironment",
    "EnumLogLevel",
    "bind_log_context",
    "clear_log_context",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
