"""
OpenKarotz client package

Python client for the CGI control API exposed by OpenKarotz rabbits.

Layer Structure:
- Domain: Value objects, command table, validation rules and gateway contract
- Application: Response DTOs parsed from the device JSON payloads
- Infrastructure: httpx based gateway implementation
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, configuration and command-line entry point
"""

__version__ = "0.1.0"
