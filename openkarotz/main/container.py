"""
Dependency container injection module - Main Layer

This module wires settings to the gateway so applications embedding the
client (and the bundled CLI) share one configured instance.
"""

from contextlib import contextmanager
from typing import Iterator

from dependency_injector import containers, providers

from openkarotz.infrastructure.gateways.karotz_gateway import OpenKarotzGateway
from openkarotz.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    config = providers.Configuration()

    # Gateways
    karotz_gateway = providers.Singleton(
        OpenKarotzGateway.new_instance,
        hostname=config.karotz.hostname,
        timeout=config.karotz.timeout,
        trust_self_signed=config.karotz.trust_self_signed,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@contextmanager
def gateway_lifespan() -> Iterator[OpenKarotzGateway]:
    """Provide the configured gateway and close its transport afterwards."""
    container = get_container()
    gateway = container.karotz_gateway()

    logger.info("container.gateway.ready", hostname=gateway.hostname.string_value)
    try:
        yield gateway
    finally:
        gateway.close()
        container.karotz_gateway.reset()
        logger.info("container.gateway.closed")
