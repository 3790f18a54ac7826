"""HTTP transport factory for talking to Karotz rabbits."""

from __future__ import annotations

import ssl

import httpx

from openkarotz.domain.entities.errors import KarotzConfigurationError
from openkarotz.shared import DEFAULT_TIMEOUT_SECONDS, get_logger

logger = get_logger(__name__)


def build_trust_all_ssl_context() -> ssl.SSLContext:
    """
    Build an SSL context that accepts self-signed certificates.

    Raises:
        KarotzConfigurationError: If the context cannot be initialized.
    """
    try:
        context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    except (ssl.SSLError, ValueError) as e:
        logger.error("karotz.http.ssl_context_failed", error=str(e), exc_info=e)
        raise KarotzConfigurationError(
            f"Unable to initialize the TLS context: {str(e)}"
        ) from e
    return context


def build_http_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    trust_self_signed: bool = True,
) -> httpx.Client:
    """Create the ``httpx.Client`` used by the gateway."""
    verify: ssl.SSLContext | bool = (
        build_trust_all_ssl_context() if trust_self_signed else True
    )
    logger.debug(
        "karotz.http.client_created",
        timeout=timeout,
        trust_self_signed=trust_self_signed,
    )
    return httpx.Client(timeout=timeout, verify=verify)
