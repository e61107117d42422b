"""Control plane registration"""

import logging
from typing import Any, Optional

import httpx

from ..api.client import APIError, Client
from .errors import RegistrationError
from .params import InstallParameters

logger = logging.getLogger(__name__)


def register_backend(
    params: InstallParameters,
    timeout: float = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> Any:
    """Send the single registration call; any failure is fatal"""
    client = Client(
        base_url=params.callback_url,
        token=params.api_key,
        timeout=timeout,
        transport=transport,
    )
    logger.debug("Registering with %s", params.callback_url)
    try:
        return client.register_server(
            api_key=params.api_key,
            server_url=params.server_url,
            port=params.port,
        )
    except APIError as e:
        raise RegistrationError(f"Registration with {params.callback_url} failed: {e}") from e
