"""
Creation of the httpx client that sends the requests built by RequestBuilder.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ..config import ClientConfig, ResolvedConfig, resolve_config

logger = logging.getLogger(__name__)

_default_client: Optional[httpx.Client] = None


def get_client_kwargs(config: ResolvedConfig) -> Dict[str, Any]:
    """Build kwargs for httpx.Client."""
    kwargs: Dict[str, Any] = {
        "timeout": httpx.Timeout(
            connect=config.timeout.connect,
            read=config.timeout.read,
            write=config.timeout.write,
            pool=config.timeout.pool,
        ),
        "verify": config.verify_ssl,
        "follow_redirects": config.follow_redirects,
        "max_redirects": config.max_redirects,
        "trust_env": config.trust_env,
    }

    if config.proxy_url:
        kwargs["proxy"] = config.proxy_url

    return kwargs


def create_client(config: Optional[ClientConfig] = None) -> httpx.Client:
    """Create a configured httpx.Client."""
    kwargs = get_client_kwargs(resolve_config(config))
    logger.debug(f"Creating httpx.Client with config: {kwargs}")
    return httpx.Client(**kwargs)


def get_default_client() -> httpx.Client:
    """Get the shared client, creating it on first use."""
    global _default_client
    if _default_client is None or _default_client.is_closed:
        _default_client = create_client()
    return _default_client


def set_default_client(client: Optional[httpx.Client]) -> None:
    """
    Replace the shared client. The previous one is not closed; pass None to
    have a fresh one created from the environment on next use.
    """
    global _default_client
    _default_client = client


def close_default_client() -> None:
    """Close the shared client if it was created."""
    global _default_client
    if _default_client is not None:
        logger.debug("Closing default httpx.Client")
        _default_client.close()
        _default_client = None
