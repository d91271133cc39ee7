"""
Configuration models for the transport used by http-builder.
"""
import logging
import os
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

# Constants
DEFAULT_TIMEOUT_CONNECT = 5.0
DEFAULT_TIMEOUT_READ = 30.0
DEFAULT_TIMEOUT_WRITE = 10.0
DEFAULT_MAX_REDIRECTS = 10

ENV_TIMEOUT = "HTTP_BUILDER_TIMEOUT"
ENV_VERIFY_SSL = "HTTP_BUILDER_VERIFY_SSL"
ENV_PROXY_URL = "HTTP_BUILDER_PROXY_URL"
ENV_FOLLOW_REDIRECTS = "HTTP_BUILDER_FOLLOW_REDIRECTS"


class TimeoutConfig(BaseModel):
    """Timeout configuration."""
    connect: float = DEFAULT_TIMEOUT_CONNECT
    read: float = DEFAULT_TIMEOUT_READ
    write: float = DEFAULT_TIMEOUT_WRITE
    pool: Optional[float] = None


class ClientConfig(BaseModel):
    """
    Transport configuration. Fields left as None are resolved from the
    environment, then from defaults.
    """
    timeout: Optional[Union[float, TimeoutConfig]] = None
    verify_ssl: Optional[bool] = None
    follow_redirects: Optional[bool] = None
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    trust_env: bool = False
    proxy_url: Optional[str] = None

    @field_validator("proxy_url")
    @classmethod
    def validate_proxy_url(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("proxy_url must start with http:// or https://")
        return v

    @field_validator("max_redirects")
    @classmethod
    def validate_max_redirects(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_redirects must not be negative")
        return v


@dataclass
class ResolvedConfig:
    """Fully resolved configuration ready for usage."""
    timeout: TimeoutConfig
    verify_ssl: bool
    follow_redirects: bool
    max_redirects: int
    trust_env: bool
    proxy_url: Optional[str]


def resolve_env(arg: Any, env_keys: Union[str, List[str]], default: Any) -> Any:
    """
    Resolve a value in priority order:
    1. Direct argument (if not None)
    2. Environment variables
    3. Default value
    """
    if arg is not None:
        return arg

    if isinstance(env_keys, str):
        env_keys = [env_keys]

    for key in env_keys:
        val = os.getenv(key)
        if val is not None:
            return val

    return default


def resolve_bool(arg: Any, env_keys: Union[str, List[str]], default: bool) -> bool:
    """Resolve boolean value with string conversion support."""
    val = resolve_env(arg, env_keys, default)
    if isinstance(val, str):
        return val.strip().lower() in ("true", "1", "yes", "on")
    return bool(val)


def resolve_float(arg: Any, env_keys: Union[str, List[str]], default: float) -> float:
    val = resolve_env(arg, env_keys, default)
    try:
        return float(val)
    except (ValueError, TypeError):
        logger.warning(f"Ignoring non-numeric value {val!r} for {env_keys}")
        return default


def is_ssl_verify_disabled_by_env() -> bool:
    """Check if SSL verification is disabled by environment variables."""
    if os.getenv("NODE_TLS_REJECT_UNAUTHORIZED") == "0":
        return True
    return os.getenv("SSL_CERT_VERIFY") == "0"


def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> TimeoutConfig:
    """Normalize timeout to TimeoutConfig object."""
    if timeout is None:
        env_timeout = os.getenv(ENV_TIMEOUT)
        if env_timeout is None:
            return TimeoutConfig()
        timeout = resolve_float(None, ENV_TIMEOUT, DEFAULT_TIMEOUT_READ)
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=float(timeout), read=float(timeout), write=float(timeout))
    return timeout


def resolve_config(config: Optional[ClientConfig] = None) -> ResolvedConfig:
    """Apply environment overrides and defaults."""
    config = config or ClientConfig()

    verify_default = not is_ssl_verify_disabled_by_env()
    # Values from the environment go through the same validation as arguments.
    proxy_url = ClientConfig(proxy_url=resolve_env(config.proxy_url, ENV_PROXY_URL, None)).proxy_url

    return ResolvedConfig(
        timeout=normalize_timeout(config.timeout),
        verify_ssl=resolve_bool(config.verify_ssl, ENV_VERIFY_SSL, verify_default),
        follow_redirects=resolve_bool(config.follow_redirects, ENV_FOLLOW_REDIRECTS, True),
        max_redirects=config.max_redirects,
        trust_env=config.trust_env,
        proxy_url=proxy_url,
    )
