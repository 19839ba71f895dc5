"""Async client for the Polytoria public and internal APIs."""

from polytoria_api.api_client import (
    ConfigurationError,
    CookieCredential,
    PolytoriaClient,
    PolytoriaError,
    RetryPolicy,
    ServiceError,
    TransportError,
    ValidationError,
)
from polytoria_api.config import Settings, get_settings
from polytoria_api.logging_config import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "CookieCredential",
    "PolytoriaClient",
    "PolytoriaError",
    "RetryPolicy",
    "ServiceError",
    "Settings",
    "TransportError",
    "ValidationError",
    "configure_logging",
    "get_logger",
    "get_settings",
]
