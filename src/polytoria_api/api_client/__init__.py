"""API client package."""

from polytoria_api.api_client.auth import CookieCredential, CredentialStrategy
from polytoria_api.api_client.errors import (
    ConfigurationError,
    PolytoriaError,
    ServiceError,
    TransportError,
    ValidationError,
)
from polytoria_api.api_client.polytoria_client import MAX_PAGE_SIZE, PolytoriaClient
from polytoria_api.api_client.retry import RetryPolicy
from polytoria_api.api_client.validation import validate_response

__all__ = [
    "MAX_PAGE_SIZE",
    "ConfigurationError",
    "CookieCredential",
    "CredentialStrategy",
    "PolytoriaClient",
    "PolytoriaError",
    "RetryPolicy",
    "ServiceError",
    "TransportError",
    "ValidationError",
    "validate_response",
]
