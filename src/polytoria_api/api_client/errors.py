"""Exceptions raised by the Polytoria API client."""


class PolytoriaError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(PolytoriaError):
    """Raised when a call is not allowed with the current configuration.

    This is always raised before any request is sent.
    """


class TransportError(PolytoriaError):
    """Raised when the API answers with a non-200 status."""

    def __init__(self, status_code: int, status_text: str, url: str) -> None:
        super().__init__(f"Failed to fetch {url}: {status_code} {status_text}")
        self.status_code = status_code
        self.status_text = status_text
        self.url = url


class ServiceError(PolytoriaError):
    """Raised when a 200 response reports errors in its body.

    Only the first reported error is kept.
    """

    def __init__(self, code: str, message: str, url: str) -> None:
        super().__init__(f"Failed to fetch {url}: {code} {message}")
        self.code = code
        self.message = message
        self.url = url


class ValidationError(PolytoriaError):
    """Raised when a response body does not match the expected schema."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        url: str,
        response_body: str,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.endpoint = endpoint
        self.url = url
        self.response_body = response_body
        self.original_error = original_error
