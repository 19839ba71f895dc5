"""Credential injection for outgoing requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

PT_AUTH_COOKIE_NAME = "PT_AUTH"


@runtime_checkable
class CredentialStrategy(Protocol):
    """Adds a session credential to the headers of a request."""

    @property
    def configured(self) -> bool:
        """Whether a credential is available."""
        ...

    def apply(self, headers: dict[str, str]) -> None:
        """Add the credential to ``headers`` in place."""
        ...


@dataclass(frozen=True)
class CookieCredential:
    """Sends the session token as a cookie.

    Attributes:
        value: The cookie value only, not the whole ``name=value`` pair
        cookie_name: Name of the cookie
    """

    value: str | None = None
    cookie_name: str = PT_AUTH_COOKIE_NAME

    @property
    def configured(self) -> bool:
        return bool(self.value)

    def apply(self, headers: dict[str, str]) -> None:
        if self.value:
            headers["Cookie"] = f"{self.cookie_name}={self.value}"
