"""Retry policy for rate limited requests.

A rate limited request is resent after a linearly growing delay:
``base_delay + attempt * delay_step`` seconds, with ``attempt`` starting at 0.
By default there is no retry ceiling, so a request only returns once the API
stops answering 429.
"""

from dataclasses import dataclass

from polytoria_api.config import Settings


@dataclass(frozen=True)
class RetryPolicy:
    """Linear backoff for HTTP 429 responses.

    Attributes:
        enabled: Whether 429 responses are retried at all
        base_delay: Delay before the first retry, in seconds
        delay_step: Delay added for every further retry, in seconds
        max_retries: Retry ceiling, None for unbounded
    """

    enabled: bool = True
    base_delay: float = 0.25
    delay_step: float = 0.25
    max_retries: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RetryPolicy":
        """Create a policy from client settings."""
        return cls(
            enabled=settings.handle_ratelimits,
            base_delay=settings.ratelimit_base_delay_seconds,
            delay_step=settings.ratelimit_delay_step_seconds,
            max_retries=settings.ratelimit_max_retries,
        )

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait before retry number ``attempt`` (0-based)."""
        return self.base_delay + attempt * self.delay_step

    def should_retry(self, attempt: int) -> bool:
        """Whether a 429 on retry number ``attempt`` may be retried again."""
        if not self.enabled:
            return False
        return self.max_retries is None or attempt < self.max_retries
