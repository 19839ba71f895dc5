"""Tests for the rate limit retry policy."""

from polytoria_api.api_client.retry import RetryPolicy
from polytoria_api.config import Settings


class TestRetryPolicy:
    """Tests for the RetryPolicy class."""

    def test_default_delays_are_linear(self) -> None:
        policy = RetryPolicy()

        assert [policy.delay_for(attempt) for attempt in range(4)] == [0.25, 0.5, 0.75, 1.0]

    def test_unbounded_by_default(self) -> None:
        policy = RetryPolicy()

        assert policy.should_retry(0)
        assert policy.should_retry(10_000)

    def test_max_retries(self) -> None:
        policy = RetryPolicy(max_retries=1)

        assert policy.should_retry(0)
        assert not policy.should_retry(1)

    def test_disabled_never_retries(self) -> None:
        policy = RetryPolicy(enabled=False)

        assert not policy.should_retry(0)

    def test_from_settings(self) -> None:
        settings = Settings(
            _env_file=None,
            handle_ratelimits=False,
            ratelimit_base_delay_seconds=1.0,
            ratelimit_delay_step_seconds=0.5,
            ratelimit_max_retries=3,
        )

        policy = RetryPolicy.from_settings(settings)

        assert policy == RetryPolicy(enabled=False, base_delay=1.0, delay_step=0.5, max_retries=3)
        assert policy.delay_for(2) == 2.0
