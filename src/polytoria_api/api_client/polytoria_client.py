"""Async Polytoria API client with rate limit handling and validation."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import aiohttp

from polytoria_api.api_client.auth import CookieCredential, CredentialStrategy
from polytoria_api.api_client.errors import (
    ConfigurationError,
    TransportError,
    ValidationError,
)
from polytoria_api.api_client.retry import RetryPolicy
from polytoria_api.api_client.validation import raise_for_service_errors, validate_response
from polytoria_api.config import Settings, get_settings
from polytoria_api.logging_config import get_logger
from polytoria_api.schemas.polytoria_api import (
    FriendsOptions,
    FriendsResponse,
    Friendship,
    LeaderboardCategory,
    LeaderboardResponse,
    LeaderboardUser,
    User,
    UserSearchOptions,
    UserSearchResponse,
    UserReference,
    UserSearchResult,
)

logger = get_logger(__name__)

# Largest page the user search endpoint returns
MAX_PAGE_SIZE = 100

JSON_HEADERS = {"Content-Type": "application/json"}


class PolytoriaClient:
    """Async client for the Polytoria API.

    This client handles:
    - Session credential injection
    - Rate limit retries (HTTP 429)
    - Service error and response validation
    - Paging through user search results
    """

    def __init__(
        self,
        settings: Settings | None = None,
        credentials: CredentialStrategy | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize the Polytoria API client.

        Args:
            settings: Client settings (defaults to the cached settings)
            credentials: Credential strategy (defaults to the PT_AUTH cookie from settings)
            retry_policy: Rate limit retry policy (defaults to the one described by settings)
        """
        self._settings = settings or get_settings()
        self._explicit_credentials = credentials
        self._explicit_retry_policy = retry_policy
        self._session: aiohttp.ClientSession | None = None

    @property
    def settings(self) -> Settings:
        """Settings the client was created with."""
        return self._settings

    @property
    def _credentials(self) -> CredentialStrategy:
        # Settings are read on every call so later changes take effect
        if self._explicit_credentials is not None:
            return self._explicit_credentials
        return CookieCredential(self._settings.pt_auth_cookie)

    @property
    def _retry_policy(self) -> RetryPolicy:
        if self._explicit_retry_policy is not None:
            return self._explicit_retry_policy
        return RetryPolicy.from_settings(self._settings)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> PolytoriaClient:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: BaseException | None,
        exc_val: BaseException | None,
        exc_tb: BaseException | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    def _api_url(self, endpoint: str) -> str:
        return f"{self._settings.api_base_url.rstrip('/')}{endpoint}"

    def _site_url(self, endpoint: str) -> str:
        return f"{self._settings.site_base_url.rstrip('/')}{endpoint}"

    async def _request(
        self,
        url: str,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make a request, retrying while the API rate limits us.

        Args:
            url: Full URL
            method: HTTP method
            params: Query parameters
            headers: Extra request headers

        Returns:
            Decoded JSON response body

        Raises:
            TransportError: If the API answers with a non-200 status
            ServiceError: If the response body reports errors
            ValidationError: If the response body is not JSON
        """
        request_headers = dict(headers or {})
        self._credentials.apply(request_headers)

        retry_policy = self._retry_policy
        session = await self._get_session()
        attempt = 0

        while True:
            if self._settings.debug:
                logger.info(
                    "Fetching",
                    url=url,
                    method=method,
                    params=params,
                    attempt=attempt,
                )

            async with session.request(
                method, url, params=params, headers=request_headers
            ) as response:
                if response.status == 429 and retry_policy.should_retry(attempt):
                    delay = retry_policy.delay_for(attempt)
                    if self._settings.debug:
                        logger.info(
                            "Ratelimit encountered, retrying",
                            url=url,
                            delay_seconds=delay,
                            attempt=attempt,
                        )
                    attempt += 1
                    await asyncio.sleep(delay)
                    continue

                if response.status != 200:
                    logger.error(
                        "Polytoria API error",
                        status_code=response.status,
                        reason=response.reason,
                        url=url,
                    )
                    raise TransportError(response.status, response.reason or "", url)

                try:
                    body = await response.json(content_type=None)
                except ValueError as e:
                    logger.error(
                        "Failed to parse JSON response",
                        url=url,
                        error=str(e),
                    )
                    raise ValidationError(
                        message=f"Invalid JSON response: {e}",
                        endpoint=url,
                        url=url,
                        response_body="",
                        original_error=e,
                    ) from e

            raise_for_service_errors(body, url)
            return body

    # Users

    async def get_users(self, options: UserSearchOptions | None = None) -> list[UserSearchResult]:
        """Search users.

        Args:
            options: Search filters, sort and paging

        Returns:
            One page of matching users

        Raises:
            ConfigurationError: If more than 100 users are requested
        """
        options = options or UserSearchOptions()
        if options.limit is not None and options.limit > MAX_PAGE_SIZE:
            raise ConfigurationError(
                f"Limit cannot be greater than {MAX_PAGE_SIZE}. "
                "Use PolytoriaClient.get_many_users instead."
            )

        url = self._api_url("/users")
        data = await self._request(url, params=options.to_params(), headers=JSON_HEADERS)
        response = validate_response(UserSearchResponse, data, "users", url)
        return response.users

    async def get_user(self, user_id: int) -> User:
        """Get a full user profile.

        Args:
            user_id: ID of the user

        Returns:
            User data
        """
        url = self._api_url(f"/users/{user_id}")
        data = await self._request(url, headers=JSON_HEADERS)
        return validate_response(User, data, "users/{id}", url)

    async def get_full_user(self, user: UserReference) -> User:
        """Fetch the full profile of a partial user record.

        Args:
            user: Any record with an ``id`` (search result, friend, leaderboard row)

        Returns:
            User data
        """
        return await self.get_user(user.id)

    async def get_friends(self, options: FriendsOptions) -> list[Friendship]:
        """Get one page of a user's friends.

        Args:
            options: User ID and paging

        Returns:
            Friendships of the user
        """
        url = self._api_url(f"/users/{options.id}/friends")
        data = await self._request(url, params=options.to_params(), headers=JSON_HEADERS)
        response = validate_response(FriendsResponse, data, "users/{id}/friends", url)
        return response.friends

    async def get_many_users(
        self,
        count: int,
        options: UserSearchOptions | None = None,
    ) -> list[UserSearchResult]:
        """Search users beyond the 100 users a single page holds.

        Pages are fetched one after another until ``count`` users were
        returned or the results run out.

        Args:
            count: Number of users to fetch
            options: Search filters and sort (page and limit are ignored)

        Returns:
            Up to ``count`` users, in result order

        Raises:
            ConfigurationError: If rate limit handling is disabled
        """
        self._require_ratelimit_handling("get_many_users")
        options = options or UserSearchOptions()

        if count <= 0:
            return []
        if count <= MAX_PAGE_SIZE:
            return await self.get_users(options.model_copy(update={"limit": count, "page": None}))

        users: list[UserSearchResult] = []
        page = 1
        page_limit = MAX_PAGE_SIZE
        users_remaining = count

        while True:
            body = await self.get_users(
                options.model_copy(update={"limit": page_limit, "page": page})
            )
            users.extend(body)

            users_remaining -= MAX_PAGE_SIZE
            page_limit = min(users_remaining, MAX_PAGE_SIZE)

            logger.debug(
                "Fetched user page",
                page=page,
                page_size=len(body),
                total_so_far=len(users),
            )

            if len(body) < MAX_PAGE_SIZE or users_remaining <= 0:
                break

            page += 1

        return users[:count]

    async def get_users_with_condition(
        self,
        count: int,
        condition: Callable[[UserSearchResult], bool],
        options: UserSearchOptions | None = None,
    ) -> list[UserSearchResult]:
        """Collect ``count`` users that meet a condition.

        Note: this pages through search results until enough users match,
        which can take a lot of requests. If an exact amount is not needed,
        filter the result of get_many_users instead.

        Args:
            count: Number of matching users to collect
            condition: Predicate a user has to satisfy
            options: Search filters and sort (page and limit are ignored)

        Returns:
            Up to ``count`` matching users, in result order

        Raises:
            ConfigurationError: If rate limit handling is disabled
        """
        self._require_ratelimit_handling("get_users_with_condition")
        options = options or UserSearchOptions()

        if count <= 0:
            return []

        users: list[UserSearchResult] = []
        page = 1
        users_remaining = count

        while True:
            body = await self.get_users(
                options.model_copy(update={"limit": MAX_PAGE_SIZE, "page": page})
            )
            for user in body:
                if condition(user):
                    users.append(user)
                    users_remaining -= 1

                if users_remaining <= 0:
                    break

            if len(body) < MAX_PAGE_SIZE or users_remaining <= 0:
                break

            page += 1

        logger.debug(
            "Collected users with condition",
            requested=count,
            collected=len(users),
            pages=page,
        )

        return users[:count]

    # Rankings (internal API)

    async def get_leaderboard(
        self,
        category: LeaderboardCategory | str,
        page: int = 1,
    ) -> list[LeaderboardUser]:
        """Get one page of the rankings.

        This is an internal API and requires a valid PT_AUTH cookie. Using
        internal APIs is not directly allowed by Polytoria; abuse may result
        in a ban.

        Args:
            category: Statistic to rank by
            page: Page number, starting at 1

        Returns:
            Ranked users on the page (10 per page)

        Raises:
            ConfigurationError: If no session credential is configured or the
                category is unknown
        """
        if not self._credentials.configured:
            raise ConfigurationError(
                "Cannot use get_leaderboard without a valid Polytoria cookie."
            )

        try:
            category = LeaderboardCategory(category)
        except ValueError as e:
            choices = ", ".join(member.value for member in LeaderboardCategory)
            raise ConfigurationError(
                f"Unknown leaderboard category {category!r}, expected one of: {choices}"
            ) from e

        url = self._site_url("/api/rankings")
        data = await self._request(url, params={"category": category.value, "page": page})
        response = validate_response(LeaderboardResponse, data, "rankings", url)
        return response.data

    def _require_ratelimit_handling(self, operation: str) -> None:
        if not self._retry_policy.enabled:
            raise ConfigurationError(
                f"Cannot use {operation} without rate limit handling enabled."
            )
