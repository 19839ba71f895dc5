"""Pydantic schemas for Polytoria API payloads and request options.

Response models validate and type the JSON bodies returned by the API.
Field names follow Python conventions; the wire names are kept as aliases.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

_RESPONSE_CONFIG = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class MembershipType(str, Enum):
    """Membership tiers a user can hold."""

    FREE = "free"
    PLUS = "plus"
    PLUS_DELUXE = "plusDeluxe"


class UserSortField(str, Enum):
    """Sort keys accepted by the user search endpoint."""

    ID = "id"
    USERNAME = "username"
    REGISTERED_AT = "registeredAt"
    LAST_SEEN_AT = "lastSeenAt"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class LeaderboardCategory(str, Enum):
    """Statistics the rankings endpoint can rank users by."""

    NETWORTH = "networth"
    VISITS = "visits"
    SALES = "sales"
    FORUM_POSTS = "forumposts"
    PROFILE_VIEWS = "profileviews"


class UserReference(Protocol):
    """Anything that identifies a user by ID."""

    @property
    def id(self) -> int: ...


# Response payloads


class Thumbnail(BaseModel):
    """Avatar and headshot image URLs of a user."""

    avatar: str
    icon: str

    model_config = _RESPONSE_CONFIG


class UserSearchResult(BaseModel):
    """User as returned by the search endpoint.

    This is the full profile without the counter fields.
    """

    id: int
    username: str
    description: str = ""
    thumbnail: Thumbnail
    playing: int | None = Field(None, description="ID of the place the user is in, if any")
    membership_type: MembershipType = Field(..., alias="membershipType")
    is_staff: bool = Field(False, alias="isStaff")
    registered_at: datetime = Field(..., alias="registeredAt")
    last_seen_at: datetime = Field(..., alias="lastSeenAt")

    model_config = _RESPONSE_CONFIG


class User(UserSearchResult):
    """Full user profile from the users/{id} endpoint."""

    net_worth: int = Field(..., alias="netWorth")
    place_visits: int = Field(..., alias="placeVisits")
    profile_visits: int = Field(..., alias="profileVisits")
    forum_posts: int = Field(..., alias="forumPosts")
    asset_sales: int = Field(..., alias="assetSales")


class FriendUser(BaseModel):
    """Reduced user projection embedded in a friendship."""

    id: int
    username: str
    thumbnail: str

    model_config = _RESPONSE_CONFIG


class Friendship(BaseModel):
    """An accepted friendship."""

    accepted_at: datetime = Field(..., alias="acceptedAt")
    user: FriendUser

    model_config = _RESPONSE_CONFIG


class LeaderboardUser(BaseModel):
    """One row of a rankings page."""

    id: int
    username: str
    avatar_id: str = Field(..., alias="avatarID")
    profile_url: str = Field(..., alias="profileUrl")
    avatar_url: str = Field(..., alias="avatarUrl")
    statistic: int | float
    rank: int = Field(..., ge=1)

    model_config = _RESPONSE_CONFIG


class UserSearchResponse(BaseModel):
    """Envelope of the user search endpoint."""

    users: list[UserSearchResult]

    model_config = _RESPONSE_CONFIG


class FriendsResponse(BaseModel):
    """Envelope of the friends endpoint."""

    friends: list[Friendship]

    model_config = _RESPONSE_CONFIG


class LeaderboardResponse(BaseModel):
    """Envelope of the rankings endpoint."""

    data: list[LeaderboardUser]

    model_config = _RESPONSE_CONFIG


# Request options


class UserSearchOptions(BaseModel):
    """Filters for the user search endpoint."""

    search: str | None = None
    sort: UserSortField | None = None
    order: SortOrder | None = None
    page: int | None = Field(None, ge=1)
    limit: int | None = Field(None, ge=1)

    def to_params(self) -> dict[str, Any]:
        """Serialize the set options to query parameters."""
        return self.model_dump(mode="json", exclude_none=True)


class FriendsOptions(BaseModel):
    """Parameters for the friends endpoint."""

    id: int
    page: int | None = Field(None, ge=1)
    limit: int | None = Field(None, ge=1)

    def to_params(self) -> dict[str, Any]:
        """Serialize page and limit to query parameters."""
        return self.model_dump(mode="json", exclude_none=True, exclude={"id"})
