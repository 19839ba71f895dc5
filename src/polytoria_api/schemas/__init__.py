"""Schemas package."""

from polytoria_api.schemas.polytoria_api import (
    FriendsOptions,
    FriendsResponse,
    Friendship,
    FriendUser,
    LeaderboardCategory,
    LeaderboardResponse,
    LeaderboardUser,
    MembershipType,
    SortOrder,
    Thumbnail,
    User,
    UserReference,
    UserSearchOptions,
    UserSearchResponse,
    UserSearchResult,
    UserSortField,
)

__all__ = [
    "FriendUser",
    "FriendsOptions",
    "FriendsResponse",
    "Friendship",
    "LeaderboardCategory",
    "LeaderboardResponse",
    "LeaderboardUser",
    "MembershipType",
    "SortOrder",
    "Thumbnail",
    "User",
    "UserReference",
    "UserSearchOptions",
    "UserSearchResponse",
    "UserSearchResult",
    "UserSortField",
]
