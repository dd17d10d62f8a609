from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


__all__ = (
    "Activity",
    "ActivityType",
    "AddedFavoritePrime",
    "AppState",
    "FavoritePrimesState",
    "RemovedFavoritePrime",
    "User"
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class User(_Frozen):
    id: int
    name: str
    bio: str


class AddedFavoritePrime(_Frozen):
    kind: Literal["added_favorite_prime"] = "added_favorite_prime"
    prime: int


class RemovedFavoritePrime(_Frozen):
    kind: Literal["removed_favorite_prime"] = "removed_favorite_prime"
    prime: int


ActivityType = Annotated[
    Union[AddedFavoritePrime, RemovedFavoritePrime],
    Field(discriminator="kind")
]


class Activity(_Frozen):
    timestamp: datetime
    type: ActivityType


class AppState(_Frozen):
    count: int = 0
    favorite_primes: tuple[int, ...] = ()
    logged_in_user: Optional[User] = None
    # Append-only, oldest first. Nothing records into it yet.
    activity_feed: tuple[Activity, ...] = ()


class FavoritePrimesState(_Frozen):
    favorite_primes: tuple[int, ...] = ()
    activity_feed: tuple[Activity, ...] = ()
