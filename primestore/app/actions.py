from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


__all__ = (
    "AppAction",
    "AppActionAdapter",
    "Counter",
    "CounterAction",
    "DeleteFavoritePrimes",
    "FavoritePrimes",
    "FavoritePrimesAction",
    "PrimeModal",
    "PrimeModalAction"
)


class CounterAction(str, Enum):
    DECR_TAPPED = "decr_tapped"
    INCR_TAPPED = "incr_tapped"


class PrimeModalAction(str, Enum):
    SAVE_FAVORITE_PRIME_TAPPED = "save_favorite_prime_tapped"
    REMOVE_FAVORITE_PRIME_TAPPED = "remove_favorite_prime_tapped"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class DeleteFavoritePrimes(_Frozen):
    indices: frozenset[int]


FavoritePrimesAction = DeleteFavoritePrimes


class Counter(_Frozen):
    kind: Literal["counter"] = "counter"
    action: CounterAction


class PrimeModal(_Frozen):
    kind: Literal["prime_modal"] = "prime_modal"
    action: PrimeModalAction


class FavoritePrimes(_Frozen):
    kind: Literal["favorite_primes"] = "favorite_primes"
    action: FavoritePrimesAction


AppAction = Annotated[
    Union[Counter, PrimeModal, FavoritePrimes],
    Field(discriminator="kind")
]

AppActionAdapter: TypeAdapter[AppAction] = TypeAdapter(AppAction)
