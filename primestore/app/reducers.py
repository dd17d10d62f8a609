from __future__ import annotations

import logging

from typing import Any, Optional, Sequence

from .._config import Settings, get_settings
from .._logging import setup_logging
from .._reducer import Lens, Reducer, combine, pullback
from .._store import Middleware, Store, create_store
from .actions import (
    Counter,
    CounterAction,
    FavoritePrimes,
    PrimeModal,
    PrimeModalAction
)
from .state import AppState, FavoritePrimesState


__all__ = (
    "app_reducer",
    "count_lens",
    "counter_reducer",
    "create_app_store",
    "favorite_primes_lens",
    "favorite_primes_reducer",
    "favorite_primes_state_lens",
    "prime_modal_reducer"
)


logger = logging.getLogger(__name__)


def counter_reducer(state: int, action: Any) -> int:
    if not isinstance(action, Counter):
        return state

    if action.action is CounterAction.INCR_TAPPED:
        return state + 1

    if action.action is CounterAction.DECR_TAPPED:
        return state - 1

    return state


def prime_modal_reducer(state: AppState, action: Any) -> AppState:
    if not isinstance(action, PrimeModal):
        return state

    if action.action is PrimeModalAction.SAVE_FAVORITE_PRIME_TAPPED:
        return state.model_copy(
            update={"favorite_primes": state.favorite_primes + (state.count,)}
        )

    if action.action is PrimeModalAction.REMOVE_FAVORITE_PRIME_TAPPED:
        return state.model_copy(
            update={
                "favorite_primes": tuple(
                    prime
                    for prime in state.favorite_primes
                    if prime != state.count
                )
            }
        )

    return state


def favorite_primes_reducer(
    state: FavoritePrimesState,
    action: Any
) -> FavoritePrimesState:
    if not isinstance(action, FavoritePrimes):
        return state

    favorite_primes = list(state.favorite_primes)
    size = len(favorite_primes)

    for index in sorted(action.action.indices, reverse=True):
        if not 0 <= index < size:
            logger.debug(
                "Skipping favorite prime index %d out of range 0..%d",
                index,
                size - 1
            )

            continue

        del favorite_primes[index]

    if len(favorite_primes) == size:
        return state

    return state.model_copy(update={"favorite_primes": tuple(favorite_primes)})


count_lens: Lens[AppState, int] = Lens.attribute("count")

favorite_primes_lens: Lens[FavoritePrimesState, tuple[int, ...]] = \
    Lens.attribute("favorite_primes")


def _get_favorite_primes_state(state: AppState) -> FavoritePrimesState:
    return FavoritePrimesState.model_construct(
        favorite_primes=state.favorite_primes,
        activity_feed=state.activity_feed
    )


def _set_favorite_primes_state(
    state: AppState,
    value: FavoritePrimesState
) -> AppState:
    if (
        value.favorite_primes is state.favorite_primes
        and value.activity_feed is state.activity_feed
    ):
        return state

    return state.model_copy(
        update={
            "favorite_primes": value.favorite_primes,
            "activity_feed": value.activity_feed
        }
    )


favorite_primes_state_lens: Lens[AppState, FavoritePrimesState] = Lens(
    _get_favorite_primes_state,
    _set_favorite_primes_state
)


app_reducer: Reducer = combine([
    pullback(counter_reducer, count_lens),
    prime_modal_reducer,
    pullback(favorite_primes_reducer, favorite_primes_state_lens)
])


def create_app_store(
    settings: Optional[Settings] = None,
    middleware: Sequence[Middleware] = ()
) -> Store[AppState, Any]:
    settings = settings or get_settings()

    setup_logging(settings.log_level, settings.log_format)

    return create_store(
        app_reducer,
        AppState(count=settings.initial_count),
        middleware
    )
