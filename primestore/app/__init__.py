from .actions import (
    AppAction,
    AppActionAdapter,
    Counter,
    CounterAction,
    DeleteFavoritePrimes,
    FavoritePrimes,
    FavoritePrimesAction,
    PrimeModal,
    PrimeModalAction
)
from .primes import is_prime
from .reducers import (
    app_reducer,
    count_lens,
    counter_reducer,
    create_app_store,
    favorite_primes_lens,
    favorite_primes_reducer,
    favorite_primes_state_lens,
    prime_modal_reducer
)
from .state import (
    Activity,
    ActivityType,
    AddedFavoritePrime,
    AppState,
    FavoritePrimesState,
    RemovedFavoritePrime,
    User
)


__all__ = (
    "Activity",
    "ActivityType",
    "AddedFavoritePrime",
    "AppAction",
    "AppActionAdapter",
    "AppState",
    "Counter",
    "CounterAction",
    "DeleteFavoritePrimes",
    "FavoritePrimes",
    "FavoritePrimesAction",
    "FavoritePrimesState",
    "PrimeModal",
    "PrimeModalAction",
    "RemovedFavoritePrime",
    "User",

    "app_reducer",
    "count_lens",
    "counter_reducer",
    "create_app_store",
    "favorite_primes_lens",
    "favorite_primes_reducer",
    "favorite_primes_state_lens",
    "is_prime",
    "prime_modal_reducer"
)
