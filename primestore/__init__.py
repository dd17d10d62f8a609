from ._config import Settings, get_settings
from ._logging import JSONFormatter, log_actions, setup_logging
from ._reducer import (
    ActionProjection,
    Lens,
    Reducer,
    combine,
    identity_reducer,
    pullback
)
from ._store import (
    Dispatch,
    Middleware,
    ReentrantDispatchError,
    Store,
    StoreError,
    Subscriber,
    Unsubscribe,
    create_store
)


__all__ = (
    "ActionProjection",
    "Dispatch",
    "JSONFormatter",
    "Lens",
    "Middleware",
    "Reducer",
    "ReentrantDispatchError",
    "Settings",
    "Store",
    "StoreError",
    "Subscriber",
    "Unsubscribe",

    "combine",
    "create_store",
    "get_settings",
    "identity_reducer",
    "log_actions",
    "pullback",
    "setup_logging"
)
