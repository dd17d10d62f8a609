from __future__ import annotations

import logging

from typing import Callable, Generic, Sequence, TypeVar

from ._reducer import Reducer


__all__ = (
    "Dispatch",
    "Middleware",
    "ReentrantDispatchError",
    "Store",
    "StoreError",
    "Subscriber",
    "Unsubscribe",

    "create_store"
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


class ReentrantDispatchError(StoreError):
    pass


Dispatch = Callable[[A], S]
Subscriber = Callable[[A, S], None]
Unsubscribe = Callable[[], None]


class Store(Generic[S, A]):
    # Not thread-safe. Reducers and subscribers must not dispatch re-entrantly.

    _reducer: Reducer
    _state: S

    _subscribers: list[_Subscription]

    _dispatching: bool

    def __init__(self, initial_state: S, reducer: Reducer) -> None:
        self._reducer = reducer
        self._state = initial_state

        self._subscribers = []

        self._dispatching = False

        logger.debug(
            "Store created with initial state %r",
            initial_state
        )

    @property
    def state(self) -> S:
        return self._state

    def get_state(self) -> S:
        return self._state

    def _notify(self, action: A, state: S) -> None:
        subscriptions = tuple(self._subscribers)

        for subscription in subscriptions:
            subscription.subscriber(action, state)

    def dispatch(self, action: A) -> S:
        if self._dispatching:
            raise ReentrantDispatchError(
                f"Cannot dispatch {action!r} while another dispatch is in flight"
            )

        self._dispatching = True

        try:
            self._state = self._reducer(self._state, action)

            logger.debug(
                "Dispatched %r",
                action,
                extra={
                    "action": repr(action),
                    "subscribers": len(self._subscribers)
                }
            )

            self._notify(action, self._state)
        finally:
            self._dispatching = False

        return self._state

    def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
        subscription = _Subscription(subscriber)
        self._subscribers.append(subscription)

        logger.debug("Subscribed %r", subscriber)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(subscription)
            except ValueError:
                return

            logger.debug("Unsubscribed %r", subscriber)

        return unsubscribe


class _Subscription:
    # Compared by identity so the same callable may be registered twice.
    __slots__ = ("subscriber",)

    def __init__(self, subscriber: Subscriber) -> None:
        self.subscriber = subscriber


Middleware = Callable[[Store[S, A], Dispatch, A], S]


def _apply_middleware(
    middleware: Sequence[Middleware]
) -> Callable[[Store[S, A]], Store[S, A]]:
    def apply(original_store: Store[S, A]) -> Store[S, A]:
        class EnhancedStore(Store[S, A]):
            def __init__(self) -> None:
                pass

            @property
            def state(self) -> S:
                return original_store.state

            def get_state(self) -> S:
                return original_store.get_state()

            def subscribe(self, subscriber: Subscriber) -> Unsubscribe:
                return original_store.subscribe(subscriber)

        enhanced_store = EnhancedStore()

        enhanced_dispatch: Dispatch = original_store.dispatch

        for callable in reversed(middleware):
            enhanced_dispatch = _bind_middleware(
                callable,
                enhanced_store,
                enhanced_dispatch
            )

        setattr(enhanced_store, "dispatch", enhanced_dispatch)

        return enhanced_store

    return apply


def _bind_middleware(
    middleware: Middleware,
    store: Store[S, A],
    next_dispatch: Dispatch
) -> Dispatch:
    def dispatch(action: A) -> S:
        return middleware(store, next_dispatch, action)

    return dispatch


def create_store(
    reducer: Reducer,
    initial_state: S,
    middleware: Sequence[Middleware] = ()
) -> Store[S, A]:
    store: Store[S, A] = Store(initial_state, reducer)

    if not middleware:
        return store

    return _apply_middleware(middleware)(store)
