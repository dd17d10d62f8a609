from __future__ import annotations

from typing import Callable, Generic, Optional, Sequence, TypeVar

from pydantic import BaseModel


A = TypeVar("A")
S = TypeVar("S")

G = TypeVar("G")
L = TypeVar("L")
M = TypeVar("M")

GA = TypeVar("GA")
LA = TypeVar("LA")


__all__ = (
    "ActionProjection",
    "Lens",
    "Reducer",

    "combine",
    "identity_reducer",
    "pullback"
)


Reducer = Callable[[S, A], S]
ActionProjection = Callable[[GA], Optional[LA]]


class Lens(Generic[G, L]):
    # get(set(whole, part)) == part; set never mutates whole.

    def __init__(
        self,
        get: Callable[[G], L],
        set: Callable[[G, L], G]
    ) -> None:
        self._get = get
        self._set = set

    def get(self, whole: G) -> L:
        return self._get(whole)

    def set(self, whole: G, part: L) -> G:
        return self._set(whole, part)

    def modify(self, whole: G, function: Callable[[L], L]) -> G:
        return self.set(whole, function(self.get(whole)))

    def compose(self, inner: Lens[L, M]) -> Lens[G, M]:
        def get(whole: G) -> M:
            return inner.get(self.get(whole))

        def set(whole: G, part: M) -> G:
            return self.set(whole, inner.set(self.get(whole), part))

        return Lens(get, set)

    @classmethod
    def attribute(cls, name: str) -> Lens[BaseModel, L]:
        def get(whole: BaseModel) -> L:
            return getattr(whole, name)

        def set(whole: BaseModel, part: L) -> BaseModel:
            if getattr(whole, name) is part:
                return whole

            return whole.model_copy(update={name: part})

        return cls(get, set) # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(get={self._get!r}, set={self._set!r})"


def identity_reducer(state: S, action: A) -> S:
    return state


def combine(reducers: Sequence[Reducer]) -> Reducer:
    chain = tuple(reducers)

    if not chain:
        return identity_reducer

    def combined(state: S, action: A) -> S:
        for reducer in chain:
            state = reducer(state, action)

        return state

    return combined


def pullback(
    reducer: Reducer,
    lens: Lens[G, L],
    action: Optional[ActionProjection] = None
) -> Reducer:
    def pulled_back(global_state: G, global_action: GA) -> G:
        if action is None:
            local_action = global_action
        else:
            local_action = action(global_action)

            if local_action is None:
                return global_state

        local_state = lens.get(global_state)
        updated_local_state = reducer(local_state, local_action)

        return lens.set(global_state, updated_local_state)

    return pulled_back
