"""Tests for the reducer combinators: Lens, combine and pullback."""

import pytest

from primestore import Lens, combine, identity_reducer, pullback
from primestore.app import (
    AppState,
    Counter,
    CounterAction,
    DeleteFavoritePrimes,
    FavoritePrimes,
    FavoritePrimesState,
    PrimeModal,
    PrimeModalAction,
    count_lens,
    counter_reducer,
    favorite_primes_lens,
    favorite_primes_reducer,
    favorite_primes_state_lens
)


INCR = Counter(action=CounterAction.INCR_TAPPED)
DECR = Counter(action=CounterAction.DECR_TAPPED)
DELETE_FIRST = FavoritePrimes(action=DeleteFavoritePrimes(indices={0}))
SAVE = PrimeModal(action=PrimeModalAction.SAVE_FAVORITE_PRIME_TAPPED)


# --- Lens ---


@pytest.mark.parametrize("count", [-3, 0, 1, 42])
def test_count_lens_get_after_set(populated_state, count):
    assert count_lens.get(count_lens.set(populated_state, count)) == count


@pytest.mark.parametrize(
    "local",
    [
        FavoritePrimesState(),
        FavoritePrimesState(favorite_primes=(11, 13)),
        FavoritePrimesState(favorite_primes=(2, 2, 2)),
    ]
)
def test_favorite_primes_state_lens_get_after_set(populated_state, local):
    updated = favorite_primes_state_lens.set(populated_state, local)

    assert favorite_primes_state_lens.get(updated) == local


def test_lens_set_does_not_mutate_whole(populated_state):
    count_lens.set(populated_state, 100)

    assert populated_state.count == 7


def test_lens_compose_focuses_nested_part(populated_state):
    lens = favorite_primes_state_lens.compose(favorite_primes_lens)

    assert lens.get(populated_state) == (2, 3, 5, 7)

    updated = lens.set(populated_state, (17,))

    assert updated.favorite_primes == (17,)
    assert updated.count == populated_state.count
    assert lens.get(updated) == (17,)


def test_lens_modify(populated_state):
    updated = count_lens.modify(populated_state, lambda count: count * 2)

    assert updated.count == 14


def test_lens_from_plain_functions():
    first = Lens(lambda pair: pair[0], lambda pair, value: (value, pair[1]))

    assert first.get((1, "a")) == 1
    assert first.set((1, "a"), 9) == (9, "a")


# --- pullback ---


def test_pullback_applies_local_reducer_to_slice(populated_state):
    reducer = pullback(counter_reducer, count_lens)

    assert reducer(populated_state, INCR).count == 8


def test_pullback_leaves_other_fields_untouched(populated_state):
    reducer = pullback(counter_reducer, count_lens)

    updated = reducer(populated_state, INCR)

    assert updated.favorite_primes is populated_state.favorite_primes
    assert updated.logged_in_user is populated_state.logged_in_user
    assert updated.activity_feed is populated_state.activity_feed


def test_pullback_composite_slice_leaves_count_and_user(populated_state):
    reducer = pullback(favorite_primes_reducer, favorite_primes_state_lens)

    updated = reducer(populated_state, DELETE_FIRST)

    assert updated.favorite_primes == (3, 5, 7)
    assert updated.count == populated_state.count
    assert updated.logged_in_user is populated_state.logged_in_user


def test_pullback_returns_global_state_on_no_op(populated_state):
    reducer = pullback(counter_reducer, count_lens)

    assert reducer(populated_state, SAVE) is populated_state


def test_pullback_with_action_projection(populated_state):
    calls = []

    def local_counter(state, action):
        calls.append(action)

        if action is CounterAction.INCR_TAPPED:
            return state + 1

        return state

    def project(action):
        if isinstance(action, Counter):
            return action.action

        return None

    reducer = pullback(local_counter, count_lens, action=project)

    assert reducer(populated_state, INCR).count == 8
    assert reducer(populated_state, SAVE) is populated_state
    assert calls == [CounterAction.INCR_TAPPED]


def test_pullback_writes_back_in_place_local_changes():
    lens = Lens(
        lambda whole: dict(whole["sub"]),
        lambda whole, part: {**whole, "sub": part}
    )

    def bump(local, action):
        local["n"] += 1
        return local

    updated = pullback(bump, lens)({"sub": {"n": 0}, "other": 1}, "go")

    assert updated == {"sub": {"n": 1}, "other": 1}


def test_attribute_lens_set_with_same_part_returns_whole(populated_state):
    assert count_lens.set(populated_state, populated_state.count) is populated_state


def test_pullback_composite_slice_no_op_keeps_global_state(populated_state):
    reducer = pullback(favorite_primes_reducer, favorite_primes_state_lens)

    assert reducer(populated_state, SAVE) is populated_state
    assert reducer(populated_state, INCR) is populated_state


# --- combine ---


def test_combine_threads_state_in_order():
    log = []

    def append(name):
        def reducer(state, action):
            log.append((name, state, action))
            return state + [name]

        return reducer

    reducer = combine([append("a"), append("b"), append("c")])

    assert reducer([], "go") == ["a", "b", "c"]
    assert log == [
        ("a", [], "go"),
        ("b", ["a"], "go"),
        ("c", ["a", "b"], "go"),
    ]


def test_combine_order_matters_for_overlapping_reducers():
    add_one = lambda state, action: state + 1 # noqa: E731
    double = lambda state, action: state * 2 # noqa: E731

    assert combine([add_one, double])(3, None) == 8
    assert combine([double, add_one])(3, None) == 7


@pytest.mark.parametrize("action", [INCR, DECR, DELETE_FIRST, SAVE, "unknown"])
def test_combine_disjoint_reducers_commute(populated_state, action):
    counter = pullback(counter_reducer, count_lens)
    favorites = pullback(favorite_primes_reducer, favorite_primes_state_lens)

    assert combine([counter, favorites])(populated_state, action) == \
        combine([favorites, counter])(populated_state, action)


def test_combine_copies_reducer_sequence():
    reducers = [lambda state, action: state + 1]
    reducer = combine(reducers)

    reducers.append(lambda state, action: state * 100)

    assert reducer(1, None) == 2


def test_combine_of_nothing_is_identity():
    state = AppState()

    assert combine([]) is identity_reducer
    assert combine([])(state, INCR) is state
