import logging

import pytest

from primestore import Settings, get_settings
from primestore.app import AppState, User, create_app_store


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None, initial_count=0)


@pytest.fixture
def app_store(settings):
    return create_app_store(settings)


@pytest.fixture
def user():
    return User(id=1, name="Ada", bio="Counts things.")


@pytest.fixture
def populated_state(user):
    return AppState(
        count=7,
        favorite_primes=(2, 3, 5, 7),
        logged_in_user=user
    )


@pytest.fixture(autouse=True)
def reset_primestore_logger():
    yield

    logger = logging.getLogger("primestore")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    logger.setLevel(logging.NOTSET)
