import pytest


@pytest.fixture(scope="session")
def _backoffice_domain(request):
    """Initialize the backoffice domain once per session."""
    from backoffice.domain import backoffice

    backoffice.init()
    return backoffice


@pytest.fixture(scope="session", autouse=True)
def setup_db(_backoffice_domain):
    from backoffice.utils.db import drop_db, setup_db

    setup_db(_backoffice_domain)

    yield

    drop_db(_backoffice_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_backoffice_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _backoffice_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
