import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config environment before any domain module is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(scope="session")
def _easypos_domain():
    """Initialize the EasyPOS domain once per session."""
    from easypos.domain import easypos

    easypos.init()
    return easypos


@pytest.fixture(scope="session", autouse=True)
def setup_db(_easypos_domain):
    from easypos.utils.db import drop_db, setup_db

    setup_db(_easypos_domain)

    yield

    drop_db(_easypos_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_easypos_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _easypos_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture(autouse=True)
def reset_persistence():
    """Restore the default unit of work factory after every test."""
    yield

    from easypos.persistence import reset_unit_of_work_factory

    reset_unit_of_work_factory()
