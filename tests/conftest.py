import logging

import pytest


def by_slow_marker(item):
    # Unit tests first, then slow unit tests, then integration tests, then slow integration tests
    is_slow = 0 if item.get_closest_marker("slow") is None else 1
    is_integration = 1 if "integration" in str(item.fspath) else 0
    return (is_integration, is_slow)


def pytest_addoption(parser):
    parser.addoption("--slow-last", action="store_true", default=False)


def pytest_collection_modifyitems(items, config):
    if config.getoption("--slow-last"):
        items.sort(key=by_slow_marker)


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Route mindtrace loggers (teamboard included) through the root logger so caplog can capture them."""
    caplog.set_level(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)

    mindtrace_logger = logging.getLogger("mindtrace")
    original_propagate = mindtrace_logger.propagate
    mindtrace_logger.propagate = True

    yield

    root_logger.setLevel(original_level)
    mindtrace_logger.propagate = original_propagate
