import logging
import os

import pytest

# Keep test runs from writing log files under the user's home directory.
os.environ.setdefault("ROOMLOG__LOG_TO_FILE", "false")


def by_slow_marker(item):
    is_slow = 0 if item.get_closest_marker("slow") is None else 1
    is_integration = 1 if "integration" in str(item.fspath) else 0

    # unit tests first, then slow unit tests, then integration tests
    return (is_integration, is_slow)


def pytest_addoption(parser):
    parser.addoption("--slow-last", action="store_true", default=False)


def pytest_collection_modifyitems(items, config):
    if config.getoption("--slow-last"):
        items.sort(key=by_slow_marker)


@pytest.fixture(autouse=True)
def configure_logging_for_tests(caplog):
    """Let caplog see RoomLog records by making the ``roomlog`` logger propagate to root."""
    caplog.set_level(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)

    roomlog_logger = logging.getLogger("roomlog")
    original_propagate = roomlog_logger.propagate
    roomlog_logger.propagate = True

    yield

    root_logger.setLevel(original_level)
    roomlog_logger.propagate = original_propagate
