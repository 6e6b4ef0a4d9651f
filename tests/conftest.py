"""Test configuration and fixtures."""

import logfire
import pytest

# Keep test output quiet and local
logfire.configure(send_to_logfire=False, console=False)


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run tests that need a PostgreSQL database at DATABASE__URL",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: needs a running PostgreSQL database"
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration"):
        return
    skip = pytest.mark.skip(reason="needs --integration and a PostgreSQL database")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)

