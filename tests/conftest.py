"""
Root pytest configuration file for the Jira progress server tests.
"""

import pytest


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


def pytest_addoption(parser):
    """Add the integration option to pytest."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests against the Jira instance in the environment",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: mark test as requiring a real Jira instance"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="Need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
