"""Configures pytest to ignore certain unit tests unless the appropriate flag is passed.

--expensive: tests that take a long time to run (e.g. randomized stress runs over large trees)."""

import pytest


def pytest_addoption(parser):
    parser.addoption("--expensive", action="store_true",
                     help="run expensive tests (which are otherwise skipped).")


def pytest_configure(config):
    config.addinivalue_line("markers", "expensive: long running test, needs --expensive to run")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--expensive"):
        return
    skip = pytest.mark.skip(reason="need --expensive option to run")
    for item in items:
        if "expensive" in item.keywords:
            item.add_marker(skip)
