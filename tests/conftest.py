"""Shared fixtures for the test suite."""

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from fuzzy_completing_read import host
from fuzzy_completing_read.config.settings import set_default_settings


@pytest.fixture(autouse=True)
def restore_host_state():
    """Keep installs and settings changes from leaking between tests."""
    function = host.completing_read_function
    set_default_settings(None)
    yield
    host.completing_read_function = function
    set_default_settings(None)


@pytest.fixture
def pipe_input():
    with create_pipe_input() as inp:
        yield inp


@pytest.fixture
def dummy_output():
    return DummyOutput()
