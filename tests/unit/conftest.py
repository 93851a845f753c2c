"""Shared fixtures: every test starts from a fresh process-wide allocator."""

import pytest

from destructure.naming import reset_module_state


@pytest.fixture(autouse=True)
def _reset_names():
    reset_module_state()
    yield
    reset_module_state()
