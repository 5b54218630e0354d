"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so ``tests.*`` helpers import cleanly.
"""

import pytest

from magic_numbers_linter.infrastructure.di.container import MagicNumbersContainer


@pytest.fixture(autouse=True)
def _reset_container():
    """The plugin container is a process-wide singleton; isolate every test."""
    MagicNumbersContainer.reset()
    yield
    MagicNumbersContainer.reset()
