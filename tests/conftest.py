"""Test fixtures."""

from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(name="_uid", autouse=True)
def mock_uid() -> Generator[None, None, None]:
    """Patch out uuid creation with a fixed value."""
    counter = 0

    def func() -> str:
        nonlocal counter
        counter += 1
        return f"mock-uid-{counter}"

    with patch("repeatcal.event.uid_factory", new=func), patch(
        "repeatcal.store.uid_factory", new=func
    ):
        yield
