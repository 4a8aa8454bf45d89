# tests/conftest.py

import pytest
from datetime import datetime, timezone
from unittest.mock import patch

import ethiocal


@pytest.fixture
def frozen_today():
    """
    Pin the UTC clock read by ethiocal.today() to 2025-09-11 08:00 UTC
    (1 Meskerem 2018 AM, Enkutatash).
    """
    with patch("ethiocal.arithmetic.datetime") as mock:
        mock.now.return_value = datetime(2025, 9, 11, 8, 0, tzinfo=timezone.utc)
        yield mock


@pytest.fixture
def restore_catalog():
    """Put the bundled catalog back after a test swaps in its own tables."""
    original = ethiocal.get_catalog()
    yield original
    ethiocal.set_catalog(original)
