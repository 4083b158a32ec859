"""Shared pytest fixtures and configuration for the scene-property suite.

Guidelines
----------
* Core tests must be pure — no output, no global state.
* Listeners are ``MagicMock`` instances so call order and arguments
  can be asserted directly.
* Rich must be masked through ``sys.modules`` when testing fallbacks.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def listener() -> MagicMock:
    """A fresh callable listener recording every call."""
    return MagicMock(name="listener")
