"""Shared pytest fixtures and configuration for the shipcalc test suite.

Guidelines
----------
* No real terminal interaction — questionary is mocked at the prompt
  boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def fake_questionary(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[..., MagicMock]:
    """Patch the lazy questionary import to answer with *answers* in order.

    ``None`` in *answers* simulates the user cancelling a prompt.
    """

    def _install(*answers: str | None) -> MagicMock:
        questionary_mod = MagicMock()
        questionary_mod.text.return_value.ask.side_effect = list(answers)
        monkeypatch.setattr(
            "shipcalc.cli.quote_prompt._import_questionary",
            lambda: questionary_mod,
        )
        return questionary_mod

    return _install
