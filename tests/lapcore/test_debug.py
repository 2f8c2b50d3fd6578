r"""
Tests for ``lapcore.debug``.
"""

from __future__ import annotations

import pytest

import lapcore
from lapcore.constants import DEBUG_ENV
from lapcore.debug import check_debug_enabled


@pytest.fixture()
def debug_env(monkeypatch):
    check_debug_enabled.cache_clear()
    yield monkeypatch
    check_debug_enabled.cache_clear()


@pytest.mark.parametrize(["value", "expected"], [("true", True), ("false", False)])
def test_debug_flag_from_env(debug_env, value, expected):
    debug_env.setenv(DEBUG_ENV, value)

    assert check_debug_enabled() is expected


def test_debug_flag_default(debug_env):
    debug_env.delenv(DEBUG_ENV, raising=False)

    assert check_debug_enabled() is False


def test_debug_output(debug_env, capsys):
    debug_env.setenv(DEBUG_ENV, "true")

    lapcore.solve([1, 5, 2, 3, 1, 4], 2, 3)

    out = capsys.readouterr().out
    assert "Padding 2x3 cost matrix to 3x3" in out
    assert "2 of 2 rows assigned" in out
