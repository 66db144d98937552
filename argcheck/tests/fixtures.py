"""Collection of fixtures for facilitation test implementations"""

from __future__ import annotations

from os import environ
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Generator

    from argcheck.config import ConfigManager

import pytest

from argcheck.config import get_manager
from argcheck.consts import CONFIG_ENV_PREFIX


def get_argcheck_env() -> dict[str, str]:
    return {k: v for k, v in environ.items() if k.startswith(CONFIG_ENV_PREFIX)}


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def cfgman(monkeypatch) -> Generator[ConfigManager]:
    """Yield a configuration manager with a test-specific environment scope

    Any ``ARGCHECK_*`` variable present in the process environment is
    removed for the duration of the test, and restored afterwards.
    Any setting made by a test is discarded.
    """
    with monkeypatch.context() as m:
        for k in get_argcheck_env():
            m.delenv(k)
        yield get_manager()
        # the monkeypatch context only knows about variables it modified
        # itself, anything else a test posted needs removal here
        for k in get_argcheck_env():
            del environ[k]


@pytest.fixture(autouse=True, scope='function')  # noqa: PT003
def verify_pristine_argcheck_env():
    """No test must leave modified ``ARGCHECK_*`` variables behind.

    If such modifications are needed, the ``cfgman`` fixture or the
    ``ConfigManager.overrides()`` context manager must be used.
    """
    pre = get_argcheck_env()
    yield
    if pre != get_argcheck_env():  # pragma: no cover
        msg = (
            'Modification of ARGCHECK_* environment variables detected. '
            'Test must be modified to use a temporary configuration. '
            'Hint: use the `cfgman` fixture.'
        )
        raise AssertionError(msg)
