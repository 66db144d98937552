from __future__ import annotations

from contextlib import contextmanager
from os import environ
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import (
        Collection,
        Generator,
        Hashable,
    )

from datasalad.settings import (
    Setting,
    WritableSource,
)

from argcheck.consts import CONFIG_ENV_PREFIX


class ArgcheckEnvironment(WritableSource):
    """Source for settings declared via the process environment

    A setting ``argcheck.report-value`` is read from, and written to, the
    environment variable ``ARGCHECK_REPORT_VALUE``. Only variables with the
    ``ARGCHECK_`` prefix are considered.

    Like a Git environment source, this implementation is stateless and
    inspects the process environment on every access. The method
    :meth:`overrides` provides a context manager for setting temporary
    configuration.
    """

    item_type = Setting

    def __str__(self) -> str:
        return self.__class__.__name__

    def _reinit(self):
        """Does nothing"""

    def _load(self) -> None:
        """Does nothing

        All accessors inspect the process environment directly.
        """

    def _get_item(self, key: Hashable) -> Setting:
        return self.item_type(environ[key2varname(key)])

    def _set_item(self, key: Hashable, value: Setting) -> None:
        environ[key2varname(key)] = str(value.value)

    def _del_item(self, key: Hashable) -> None:
        del environ[key2varname(key)]

    def _get_keys(self) -> Collection:
        return {
            varname2key(name) for name in environ if name.startswith(CONFIG_ENV_PREFIX)
        }

    @contextmanager
    def overrides(
        self,
        overrides: dict[Hashable, Setting],
    ) -> Generator[None]:
        """Context manager to temporarily set configuration overrides"""
        restore: dict[Hashable, str | None] = {
            k: environ.get(key2varname(k)) for k in overrides
        }
        for k, v in overrides.items():
            self[k] = v
        try:
            yield
        finally:
            for k, val in restore.items():
                if val is None:
                    del self[k]
                else:
                    self[k] = self.item_type(val)


def key2varname(key: Hashable) -> str:
    """Map a setting key to the name of its environment variable

    >>> key2varname('argcheck.report-value')
    'ARGCHECK_REPORT_VALUE'
    """
    return str(key).upper().replace('.', '_').replace('-', '_')


def varname2key(name: str) -> str:
    """Map an environment variable name to a setting key

    >>> varname2key('ARGCHECK_REPORT_VALUE')
    'argcheck.report-value'
    """
    section = CONFIG_ENV_PREFIX.rstrip('_').lower()
    return f'{section}.{name[len(CONFIG_ENV_PREFIX):].lower().replace("_", "-")}'
