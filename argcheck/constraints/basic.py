from __future__ import annotations

import logging
from typing import Any

from datasalad.settings import Setting

from argcheck.config import (
    anything2bool,
    get_defaults,
    get_manager,
)
from argcheck.constraints.constraint import Constraint
from argcheck.constraints.exceptions import (
    ArgumentError,
    ViolationKind,
)

lgr = logging.getLogger('argcheck.constraints')

# register defaults of configuration supported by the code in this module
defaults = get_defaults()
defaults['argcheck.report-value'] = Setting(False, coercer=anything2bool)


class NoConstraint(Constraint):
    """A constraint that represents no constraints"""

    @property
    def input_synopsis(self):
        return ''

    def __call__(self, value):
        return value


class ArgumentConstraint(Constraint):
    """Base class for constraints that report violations of a named argument

    Violations are reported as :class:`ArgumentError` with the argument name
    given to the constructor. :meth:`for_parameter` returns an identically
    parametrized instance that reports under a different name.
    """

    def __init__(self, *, name: str | None = 'value'):
        super().__init__()
        self._name = name

    @property
    def name(self) -> str | None:
        """Name of the argument reported on violation"""
        return self._name

    def raise_for_kind(self, value: Any, kind: ViolationKind, **ctx: Any) -> None:
        """Raise an :class:`ArgumentError` of a particular category

        Unless given explicitly, the context records this constraint's
        argument name as ``name``.
        """
        ctx.setdefault('name', self._name)
        lgr.debug('%s violated by argument %r: %s', self, ctx['name'], kind.value)
        raise ArgumentError.for_kind(
            self,
            value,
            kind,
            report_value=_get_report_value(),
            **ctx,
        )

    def check_name(self) -> None:
        """Verify that an argument name is set"""
        if self._name is None:
            self.raise_for_kind(None, ViolationKind.null_argument, name='name')


class EnsureNotNull(ArgumentConstraint):
    """Ensure an input is not ``None``

    This is the type-generic counterpart of :class:`EnsureString`, performing
    nothing but the null check. An unset argument ``name`` is reported before
    the value is inspected.
    """

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(name={self._name!r})'

    @property
    def input_synopsis(self):
        return 'not None'

    def for_parameter(self, name: str) -> Constraint:
        return self.__class__(name=name)

    def __call__(self, value: Any) -> Any:
        self.check_name()
        if value is None:
            self.raise_for_kind(value, ViolationKind.null_argument)
        return value


def _get_report_value() -> bool:
    # a malformed setting must not mask the violation being reported
    try:
        return get_manager().get('argcheck.report-value', False).value
    except ValueError as e:
        lgr.debug('Ignoring invalid argcheck.report-value setting: %s', e)
        return False
