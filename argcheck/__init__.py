"""Declarative validation of function arguments

``argcheck`` replaces repetitive manual checks of arguments for ``None``,
emptiness, or a particular length with a single declarative call::

    >>> from argcheck import StringAssertion, validate
    >>> validate('users', 'table')
    'users'
    >>> validate('abc', 'code', StringAssertion.none, 3, 5)
    'abc'

The first violated check raises an :class:`~argcheck.constraints.ArgumentError`
that identifies the category of the violation with a
:class:`~argcheck.constraints.ViolationKind`, and the name of the offending
argument.

.. currentmodule:: argcheck
.. autosummary::
   :toctree: generated

   check_not_null
   validate
   validate_length
   validate_args
"""

__all__ = [
    '__version__',
    'ArgumentError',
    'StringAssertion',
    'ViolationKind',
    'check_not_null',
    'validate',
    'validate_args',
    'validate_length',
]

__version__ = '0.1.0'

from .check import (
    check_not_null,
    validate,
    validate_length,
)
from .constraints import (
    ArgumentError,
    StringAssertion,
    ViolationKind,
)
from .decorator import validate_args
