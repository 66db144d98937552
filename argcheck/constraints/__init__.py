"""Argument validation and documentation

This module provides a set of classes to validate and document
arguments. In a nutshell, each of these :class:`Constraint` classes:

- focuses on a specific aspect, such as a value not being ``None``,
  or a string having a particular length
- is instantiated with a set of parameters to customize
  such an instance for a particular task
- performs its task by receiving an input via its ``__call__()``
  method, and returns it unmodified when valid
- provides default auto-documentation

The workhorse is :class:`EnsureString`. It combines a :class:`StringAssertion`
-- a flag set that selects which content checks (``None``, only whitespace,
zero length) apply -- with an inclusive length range, and evaluates all checks
in a fixed order. :class:`EnsureNotNull` is the type-generic variant that
only performs the ``None`` check.

Individual :class:`Constraint` instances can be combined with logical ``and``
(:class:`AllOf`) and ``or`` (:class:`AnyOf`) operations to form arbitrarily
complex constructs.

For validation errors, a :class:`ConstraintError` class is provided.
This class supports error reporting in a structure fashion with standard (yet
customizable) error messages, and is capable of communicating the underlying
causes of an error in full detail without the need to generate long textual
descriptions. Violations of argument constraints are reported with the
subclass :class:`ArgumentError`, which identifies the category of a violation
with a :class:`ViolationKind`. Only the first violation is ever reported.

If the provided input descriptions and error messages of a particular
constraint are not an optimal fit for a particular context, they can be replace
by wrapping a constraint instance into :class:`WithDescription`. This creates a
new constraint instance that maintains the exact same validation
behavior, but has a targeted description (input synopsis and description,
and/or error message template).


.. currentmodule:: argcheck.constraints
.. autosummary::
   :toctree: generated

   Constraint
   AllOf
   AnyOf
   ArgumentError
   ConstraintError
   EnsureNotNull
   EnsureString
   NoConstraint
   StringAssertion
   ViolationKind
   WithDescription
"""

__all__ = [
    'Constraint',
    'AllOf',
    'AnyOf',
    'ArgumentError',
    'ConstraintError',
    'EnsureNotNull',
    'EnsureString',
    'NoConstraint',
    'StringAssertion',
    'ViolationKind',
    'WithDescription',
]


from .basic import (
    EnsureNotNull,
    NoConstraint,
)
from .constraint import (
    AllOf,
    AnyOf,
    Constraint,
)
from .exceptions import (
    ArgumentError,
    ConstraintError,
    ViolationKind,
)
from .string import (
    EnsureString,
    StringAssertion,
)
from .wrapper import WithDescription
