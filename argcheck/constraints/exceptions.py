from __future__ import annotations

from enum import Enum
from textwrap import indent
from types import MappingProxyType
from typing import (
    Any,
)


class ConstraintError(ValueError):
    # we derive from ValueError, because it provides the seemingly best fit
    # of any built-in exception. It is defined as:
    #
    #   Raised when an operation or function receives an argument that has
    #   the right type but an inappropriate value, and the situation is not
    #   described by a more precise exception such as IndexError.
    #
    # A `None` argument is also reported with a subclass of this type, rather
    # than with a TypeError, to give callers a single exception type to
    # catch for any argument violation.
    """Exception type raised by constraints when their conditions are violated

    A primary purpose of this class is to provide uniform means for
    communicating structured information on violated constraints.

    """

    def __init__(
        self,
        constraint,
        value: Any,
        msg: str,
        ctx: dict[str, Any] | None = None,
    ):
        """
        Parameters
        ----------
        constraint: Constraint
          Instance of the ``Constraint`` class that determined a violation.
        value:
          The value that is in violation of a constraint.
        msg: str
          A message describing the violation. If ``ctx`` is given too, the
          message can contain keyword placeholders in Python's ``format()``
          syntax that will be applied on-access.
        ctx: dict, optional
          Mapping with context information on the violation. This information
          is used to interpolate a message, but may also contain additional
          key-value mappings. A recognized key is ``'__caused_by__'``, with
          a value of one exception (or a tuple of exceptions) that led to a
          ``ConstraintError`` being raised.
        """
        # we put `msg` in the `.args` container first to match where
        # `ValueError` would have it. Everything else goes after it.
        super().__init__(msg, constraint, value, ctx)

    @property
    def msg(self):
        """Obtain an (interpolated) message on the constraint violation

        The error message template can be interpolated with any information
        available in the error context dict (``ctx``). In addition to the
        information provided by the ``Constraint`` that raised the error,
        the following additional placeholders are provided:

        - ``__value__``: the value reported to have caused the error
        - ``__itemized_causes__``: an indented bullet list str with on
          item for each error in the ``caused_by`` report of the error.

        Message template can use any feature of the Python format mini
        language. For example ``{__value__!r}`` to get a ``repr()``-style
        representation of the offending value.
        """
        msg_tmpl = self.args[0]
        # we need a copy, because we need to mutate the dict
        ctx = dict(self.context)
        ctx['__value__'] = self.value
        if self.caused_by:
            ctx['__itemized_causes__'] = indent(
                '\n'.join(f'- {c!s}' for c in self.caused_by),
                '  ',
            )
        return msg_tmpl.format(**ctx)

    @property
    def constraint(self):
        """Get the instance of the constraint that was violated"""
        return self.args[1]

    @property
    def caused_by(self) -> tuple[Exception] | None:
        """Returns a tuple of any underlying exceptions"""
        cb = self.context.get('__caused_by__', None)
        if cb is None:
            return None
        if isinstance(cb, Exception):
            return (cb,)
        return tuple(cb)

    @property
    def value(self):
        """Get the value that violated the constraint"""
        return self.args[2]

    @property
    def context(self) -> MappingProxyType:
        """Get a constraint violation's context

        This is a mapping of key/value-pairs matching the ``ctx`` constructor
        argument.
        """
        return MappingProxyType(self.args[3] or {})

    def __str__(self) -> str:
        return self.msg

    def __repr__(self) -> str:
        # rematch constructor arg-order, because we put `msg` first into
        # `.args`
        return '{0}({2!r}, {3!r}, {1!r}, {4!r})'.format(
            self.__class__.__name__,
            *self.args,
        )


# TODO: Could be `StrEnum`, came with PY3.11
class ViolationKind(Enum):
    """Enumeration of the categories of argument violations"""

    null_argument = 'null argument'
    whitespace = 'whitespace'
    zero_length = 'zero length'
    invalid_range = 'invalid range'
    length_mismatch = 'length mismatch'
    length_below_minimum = 'length below minimum'
    length_above_maximum = 'length above maximum'
    wrong_type = 'wrong type'


violation_messages = {
    ViolationKind.null_argument: '{name} cannot be None',
    ViolationKind.whitespace: '{name} cannot be empty or consist only of whitespace',
    ViolationKind.zero_length: '{name} cannot have zero length',
    ViolationKind.invalid_range: (
        'minimum length ({minimum}) cannot be greater than '
        'maximum length ({maximum})'
    ),
    ViolationKind.length_mismatch: (
        '{name} has length {actual}, but must have length {expected}'
    ),
    ViolationKind.length_below_minimum: (
        '{name} has length {actual}, which is less than the '
        'minimum length {expected}'
    ),
    ViolationKind.length_above_maximum: (
        '{name} has length {actual}, which is greater than the '
        'maximum length {expected}'
    ),
    ViolationKind.wrong_type: '{name} must be a str, not {value_type}',
}
"""Message templates for each :class:`ViolationKind`

Templates are interpolated with the context of an :class:`ArgumentError`.
"""


class ArgumentError(ConstraintError):
    """Categorized violation of an argument constraint

    The constructor signature is identical to that of
    :class:`ConstraintError`. The violation category is taken from the
    ``kind`` key of the error context, which should be a
    :class:`ViolationKind`. Use :meth:`for_kind` to create an instance with
    the standard message template for a category.

    Besides the ``kind``, the context of an error carries the ``name`` of the
    offending argument, and, depending on the category, the ``actual`` and
    ``expected`` length of the value, or the ``minimum`` and ``maximum`` of an
    invalid length range.
    """

    @classmethod
    def for_kind(
        cls,
        constraint,
        value: Any,
        kind: ViolationKind,
        *,
        report_value: bool = False,
        **ctx: Any,
    ) -> ArgumentError:
        """Create an error with the standard message template for ``kind``

        With ``report_value``, the message also shows the ``repr()`` of the
        offending value.
        """
        msg = violation_messages[kind]
        if report_value:
            msg = f'{msg} (got {{__value__!r}})'
        return cls(constraint, value, msg, dict(ctx, kind=kind))

    @property
    def kind(self) -> ViolationKind | None:
        """Category of the violation"""
        return self.context.get('kind')

    @property
    def name(self) -> str | None:
        """Declared name of the offending argument"""
        return self.context.get('name')

    @property
    def actual(self) -> int | None:
        """Actual length of the offending value, if applicable"""
        return self.context.get('actual')

    @property
    def expected(self) -> int | None:
        """Required (minimum, maximum, or exact) length, if applicable"""
        return self.context.get('expected')
