from __future__ import annotations

from typing import Any

from argcheck.constraints.constraint import Constraint
from argcheck.constraints.exceptions import ConstraintError


class WithDescription(Constraint):
    """Constraint that wraps another constraint and replaces its description

    Whenever a constraint's self-description does not fit an application
    context, it can be wrapped with this class. The given synopsis and
    description of valid inputs replaces those of the wrapped constraint.
    """

    def __init__(
        self,
        constraint: Constraint,
        *,
        input_synopsis: str | None = None,
        input_description: str | None = None,
        error_message: str | None = None,
    ):
        """
        ``constraint`` can be any :class:`Constraint` subclass instance, and
        it will be used to perform the actual processing.

        If any of ``input_synopsis`` or ``input_description`` are given, they
        replace the respective property of the wrapped ``constraint``.

        If given, ``error_message`` replaces the error message of a
        :class:`ConstraintError` raised by the wrapped ``Constraint``. Only the
        message (template) is replaced, not the error context dictionary.
        The type of the raised error is kept, hence an :class:`ArgumentError`
        still reports its violation category.
        """
        super().__init__()
        self._constraint = constraint
        self._synopsis = input_synopsis
        self._description = input_description
        self._error_message = error_message

    @property
    def constraint(self) -> Constraint:
        """Returns the wrapped constraint instance"""
        return self._constraint

    def for_parameter(self, name: str) -> Constraint:
        """Wrap the wrapped constraint again after tailoring it for a parameter"""
        return self.__class__(
            self._constraint.for_parameter(name),
            input_synopsis=self._synopsis,
            input_description=self._description,
            error_message=self._error_message,
        )

    def __call__(self, value: Any) -> Any:
        try:
            return self._constraint(value)
        except ConstraintError as e:
            # rewrap the error to get access to the top-level
            # self-description.
            msg, cnstr, value, ctx = e.args
            raise e.__class__(
                self,
                value,
                self._error_message or msg,
                ctx,
            ) from e

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}'
            f'({self._constraint!r}, '
            f'input_synopsis={self._synopsis!r}, '
            f'input_description={self._description!r}, '
            f'error_message={self._error_message!r}'
            ')'
        )

    @property
    def input_synopsis(self) -> str:
        return self._synopsis or self.constraint.input_synopsis

    @property
    def input_description(self) -> str:
        return self._description or self.constraint.input_description
