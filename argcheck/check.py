"""Functional entry points for validating individual arguments

These functions are thin conveniences around :class:`EnsureString` and
:class:`EnsureNotNull`, meant for use at the top of a public function::

    def read_template(filename: str) -> str:
        validate(filename, 'filename')
        ...

All of them return the validated value unmodified, and raise an
:class:`ArgumentError` on the first violated check.
"""

from __future__ import annotations

from typing import TypeVar

from argcheck.consts import MAX_LENGTH
from argcheck.constraints import (
    EnsureNotNull,
    EnsureString,
    StringAssertion,
)

T = TypeVar('T')


def validate(
    value: str | None,
    name: str,
    assertion: StringAssertion = StringAssertion.all,
    min_length: int = 0,
    max_length: int = MAX_LENGTH,
) -> str:
    """Validate a string argument

    By default, the value must not be ``None``, empty, or consist only of
    whitespace. See :class:`EnsureString` for the order of the checks.
    """
    return EnsureString(assertion, min_length, max_length, name=name)(value)


def validate_length(
    value: str | None,
    name: str,
    assertion: StringAssertion,
    length: int,
) -> str:
    """Validate a string argument that must have an exact ``length``"""
    return validate(value, name, assertion, length, length)


def check_not_null(value: T | None, name: str) -> T:
    """Validate that an argument of any type is not ``None``"""
    return EnsureNotNull(name=name)(value)
