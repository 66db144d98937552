from __future__ import annotations

from enum import Flag
from typing import Any

from argcheck.consts import MAX_LENGTH
from argcheck.constraints.basic import ArgumentConstraint
from argcheck.constraints.constraint import Constraint
from argcheck.constraints.exceptions import ViolationKind


class StringAssertion(Flag):
    """Set of content checks applied to a string by :class:`EnsureString`

    Members combine via ``|``, and membership is tested with ``in``.
    ``none`` suppresses all content checks, regardless of any other member
    in the same set. It does not suppress length range checks.
    """

    none = 0x1
    not_null = 0x2
    not_only_whitespace = 0x4
    not_zero_length = 0x8
    all = not_null | not_only_whitespace | not_zero_length


class EnsureString(ArgumentConstraint):
    """Ensure a string has select content properties and a length in a range

    The checks are performed in a fixed order, and the first violation is
    reported as an :class:`ArgumentError`:

    1. the argument ``name`` must not be ``None``
    2. the value must be ``None`` or a ``str``
    3. unless ``assertion`` contains ``StringAssertion.none``:

       - ``not_null``: the value must not be ``None``
       - ``not_only_whitespace``: the value must not be ``None``, empty,
         or consist only of whitespace
       - the value must not be ``None``
       - ``not_zero_length``: the value must not be empty

    4. ``min_length`` must not be greater than ``max_length``
    5. the value must not be ``None``
    6. the length of the value must be ``min_length`` if identical to
       ``max_length``, or must be in the inclusive range otherwise

    Note that a ``None`` value that is not rejected by ``not_null`` is reported
    as a ``whitespace`` violation, if ``not_only_whitespace`` is requested.
    Also note that ``StringAssertion.none`` does not let a ``None`` value pass,
    because any length check requires a string.

    An inconsistent length range is only reported when a value is checked,
    and after any content check.
    """

    def __init__(
        self,
        assertion: StringAssertion = StringAssertion.all,
        min_length: int = 0,
        max_length: int = MAX_LENGTH,
        *,
        name: str | None = 'value',
    ):
        super().__init__(name=name)
        self._assertion = assertion
        self._min_length = min_length
        self._max_length = max_length

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}('
            f'{self._assertion!r}, {self._min_length!r}, {self._max_length!r}, '
            f'name={self._name!r})'
        )

    @property
    def assertion(self) -> StringAssertion:
        return self._assertion

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def max_length(self) -> int:
        return self._max_length

    def for_parameter(self, name: str) -> Constraint:
        return self.__class__(
            self._assertion,
            self._min_length,
            self._max_length,
            name=name,
        )

    def __call__(self, value: Any) -> Any:
        self.check_name()
        if value is not None and not isinstance(value, str):
            self.raise_for_kind(
                value,
                ViolationKind.wrong_type,
                value_type=type(value).__name__,
            )

        assertion = self._assertion
        if StringAssertion.none not in assertion:
            if StringAssertion.not_null in assertion and value is None:
                self.raise_for_kind(value, ViolationKind.null_argument)
            if StringAssertion.not_only_whitespace in assertion and (
                is_null_or_whitespace(value)
            ):
                self.raise_for_kind(value, ViolationKind.whitespace)
            # value has to be non-null before its length can be checked
            if value is None:
                self.raise_for_kind(value, ViolationKind.null_argument)
            if StringAssertion.not_zero_length in assertion and not len(value):
                self.raise_for_kind(value, ViolationKind.zero_length)

        min_length = self._min_length
        max_length = self._max_length
        if min_length > max_length:
            self.raise_for_kind(
                value,
                ViolationKind.invalid_range,
                minimum=min_length,
                maximum=max_length,
            )

        # all of the following checks require value to be non-null
        if value is None:
            self.raise_for_kind(value, ViolationKind.null_argument)

        length = len(value)
        if min_length == max_length:
            if length != min_length:
                self.raise_for_kind(
                    value,
                    ViolationKind.length_mismatch,
                    actual=length,
                    expected=min_length,
                )
        elif length < min_length:
            self.raise_for_kind(
                value,
                ViolationKind.length_below_minimum,
                actual=length,
                expected=min_length,
            )
        elif length > max_length:
            self.raise_for_kind(
                value,
                ViolationKind.length_above_maximum,
                actual=length,
                expected=max_length,
            )
        return value

    @property
    def input_synopsis(self):
        assertion = self._assertion
        props = []
        if StringAssertion.none not in assertion:
            if StringAssertion.not_null in assertion:
                props.append('not None')
            if StringAssertion.not_only_whitespace in assertion:
                props.append('not only whitespace')
            if StringAssertion.not_zero_length in assertion:
                props.append('not empty')
        if self._min_length == self._max_length:
            props.append(f'length {self._min_length}')
        else:
            if self._min_length > 0:
                props.append(f'length >= {self._min_length}')
            if self._max_length < MAX_LENGTH:
                props.append(f'length <= {self._max_length}')
        return 'str' + (f' ({", ".join(props)})' if props else '')


def is_null_or_whitespace(value: str | None) -> bool:
    """Returns whether a value is ``None``, empty, or only whitespace"""
    return value is None or not value or value.isspace()
