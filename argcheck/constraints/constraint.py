"""Base classes for constraints and their logical connectives"""

from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from typing import Any

from argcheck.constraints.exceptions import ConstraintError


class Constraint(ABC):
    """Base class of all argument validators

    A constraint is called with a value, and returns it unmodified if it
    satisfies the constraint. Otherwise a :class:`ConstraintError` is raised.
    Each constraint also describes the values it accepts.
    """

    def __str__(self) -> str:
        return f'Constraint[{self.input_synopsis}]'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def raise_for(self, value: Any, msg: str, **ctx: Any) -> None:
        """Raise a :class:`ConstraintError` for ``value`` from this constraint

        ``msg`` is a message template, ``ctx`` holds the values it is
        formatted with.
        """
        raise ConstraintError(self, value, msg, ctx or None)

    def __and__(self, other: Constraint) -> Constraint:
        return AllOf(self, other)

    def __or__(self, other: Constraint) -> Constraint:
        return AnyOf(self, other)

    @property
    @abstractmethod
    def input_synopsis(self) -> str:
        """Single-line summary of the values accepted by the constraint

        Meant for places with little space, like usage summaries or the
        representation of the constraint itself.
        """

    @property
    def input_description(self) -> str:
        """Description of the values accepted by the constraint

        Unlike the synopsis, this may be longer than a line. Renderers may
        rewrap the text. Defaults to the synopsis.
        """
        return self.input_synopsis

    def for_parameter(self, name: str) -> Constraint:  # noqa: ARG002
        """Return a constraint-variant that reports under a parameter name

        The default implementation returns the unmodified, identical
        constraint. Subclasses that report the name of an offending argument
        return an identically parametrized instance with the given ``name``.
        """
        return self

    @abstractmethod
    def __call__(self, value: Any):
        """Validate ``value``, and return it unmodified"""


class _MultiConstraint(Constraint):
    """Shared implementation of constraints that combine other constraints"""

    def __init__(self, *constraints: Constraint):
        self._constraints = constraints

    def __repr__(self) -> str:
        creprs = ', '.join(f'{c!r}' for c in self.constraints)
        return f'{self.__class__.__name__}({creprs})'

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        return self._constraints

    def for_parameter(self, name: str) -> Constraint:
        return self.__class__(*(c.for_parameter(name) for c in self.constraints))

    def _join_descriptions(self, attr: str, conjunction: str) -> str:
        return f' {conjunction} '.join(
            d
            for d in (getattr(c, attr, None) for c in self.constraints)
            if d is not None
        )


class AnyOf(_MultiConstraint):
    """Accept a value if any of the given constraints accepts it

    Constraints are tried in the given order, and the return value of the
    first one that accepts the value is returned. If none does, a
    :class:`ConstraintError` is raised that lists the violations of all
    alternatives as its causes. Any other exception propagates immediately.
    """

    def __or__(self, other: Constraint) -> Constraint:
        constraints = list(self.constraints)
        if isinstance(other, AnyOf):
            constraints.extend(other.constraints)
        else:
            constraints.append(other)
        return AnyOf(*constraints)

    def __call__(self, value: Any) -> Any:
        e_list = []
        for c in self.constraints:
            try:
                return c(value)
            except ConstraintError as e:
                e_list.append(e)
        self.raise_for(  # noqa: RET503
            value,
            'does not match any of {n_alternatives} alternatives\n'
            '{__itemized_causes__}',
            constraints=self.constraints,
            n_alternatives=len(self.constraints),
            __caused_by__=e_list,
        )

    @property
    def input_synopsis(self) -> str:
        return self._join_descriptions('input_synopsis', 'or')

    @property
    def input_description(self) -> str:
        return self._join_descriptions('input_description', 'or')


class AllOf(_MultiConstraint):
    """Accept a value only if all of the given constraints accept it

    Constraints are applied in the given order, each receiving the return
    value of its predecessor. The first violation propagates unchanged, hence
    an :class:`ArgumentError` keeps its category.
    """

    def __and__(self, other: Constraint) -> Constraint:
        constraints = list(self.constraints)
        if isinstance(other, AllOf):
            constraints.extend(other.constraints)
        else:
            constraints.append(other)
        return AllOf(*constraints)

    def __call__(self, value: Any) -> Any:
        for c in self.constraints:
            value = c(value)
        return value

    @property
    def input_synopsis(self) -> str:
        return self._join_descriptions('input_synopsis', 'and')

    @property
    def input_description(self) -> str:
        return self._join_descriptions('input_description', 'and')
