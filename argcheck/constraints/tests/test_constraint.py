import pytest

from argcheck.constraints import (
    EnsureNotNull,
    EnsureString,
)
from argcheck.constraints.constraint import (
    AllOf,
    AnyOf,
    Constraint,
)
from argcheck.constraints.exceptions import (
    ArgumentError,
    ConstraintError,
    ViolationKind,
)


class IsTrue(Constraint):
    input_synopsis = 'must be `True`'
    input_description = 'long-form of saying: it must be `True`'

    def __call__(self, value):
        if value is not True:
            self.raise_for(value, '{__value__} is not True')
        return True


class Equals5(Constraint):
    input_synopsis = 'must be `5`'
    input_description = 'long-form of saying: it must be `5`'

    def __call__(self, value):
        if value != 5:  # noqa: PLR2004
            self.raise_for(value, '{__value__} is not 5')
        return value


class IsUpper(Constraint):
    input_synopsis = 'must be upper-case'

    def __call__(self, value):
        if not value.isupper():
            self.raise_for(value, '{__value__!r} is not upper-case')
        return value


def test_constraint_basics():
    c = IsTrue()
    assert str(c) == f'Constraint[{IsTrue.input_synopsis}]'
    assert repr(c) == f'{c.__class__.__name__}()'
    assert c(True) is True
    with pytest.raises(ConstraintError, match='False is not True') as e:
        c(False)
    assert e.value.value is False
    # no tailoring for parameters by default
    assert c.for_parameter('flag') is c


def test_constraint_anyof():
    # logical OR
    c = IsTrue()
    eq5 = Equals5()
    true_or_5 = c | eq5
    assert str(true_or_5) == f'Constraint[{c.input_synopsis} or {eq5.input_synopsis}]'
    assert repr(true_or_5) == f'{true_or_5.__class__.__name__}({c!r}, {eq5!r})'
    assert true_or_5(True) is True
    assert true_or_5(5) == 5  # noqa: PLR2004
    with pytest.raises(ConstraintError, match='not match any of 2') as e:
        true_or_5('five')
    # all alternatives are reported as causes
    assert len(e.value.caused_by) == 2  # noqa: PLR2004
    assert "five is not True" in str(e.value)
    assert "five is not 5" in str(e.value)

    # we can chain AnyOf, and we get no nesting
    true_or_5_or_s = true_or_5 | EnsureString()
    assert len(true_or_5_or_s.constraints) == len(true_or_5.constraints) + 1
    # also works with AnyOf and AnyOf
    monster = true_or_5 | true_or_5_or_s
    assert len(monster.constraints) == len(true_or_5.constraints) + len(
        true_or_5_or_s.constraints
    )
    assert c.input_description in true_or_5.input_description
    assert eq5.input_description in true_or_5.input_description


def test_constraint_anyof_argumenterror_causes():
    c = EnsureString(max_length=2) | EnsureNotNull()
    # the second alternative accepts
    assert c('long') == 'long'
    with pytest.raises(ConstraintError) as e:
        c(None)
    assert [cause.kind for cause in e.value.caused_by] == [
        ViolationKind.null_argument,
        ViolationKind.null_argument,
    ]


def test_constraint_allof():
    # logical AND
    c = EnsureString() & IsUpper()
    assert isinstance(c, AllOf)
    assert c('ABC') == 'ABC'
    with pytest.raises(ConstraintError, match="'abc' is not upper-case"):
        c('abc')
    # the first violation is reported, later constraints are not consulted
    with pytest.raises(ArgumentError) as e:
        c('   ')
    assert e.value.kind == ViolationKind.whitespace

    # test corner of of an AllOf of a single one
    eq5 = Equals5()
    aoeq5 = AllOf(eq5)
    assert str(aoeq5) == str(eq5)

    # check merge rules work out, chaining, not nesting
    assert len((aoeq5 & eq5).constraints) == len(aoeq5.constraints) + 1
    assert len((aoeq5 & c).constraints) == len(aoeq5.constraints) + len(
        c.constraints
    )
    assert IsUpper().input_description in c.input_description


def test_constraint_for_parameter():
    # tailoring is propagated to all members of a multi-constraint
    for mc in (
        EnsureString() & IsUpper(),
        EnsureString(min_length=10) | EnsureNotNull(),
    ):
        tailored = mc.for_parameter('table')
        assert type(tailored) is type(mc)
        assert [c.__class__ for c in tailored.constraints] == [
            c.__class__ for c in mc.constraints
        ]
    with pytest.raises(ArgumentError, match='table cannot be empty') as e:
        (EnsureString() & IsUpper()).for_parameter('table')('')
    assert e.value.name == 'table'
    with pytest.raises(ConstraintError) as e:
        AnyOf(EnsureString(), EnsureNotNull()).for_parameter('schema')(None)
    assert {cause.name for cause in e.value.caused_by} == {'schema'}
