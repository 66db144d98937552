import pytest

from argcheck import (
    ArgumentError,
    StringAssertion,
    ViolationKind,
    validate_args,
)
from argcheck.constraints import (
    ConstraintError,
    EnsureNotNull,
    EnsureString,
    NoConstraint,
    WithDescription,
)
from argcheck.decorator import get_allargs_as_kwargs


def test_validate_args():
    ident = EnsureString(StringAssertion.all, 1, 8)

    @validate_args(table=ident, schema=ident)
    def render(table, schema='dbo', *, alias=None):
        return f'{schema}.{table}' + (f' AS {alias}' if alias else '')

    assert render.__name__ == 'render'
    assert render.constraints == {'table': ident, 'schema': ident}
    assert render('users') == 'dbo.users'
    assert render('users', 'app', alias='u') == 'app.users AS u'
    assert render(schema='app', table='users') == 'app.users'

    with pytest.raises(ArgumentError, match='table cannot be None') as e:
        render(None)
    assert e.value.name == 'table'
    with pytest.raises(ArgumentError) as e:
        render('users', 'much_too_long')
    assert e.value.name == 'schema'
    assert e.value.kind == ViolationKind.length_above_maximum
    # parameters are validated in signature order, the first violation wins
    with pytest.raises(ArgumentError) as e:
        render(schema='', table='')
    assert e.value.name == 'table'


def test_validate_args_defaults_validated():
    @validate_args(sr=EnsureNotNull())
    def read(sr=None):
        return sr

    # a default value is no exception
    with pytest.raises(ArgumentError, match='sr cannot be None'):
        read()
    assert read(5) == 5  # noqa: PLR2004


def test_validate_args_not_executed_on_violation():
    calls = []

    @validate_args(value=EnsureString())
    def record(value):
        calls.append(value)

    with pytest.raises(ArgumentError):
        record('  ')
    assert not calls
    record('ok')
    assert calls == ['ok']


def test_validate_args_method():
    class Table:
        @validate_args(name=EnsureString())
        def rename(self, name):
            self.name = name
            return self

    assert Table().rename('users').name == 'users'
    with pytest.raises(ArgumentError, match='name cannot be empty'):
        Table().rename('')


def test_validate_args_invalid_decoration():
    with pytest.raises(ValueError, match='no parameters matching.*bogus'):

        @validate_args(bogus=NoConstraint())
        def f1(value):
            return value

    for sig_func in (
        lambda *args: args,
        lambda **kwargs: kwargs,
    ):
        with pytest.raises(ValueError, match='unsupported'):
            validate_args()(sig_func)


def test_get_allargs_as_kwargs():
    def f(a, b=2, *, c=3):
        return a, b, c

    assert get_allargs_as_kwargs(f, (1,), {}) == {'a': 1, 'b': 2, 'c': 3}
    assert get_allargs_as_kwargs(f, (1, 5), {'c': 7}) == {'a': 1, 'b': 5, 'c': 7}
    with pytest.raises(TypeError, match='missing 1 required argument'):
        get_allargs_as_kwargs(f, (), {})
    with pytest.raises(TypeError, match='takes 2 positional arguments'):
        get_allargs_as_kwargs(f, (1, 2, 3), {})
    with pytest.raises(TypeError, match='unexpected keyword argument'):
        get_allargs_as_kwargs(f, (1,), {'d': 4})
    with pytest.raises(TypeError, match='multiple values'):
        get_allargs_as_kwargs(f, (1,), {'a': 4})


def test_validate_args_composed_constraints():
    postcode = EnsureString(StringAssertion.all, 4, 4) | EnsureString(
        StringAssertion.all, 5, 5
    )
    street = WithDescription(
        EnsureNotNull() & EnsureString(StringAssertion.none, 0, 20),
        error_message='{name} must be a street name',
    )

    @validate_args(postcode=postcode, street=street)
    def address(postcode, street):
        return f'{street}, {postcode}'

    assert address('1234', 'Main St') == 'Main St, 1234'
    assert address('12345', 'Main St') == 'Main St, 12345'
    with pytest.raises(ConstraintError) as e:
        address('123', 'Main St')
    # every alternative reports under the parameter name
    assert [c.name for c in e.value.caused_by] == ['postcode', 'postcode']
    assert [c.kind for c in e.value.caused_by] == [ViolationKind.length_mismatch] * 2
    with pytest.raises(ArgumentError, match='street must be a street name') as e:
        address('1234', None)
    assert e.value.kind == ViolationKind.null_argument
    with pytest.raises(ArgumentError) as e:
        address('1234', 'x' * 21)
    assert e.value.kind == ViolationKind.length_above_maximum
