from __future__ import annotations

import logging
from functools import wraps
from inspect import (
    Parameter,
    signature,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from argcheck.constraints import Constraint

lgr = logging.getLogger('argcheck.decorator')


# this could be a function decorator, but we use a class, because
# it is less confusing to read (compared to the alternative decorator
# factory
class validate_args:  # noqa: N801
    """Wrap a callable with validation of its arguments

    Each keyword argument given to the decorator names a parameter of the
    wrapped callable and assigns a :class:`Constraint` to it::

        @validate_args(
            table=EnsureString(),
            schema=EnsureString(StringAssertion.none, 0, 128),
        )
        def render_select(table, schema='dbo'):
            ...

    Before the wrapped callable is executed, all arguments (including any
    defaults declared in its signature) are passed through their constraint,
    in the order in which the parameters are declared in the signature.
    Constraints are tailored to report violations under the respective
    parameter name (see :meth:`Constraint.for_parameter`). The first violation
    raises, and the callable is not executed. Parameters without a constraint
    are passed on as-is.

    The wrapped callable must not have positional-only parameters, or
    variadic (``*args``, ``**kwargs``) parameters.

    The constraints given to the decorator are attached to the callable
    returned by the decorator as ``<wrapped>.constraints``.
    """

    def __init__(self, **constraints: Constraint):
        self.constraints = constraints

    def __call__(self, wrapped):
        params = signature(wrapped).parameters
        unsupported = [
            p.name
            for p in params.values()
            if p.kind
            in (
                Parameter.POSITIONAL_ONLY,
                Parameter.VAR_POSITIONAL,
                Parameter.VAR_KEYWORD,
            )
        ]
        if unsupported:
            msg = (
                f'{wrapped.__name__}() has unsupported positional-only or '
                f'variadic parameters: {", ".join(unsupported)}'
            )
            raise ValueError(msg)
        unknown = [n for n in self.constraints if n not in params]
        if unknown:
            msg = (
                f'{wrapped.__name__}() has no parameters matching '
                f'constraints for: {", ".join(unknown)}'
            )
            raise ValueError(msg)

        # tailor the constraints once, in signature order
        param_constraints = {
            pname: self.constraints[pname].for_parameter(pname)
            for pname in params
            if pname in self.constraints
        }

        @wraps(wrapped)
        def validation_wrapper(*args, **kwargs):
            allkwargs = get_allargs_as_kwargs(wrapped, args, kwargs)
            lgr.debug(
                'Validate arguments %s of %s()',
                list(param_constraints),
                wrapped.__name__,
            )
            for pname, constraint in param_constraints.items():
                allkwargs[pname] = constraint(allkwargs[pname])
            return wrapped(**allkwargs)

        validation_wrapper.constraints = self.constraints
        return validation_wrapper


def get_allargs_as_kwargs(call, args, kwargs) -> dict[str, Any]:
    """Generate a kwargs dict from a call signature and actual parameters

    The return value is a mapping of all argument names to their respective
    values, with any defaults declared in the signature of the callable
    filled in.
    """
    params = signature(call).parameters
    n_positional = sum(
        p.kind is Parameter.POSITIONAL_OR_KEYWORD for p in params.values()
    )
    if len(args) > n_positional:
        msg = (
            f'{call.__name__}() takes {n_positional} positional arguments '
            f'but {len(args)} were given'
        )
        raise TypeError(msg)
    unexpected = [k for k in kwargs if k not in params]
    if unexpected:
        msg = (
            f'{call.__name__}() got an unexpected keyword argument {unexpected[0]!r}'
        )
        raise TypeError(msg)

    args = list(args)
    allkwargs = {}
    missing_args = []
    for pname, param in params.items():
        if args and param.kind is Parameter.POSITIONAL_OR_KEYWORD:
            if pname in kwargs:
                msg = f'{call.__name__}() got multiple values for argument {pname!r}'
                raise TypeError(msg)
            val = args.pop(0)
        else:
            val = kwargs.get(pname, param.default)
        allkwargs[pname] = val
        if val is param.empty:
            missing_args.append(pname)

    if missing_args:
        ma = missing_args
        multi_ma = len(ma) > 1
        # imitate standard TypeError message
        msg = (
            f'{call.__name__}() missing {len(ma)} required '
            f'argument{"s" if multi_ma else ""}: '
            f'{", ".join(repr(a) for a in ma[:-1 if multi_ma else None])}'
        )
        if multi_ma:
            msg += f' and {ma[-1]!r}'
        raise TypeError(msg)

    return allkwargs
