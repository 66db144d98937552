"""Fixture setup"""

__all__ = [
    'cfgman',
    'verify_pristine_argcheck_env',
]


from argcheck.tests.fixtures import (
    # function-scope config manager
    cfgman,
    # verify no test leave contaminated configuration behind
    verify_pristine_argcheck_env,
)
