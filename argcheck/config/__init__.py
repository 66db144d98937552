"""Configuration management

This module provides the facilities for querying and temporarily
overriding the (few) settings that tune the behavior of ``argcheck``.
It is built on `datasalad.settings
<https://datasalad.readthedocs.io/latest/generated/datasalad.settings.html>`__.

The key piece is the :class:`ConfigManager` that supports querying for
configuration settings across multiple sources: the process environment
(variables with an ``ARGCHECK_`` prefix) and implementation defaults. It also
offers a context manager to temporarily override particular configuration
items.

No module-level instance of :class:`ConfigManager` is provided. If and when
such a common instance is needed, it must be obtained by calling
:func:`get_manager`. Subsequent calls will return the same instance.
The same pattern is applied to obtain a common instance of
:class:`ImplementationDefaults` via :func:`get_defaults`.

Recognized settings
-------------------

``argcheck.report-value`` (``ARGCHECK_REPORT_VALUE``)
  If enabled, messages of argument violations include the ``repr()``
  of the offending value. Disabled by default, because validated
  arguments may carry sensitive information.


.. currentmodule:: argcheck.config
.. autosummary::
   :toctree: generated

   ArgcheckEnvironment
   ConfigManager
   ImplementationDefaults
   UnsetValue
   anything2bool
   get_defaults
   get_manager
"""

__all__ = [
    'ArgcheckEnvironment',
    'ConfigManager',
    'ImplementationDefaults',
    'UnsetValue',
    'anything2bool',
    'get_defaults',
    'get_manager',
]

from datasalad.settings import UnsetValue

from .defaults import (
    ImplementationDefaults,
    anything2bool,
    get_defaults,
)
from .env import ArgcheckEnvironment
from .manager import (
    ConfigManager,
    get_manager,
)
