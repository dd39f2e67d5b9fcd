"""Runtime configuration.

The hook names are the attribute names under which the Attribute Protocol
looks for user hooks. A front end for a language that spells these
differently (e.g. ``doesNotUnderstand:``) can supply its own names.
"""

from __future__ import annotations

__all__ = ['RuntimeConfig']

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


@dataclass(frozen=True)
class RuntimeConfig:
    """Names used by a Runtime for its root classes and meta-hooks."""
    miss_hook: str = '__getattr__'
    """Class-side hook invoked as ``hook(obj, name)`` when a read misses."""

    write_hook: str = '__setattr__'
    """Class-side hook invoked as ``hook(obj, name, value)`` for every write."""

    bind_hook: str = '__get__'
    """Hook that makes a model-level instance behave as a descriptor."""

    object_name: str = 'object'
    type_name: str = 'type'

    def __post_init__(self):
        names = (self.miss_hook, self.write_hook, self.bind_hook)
        if any(not isinstance(name, str) or not name for name in names):
            raise TypeError('Hook names must be non-empty strings.')
        if len(set(names)) != len(names):
            raise ValueError('Hook names must be distinct. Got {}'.format(names))

    @classmethod
    def from_environ(cls, environ=None) -> 'RuntimeConfig':
        """Get a configuration with hook names overridden from the environment.

        Recognizes ``OBJMODEL_MISS_HOOK``, ``OBJMODEL_WRITE_HOOK``, and
        ``OBJMODEL_BIND_HOOK``. Unset or empty variables keep the defaults.
        """
        if environ is None:
            environ = os.environ
        overrides = {}
        for field, variable in (('miss_hook', 'OBJMODEL_MISS_HOOK'),
                                ('write_hook', 'OBJMODEL_WRITE_HOOK'),
                                ('bind_hook', 'OBJMODEL_BIND_HOOK')):
            value = environ.get(variable, '')
            if value:
                logger.info('Using {}={} from the environment.'.format(variable, value))
                overrides[field] = value
        return cls(**overrides)
