"""The attribute protocol: reads, writes, and method calls on model objects.

Reading an attribute:
    1. The object's own storage is checked (:py:func:`objmodel.model.raw_read`).
    2. Otherwise, the ancestors of the object's class are searched
       (:py:func:`objmodel.linearization.class_lookup`).
    3. A value found in either place is classified
       (:py:func:`objmodel.values.classify`). Invocables and descriptors are
       passed through their bind hook as ``hook(value, obj, obj.cls)``;
       plain data is returned as-is.
    4. If nothing is found, the class-side miss hook (``__getattr__`` by
       default) is invoked as ``hook(obj, name)``.
    5. Otherwise, AttributeNotFound is raised.

The miss hook is located with a class-side lookup only. Looking it up with the
full read protocol would recurse forever when no hook is defined.

Writing an attribute always goes through the class-side write hook
(``__setattr__`` by default), invoked as ``hook(obj, name, value)``. The
universal base class supplies a default hook that stores the value
(:py:func:`default_write_hook`), so resolution cannot fail in a correctly
bootstrapped runtime.

Failures raised by user hooks propagate unchanged.
"""

from __future__ import annotations

__all__ = ['read', 'write', 'call_method', 'has_attribute', 'default_write_hook']

import logging

from objmodel.config import RuntimeConfig
from objmodel.exceptions import AttributeNotFound
from objmodel.exceptions import InternalError
from objmodel.linearization import class_lookup
from objmodel.model import ABSENT
from objmodel.model import ObjectRecord
from objmodel.model import raw_read
from objmodel.model import raw_write
from objmodel.values import Capability
from objmodel.values import classify

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

DEFAULT_CONFIG = RuntimeConfig()


def default_write_hook(obj: ObjectRecord, name: str, value) -> None:
    """Store *value* directly. Installed on the universal base class."""
    raw_write(obj, name, value)


def read(obj: ObjectRecord, name: str, config: RuntimeConfig = DEFAULT_CONFIG):
    """Get the value of attribute *name* of *obj*.

    Raises:
        AttributeNotFound if neither the object, its class, nor a miss hook resolves *name*.
    """
    value = raw_read(obj, name)
    if value is ABSENT:
        value = class_lookup(obj.cls, name)
    if value is not ABSENT:
        capability, bind = classify(value, config.bind_hook)
        if capability is Capability.DATA:
            return value
        return bind(value, obj, obj.cls)

    miss_hook = class_lookup(obj.cls, config.miss_hook)
    if miss_hook is not ABSENT:
        return miss_hook(obj, name)
    raise AttributeNotFound(name, obj)


def write(obj: ObjectRecord, name: str, value, config: RuntimeConfig = DEFAULT_CONFIG) -> None:
    """Set attribute *name* of *obj* through the class-side write hook."""
    write_hook = class_lookup(obj.cls, config.write_hook)
    if write_hook is ABSENT:
        raise InternalError('No {} hook resolves for {}. Is the runtime bootstrapped?'.format(
            config.write_hook, repr(obj.cls)))
    write_hook(obj, name, value)


def call_method(obj: ObjectRecord, name: str, config: RuntimeConfig, /, *args, **kwargs):
    """Read *name* from *obj* and call the result with *args* and *kwargs*.

    The leading arguments are positional-only, so any keyword may be passed through to the method.
    """
    return read(obj, name, config)(*args, **kwargs)


def has_attribute(obj: ObjectRecord, name: str, config: RuntimeConfig = DEFAULT_CONFIG) -> bool:
    """Check whether reading *name* from *obj* would succeed.

    Reading may run user hooks. Failures other than AttributeNotFound propagate.
    """
    try:
        read(obj, name, config)
    except AttributeNotFound:
        return False
    return True
