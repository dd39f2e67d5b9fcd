"""Utility functions and decorators to simplify building model classes from Python."""

from __future__ import annotations

__all__ = ['define_class']

import logging
import typing

from objmodel.context import Runtime
from objmodel.context import get_context
from objmodel.model import Class
from objmodel.values import computed
from objmodel.values import static

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def _fields_from_namespace(namespace: typing.Mapping[str, typing.Any], runtime: Runtime) -> dict:
    hooks = (runtime.config.miss_hook, runtime.config.write_hook, runtime.config.bind_hook)
    fields = {}
    for key, value in namespace.items():
        if key.startswith('__') and key.endswith('__') and key not in hooks:
            continue
        if isinstance(value, staticmethod):
            value = static(value.__func__)
        elif isinstance(value, property):
            if value.fset is not None or value.fdel is not None:
                raise TypeError('Only read-only properties can be converted. {} has a setter or deleter.'.format(key))
            value = computed(value.fget)
        elif isinstance(value, classmethod):
            raise TypeError('classmethod {} has no model equivalent.'.format(key))
        fields[key] = value
    return fields


def define_class(*args, runtime: Runtime = None, base_class: Class = None, metaclass: Class = None):
    """Get a model Class from the body of a Python class.

    May be used as a decorator, with or without arguments. The decorated name
    is bound to the model Class, not to the Python class.

    Functions in the class body become methods, ``staticmethod`` objects become
    :py:func:`~objmodel.values.static` descriptors, and read-only ``property``
    objects become :py:func:`~objmodel.values.computed` descriptors. Dunder
    names are dropped, except for the configured hook names of the runtime.

    Example::

        @define_class(base_class=shape)
        class Square:
            def area(self):
                return read(self, 'side') ** 2

    """
    if len(args) > 1:
        raise TypeError('Wrong number of positional arguments. Expected zero or one.')

    def wrap(python_class: type) -> Class:
        target = runtime if runtime is not None else get_context()
        fields = _fields_from_namespace(vars(python_class), target)
        return target.make_class(python_class.__name__,
                                 base_class=base_class,
                                 fields=fields,
                                 metaclass=metaclass)

    if len(args) == 1:
        # Assume we were called as a regular decorator.
        return wrap(args[0])
    else:
        # Assume we were called as a parameterized decorator (with parentheses). Return a decorator.
        return wrap
