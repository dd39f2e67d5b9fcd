"""Manage objmodel Runtime instances.

A Runtime owns one bootstrapped class graph and one layout-transition trie.
Runtimes share no state, so independent runtimes (one per test, or one per
embedded interpreter) never interfere with each other.

This module also lets the Python interpreter track a stack of active
runtimes to allow simpler syntax in the package-level functions. A default
runtime is created at import, and it exists only to serve those
convenience functions (:py:func:`objmodel.read` and friends). Nothing in the
core reaches for it: layouts and classes belong to whichever Runtime
created them, and code that holds a Runtime never touches the default.

Runtimes do no locking. A host that uses one Runtime from several threads
must serialize layout extension and class field updates itself.
"""

from __future__ import annotations

__all__ = ['Runtime', 'get_context']

import logging
import typing
import warnings

from objmodel import linearization
from objmodel import protocol
from objmodel.config import RuntimeConfig
from objmodel.exceptions import APIError
from objmodel.kernel import bootstrap
from objmodel.layout import Layout
from objmodel.model import Class
from objmodel.model import Instance
from objmodel.model import ObjectRecord
from objmodel.model import new_instance

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


class Runtime:
    """An independent object model.

    Attributes:
        config: Hook and root class names.
        empty_layout: Root of the layout-transition trie. New instances start here.
        object_class: The universal base class.
        type_class: The default metaclass.

    A Runtime may be used as a context manager to make it the current
    runtime for the package-level functions::

        with Runtime() as runtime:
            point = objmodel.make_class('Point')
    """
    def __init__(self, config: RuntimeConfig = None):
        if config is None:
            config = RuntimeConfig()
        if not isinstance(config, RuntimeConfig):
            raise APIError('config must be a RuntimeConfig. Got {}'.format(repr(config)))
        self.config = config
        self.empty_layout = Layout()
        self.object_class, self.type_class = bootstrap(config)
        self.__active = False

    def _check_class(self, cls, role: str) -> Class:
        if not isinstance(cls, Class):
            raise APIError('{} must be a Class. Got {}'.format(role, repr(cls)))
        if not linearization.is_subclass(cls, self.object_class):
            raise APIError('{} {} belongs to a different runtime.'.format(role, repr(cls)))
        return cls

    def make_class(self,
                   name: str,
                   base_class: Class = None,
                   fields: typing.Mapping[str, typing.Any] = None,
                   metaclass: Class = None) -> Class:
        """Create a new Class.

        Arguments:
            name: Class name.
            base_class: Parent class. Defaults to the universal base class.
            fields: Initial attributes and methods. The mapping is copied.
            metaclass: Class of the new class. Must derive from the default metaclass,
                which is the default.
        """
        if not isinstance(name, str):
            raise APIError('Class name must be a string. Got {}'.format(repr(name)))
        if base_class is None:
            base_class = self.object_class
        if metaclass is None:
            metaclass = self.type_class
        self._check_class(base_class, 'base_class')
        self._check_class(metaclass, 'metaclass')
        if not linearization.is_subclass(metaclass, self.type_class):
            raise APIError('metaclass {} does not derive from {}.'.format(repr(metaclass), repr(self.type_class)))
        if fields is None:
            fields = {}
        cls = Class(name=name, base_class=base_class, fields=fields, metaclass=metaclass)
        logger.debug('Created {} with base {}.'.format(repr(cls), repr(base_class)))
        return cls

    def new_instance(self, cls: Class) -> Instance:
        if isinstance(cls, Class):
            self._check_class(cls, 'cls')
        # Non-Class arguments are an invariant violation reported by the model.
        return new_instance(cls, self.empty_layout)

    def read(self, obj: ObjectRecord, name: str):
        return protocol.read(obj, name, self.config)

    def write(self, obj: ObjectRecord, name: str, value) -> None:
        protocol.write(obj, name, value, self.config)

    def call_method(self, obj: ObjectRecord, name: str, /, *args, **kwargs):
        return protocol.call_method(obj, name, self.config, *args, **kwargs)

    def has_attribute(self, obj: ObjectRecord, name: str) -> bool:
        return protocol.has_attribute(obj, name, self.config)

    def is_instance(self, obj: ObjectRecord, cls: Class) -> bool:
        return linearization.is_instance(obj, cls)

    def is_subclass(self, a: Class, b: Class) -> bool:
        return linearization.is_subclass(a, b)

    def ancestors(self, cls: Class) -> typing.List[Class]:
        return linearization.ancestors(cls)

    def class_lookup(self, cls: Class, name: str):
        return linearization.class_lookup(cls, name)

    def layout_count(self) -> int:
        """Number of layouts in the transition trie, including the empty layout."""
        return sum(1 for _ in self.empty_layout.walk())

    def finalize(self):
        if self.__active:
            context = _context.pop()
            if context is not self:
                warnings.warn('Bad finalizer protocol may indicate a leak: Runtime is active, but not current.')
                _context.append(context)
                _context.remove(self)
            self.__active = False
        else:
            warnings.warn('Runtime.finalize has been called on an inactive Runtime.')

    def __enter__(self):
        if self.__active:
            raise APIError('Runtime is already active.')
        _context.append(self)
        self.__active = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.finalize()
        # Return False to indicate we have not handled any exceptions.
        return False

    def __repr__(self):
        return '<Runtime {}/{} at {}>'.format(self.object_class.name, self.type_class.name, hex(id(self)))


logger.info('Preparing the default objmodel runtime.')
_context = [Runtime()]


def get_context() -> Runtime:
    """Get the current Runtime."""
    return _context[-1]
