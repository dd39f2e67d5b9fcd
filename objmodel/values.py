"""Capabilities of attribute values.

Values stored in the object model fall into one of three kinds:

* plain data, returned from an attribute read as-is,
* invocables (method bodies), bound to the receiver when read through an object,
* descriptors, whose bind hook computes the result of the read.

Rather than probing values for hooks at each read, :py:func:`classify` tags a
value with its :py:class:`Capability` and the bind hook to apply, dispatching
on the value type. The attribute protocol switches on the tag.

A bind hook is always invoked as ``hook(value, obj, cls)``, where *obj* is the
object the attribute was read from and *cls* is the class of *obj*.
"""

from __future__ import annotations

__all__ = ['BoundCallable', 'Capability', 'Classified', 'Descriptor', 'Method',
           'capability_of', 'classify', 'computed', 'static']

import enum
import functools
import logging
import types
import typing

from objmodel.linearization import class_lookup
from objmodel.model import ABSENT
from objmodel.model import Instance

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))

BindHook = typing.Callable[[typing.Any, typing.Any, typing.Any], typing.Any]


class Capability(enum.Enum):
    DATA = 'data'
    INVOCABLE = 'invocable'
    DESCRIPTOR = 'descriptor'


class Classified(typing.NamedTuple):
    capability: Capability
    bind: typing.Optional[BindHook] = None


class BoundCallable:
    """A class-side invocable closed over the object it was read from.

    Calling the bound callable supplies the receiver as the first argument.
    """
    __slots__ = ('function', 'receiver')

    def __init__(self, function: typing.Callable, receiver):
        self.function = function
        self.receiver = receiver

    def __call__(self, *args, **kwargs):
        return self.function(self.receiver, *args, **kwargs)

    def __eq__(self, other):
        if not isinstance(other, BoundCallable):
            return NotImplemented
        return self.function == other.function and self.receiver is other.receiver

    def __hash__(self):
        return hash((self.function, id(self.receiver)))

    def __repr__(self):
        name = getattr(self.function, '__qualname__', repr(self.function))
        return '<bound {} of {}>'.format(name, repr(self.receiver))


class Method:
    """Mark an arbitrary callable as a method body.

    Plain Python functions are recognized as invocables without wrapping.
    Other callables (builtins, :py:func:`functools.partial` objects, callable
    instances) are plain data unless wrapped.
    """
    __slots__ = ('function',)

    def __init__(self, function: typing.Callable):
        if not callable(function):
            raise TypeError('Method requires a callable. Got {}'.format(repr(function)))
        self.function = function

    def __call__(self, *args, **kwargs):
        return self.function(*args, **kwargs)

    def __repr__(self):
        return 'Method({})'.format(repr(self.function))


class Descriptor:
    """A class-side value with a bind hook.

    Subclasses override :py:meth:`bind`. Alternatively, provide *hook*, which
    is called as ``hook(descriptor, obj, cls)``.
    """
    def __init__(self, hook: BindHook = None, *, doc: str = None):
        if hook is None and type(self).bind is Descriptor.bind:
            raise TypeError('{} requires a bind hook or an override of bind().'.format(self.__class__.__name__))
        if hook is not None and not callable(hook):
            raise TypeError('Bind hook must be callable. Got {}'.format(repr(hook)))
        self._hook = hook
        if doc is not None:
            self.__doc__ = str(doc)

    def bind(self, obj, cls):
        """Produce the result of reading this descriptor through *obj*."""
        if self._hook is None:
            raise NotImplementedError('{} does not provide a bind hook.'.format(self.__class__.__name__))
        return self._hook(self, obj, cls)


class _Static(Descriptor):
    def __init__(self, function):
        super().__init__(doc=getattr(function, '__doc__', None))
        self.function = function

    def bind(self, obj, cls):
        return self.function

    def __repr__(self):
        return 'static({})'.format(repr(self.function))


class _Computed(Descriptor):
    def __init__(self, getter):
        super().__init__(doc=getattr(getter, '__doc__', None))
        self.getter = getter

    def bind(self, obj, cls):
        return self.getter(obj)

    def __repr__(self):
        return 'computed({})'.format(repr(self.getter))


def static(function: typing.Callable) -> Descriptor:
    """Store *function* on a class so that reads return it without binding."""
    return _Static(function)


def computed(getter: typing.Callable) -> Descriptor:
    """Define a derived attribute whose value is ``getter(obj)``."""
    return _Computed(getter)


def _bind_invocable(value, obj, cls):
    if isinstance(value, Method):
        value = value.function
    return BoundCallable(value, obj)


def _bind_descriptor(value: Descriptor, obj, cls):
    return value.bind(obj, cls)


@functools.singledispatch
def classify(value, bind_hook: str = '__get__') -> Classified:
    """Get the capability of *value* and the bind hook to apply when read through an object.

    *bind_hook* names the class-side hook that turns a model instance into a
    descriptor.
    """
    return Classified(Capability.DATA)


@classify.register(types.FunctionType)
@classify.register(Method)
def _(value, bind_hook: str = '__get__') -> Classified:
    return Classified(Capability.INVOCABLE, _bind_invocable)


@classify.register(Descriptor)
def _(value, bind_hook: str = '__get__') -> Classified:
    return Classified(Capability.DESCRIPTOR, _bind_descriptor)


@classify.register(Instance)
def _(value, bind_hook: str = '__get__') -> Classified:
    # The hook is a method of the value's class, so it receives the value as its receiver.
    hook = class_lookup(value.cls, bind_hook)
    if hook is ABSENT:
        return Classified(Capability.DATA)
    return Classified(Capability.DESCRIPTOR, hook)


def capability_of(value, bind_hook: str = '__get__') -> Capability:
    return classify(value, bind_hook).capability
