"""A runtime object model for class-based dynamic languages.

objmodel provides single-inheritance classes, instances with layout-shared
storage ("hidden classes"), method binding, descriptors, and user-overridable
hooks for attribute read misses and writes. Language front ends translate
surface operations into calls against this API.

The functions in this namespace operate on the current
:py:class:`~objmodel.context.Runtime` (see :py:func:`get_context`). Use a
Runtime directly, or as a context manager, to keep independent object models
apart.
"""

__all__ = ['ABSENT', 'APIError', 'AttributeNotFound', 'BoundCallable', 'Capability', 'Class', 'Descriptor',
           'Instance', 'InternalError', 'Layout', 'Method', 'ObjModelError', 'Runtime', 'RuntimeConfig',
           'ancestors', 'call_method', 'computed', 'define_class', 'get_context', 'has_attribute',
           'is_instance', 'is_subclass', 'make_class', 'new_instance', 'read', 'static', 'write']

import logging

from objmodel.config import RuntimeConfig
from objmodel.context import Runtime
from objmodel.context import get_context
from objmodel.exceptions import APIError
from objmodel.exceptions import AttributeNotFound
from objmodel.exceptions import InternalError
from objmodel.exceptions import ObjModelError
from objmodel.layout import Layout
from objmodel.model import ABSENT
from objmodel.model import Class
from objmodel.model import Instance
from objmodel.utils import define_class
from objmodel.values import BoundCallable
from objmodel.values import Capability
from objmodel.values import Descriptor
from objmodel.values import Method
from objmodel.values import computed
from objmodel.values import static

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def make_class(name, base_class=None, fields=None, metaclass=None) -> Class:
    return get_context().make_class(name, base_class=base_class, fields=fields, metaclass=metaclass)


def new_instance(cls) -> Instance:
    return get_context().new_instance(cls)


def read(obj, name):
    return get_context().read(obj, name)


def write(obj, name, value) -> None:
    get_context().write(obj, name, value)


def call_method(obj, name, /, *args, **kwargs):
    return get_context().call_method(obj, name, *args, **kwargs)


def has_attribute(obj, name) -> bool:
    return get_context().has_attribute(obj, name)


def is_instance(obj, cls) -> bool:
    return get_context().is_instance(obj, cls)


def is_subclass(a, b) -> bool:
    return get_context().is_subclass(a, b)


def ancestors(cls):
    return get_context().ancestors(cls)
