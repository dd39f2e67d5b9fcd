"""Ancestor linearization for single inheritance.

With one base class per class, the ancestor sequence is simply the chain of
base classes, so no merge or tie-break logic is needed.
"""

from __future__ import annotations

__all__ = ['ancestors', 'is_subclass', 'is_instance', 'class_lookup', 'defining_class']

import logging
import typing

from objmodel.exceptions import InternalError
from objmodel.model import ABSENT
from objmodel.model import Class
from objmodel.model import ObjectRecord

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def ancestors(cls: Class) -> typing.List[Class]:
    """Get *cls* followed by the ancestors of its base class.

    The sequence ends with the universal base class.
    """
    sequence = []
    seen = set()
    current = cls
    while current is not None:
        if id(current) in seen:
            raise InternalError('Cycle in the base classes of {}.'.format(repr(cls)))
        seen.add(id(current))
        sequence.append(current)
        current = current.base_class
    return sequence


def is_subclass(a: Class, b: Class) -> bool:
    return any(ancestor is b for ancestor in ancestors(a))


def is_instance(obj: ObjectRecord, cls: Class) -> bool:
    return is_subclass(obj.cls, cls)


def defining_class(cls: Class, name: str) -> typing.Optional[Class]:
    """Get the first class in the ancestors of *cls* whose fields contain *name*."""
    for ancestor in ancestors(cls):
        if name in ancestor.fields:
            return ancestor
    return None


def class_lookup(cls: Class, name: str):
    """Look up *name* on the class side.

    A subclass entry shadows any ancestor entry of the same name.

    Returns:
        The value from the first defining class, or ABSENT.
    """
    owner = defining_class(cls, name)
    if owner is None:
        return ABSENT
    return owner.fields[name]
