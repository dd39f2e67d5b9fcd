"""The object graph: classes, instances, and their storage primitives.

Every object record holds a reference to its class and to its storage.
Classes store attributes in a plain ``fields`` table. Instances store values
positionally, described by a shared :py:class:`~objmodel.layout.Layout`.

The primitives here (:py:func:`raw_read` and :py:func:`raw_write`) operate
on storage only. They do not consult the class, run hooks, or bind methods;
see :py:mod:`objmodel.protocol` for the user-facing attribute protocol.
"""

from __future__ import annotations

__all__ = ['ABSENT', 'ObjectRecord', 'Class', 'Instance', 'new_instance', 'raw_read', 'raw_write']

import logging
import typing

from objmodel.exceptions import APIError
from objmodel.exceptions import InternalError
from objmodel.layout import Layout

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


class _Absent:
    """Type of the marker returned when storage or class lookup misses."""
    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return 'ABSENT'

    def __reduce__(self):
        return 'ABSENT'


ABSENT = _Absent()


class ObjectRecord:
    """Base class for objects in the model.

    *cls* is the model Class of the object. It is only None transiently,
    while the root classes are being bootstrapped.
    """
    __slots__ = ('cls',)

    def __init__(self, cls: typing.Optional[Class]):
        self.cls = cls


class Class(ObjectRecord):
    """A model class.

    Attributes:
        name: Class name, for diagnostics.
        base_class: The single parent class, or None for the universal base class.
        fields: Direct attribute and method table.
    """
    __slots__ = ('name', 'base_class', 'fields')

    def __init__(self,
                 name: str,
                 base_class: typing.Optional[Class],
                 fields: typing.Mapping[str, typing.Any],
                 metaclass: typing.Optional[Class]):
        super().__init__(metaclass)
        self.name = str(name)
        self.base_class = base_class
        self.fields: typing.Dict[str, typing.Any] = dict(fields)

    @property
    def metaclass(self) -> Class:
        """The Class this Class is an instance of."""
        return self.cls

    def __repr__(self):
        return '<Class {}>'.format(self.name)


class Instance(ObjectRecord):
    """An instance of a model class.

    Storage is a list of values index-aligned with the shared *layout*.
    """
    __slots__ = ('layout', '_storage')

    def __init__(self, cls: Class, layout: Layout):
        if not isinstance(cls, Class):
            raise InternalError('Cannot instantiate {}: not a Class.'.format(repr(cls)))
        if len(layout) != 0:
            raise InternalError('Instances must start with an empty layout. Got {}'.format(repr(layout)))
        super().__init__(cls)
        self.layout: Layout = layout
        self._storage: typing.List[typing.Any] = []

    @property
    def storage(self) -> typing.Tuple[typing.Any, ...]:
        """Snapshot of the stored values, in slot order."""
        return tuple(self._storage)

    def as_dict(self) -> typing.Dict[str, typing.Any]:
        """Get the directly stored attributes, in slot order."""
        return dict(zip(self.layout.names, self._storage))

    def __repr__(self):
        return '<{} instance at {}>'.format(self.cls.name, hex(id(self)))


def new_instance(cls: Class, layout: Layout) -> Instance:
    """Allocate an instance of *cls* with the (empty) *layout* and no stored values."""
    return Instance(cls, layout)


def raw_read(obj: ObjectRecord, name: str):
    """Read *name* from the storage of *obj*.

    Returns:
        The stored value, or ABSENT if *obj* stores nothing under *name*.
    """
    if isinstance(obj, Instance):
        index = obj.layout.slot_of(name)
        if index is None:
            return ABSENT
        return obj._storage[index]
    return obj.fields.get(name, ABSENT)


def raw_write(obj: ObjectRecord, name: str, value) -> None:
    """Store *value* under *name* in the storage of *obj*.

    For instances, an unknown name moves the instance to the successor layout
    and appends the value.
    """
    if value is ABSENT:
        raise APIError('ABSENT is not a storable value.')
    if isinstance(obj, Instance):
        index = obj.layout.slot_of(name)
        if index is not None:
            obj._storage[index] = value
        else:
            obj.layout = obj.layout.extend(name)
            obj._storage.append(value)
            assert len(obj._storage) == len(obj.layout)
    else:
        obj.fields[name] = value
