"""Test the storage primitives of classes and instances."""

import logging

import pytest

from objmodel import ABSENT
from objmodel import APIError
from objmodel import Class
from objmodel import Instance
from objmodel import InternalError
from objmodel import Layout
from objmodel.model import new_instance
from objmodel.model import raw_read
from objmodel.model import raw_write

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def test_absent_marker():
    assert not ABSENT
    assert repr(ABSENT) == 'ABSENT'
    assert ABSENT is not None


def test_new_instance(runtime):
    cls = runtime.make_class('A')
    instance = new_instance(cls, runtime.empty_layout)
    assert isinstance(instance, Instance)
    assert instance.cls is cls
    assert instance.layout is runtime.empty_layout
    assert instance.storage == ()


def test_new_instance_requires_class(runtime):
    instance = runtime.new_instance(runtime.make_class('A'))
    with pytest.raises(InternalError):
        new_instance(instance, runtime.empty_layout)
    with pytest.raises(InternalError):
        new_instance('A', runtime.empty_layout)
    with pytest.raises(InternalError):
        new_instance(runtime.make_class('B'), Layout().extend('x'))


def test_instance_raw_storage(runtime):
    instance = runtime.new_instance(runtime.make_class('A'))
    assert raw_read(instance, 'x') is ABSENT

    raw_write(instance, 'x', 1)
    raw_write(instance, 'y', None)
    assert raw_read(instance, 'x') == 1
    # A stored None is distinct from a missing attribute.
    assert raw_read(instance, 'y') is None
    assert instance.storage == (1, None)
    assert instance.layout.names == ('x', 'y')

    layout = instance.layout
    raw_write(instance, 'x', 3)
    assert instance.layout is layout
    assert instance.storage == (3, None)
    assert instance.as_dict() == {'x': 3, 'y': None}


def test_class_raw_storage(runtime):
    cls = runtime.make_class('A', fields={'f': 1})
    assert raw_read(cls, 'f') == 1
    assert raw_read(cls, 'g') is ABSENT
    raw_write(cls, 'g', 2)
    assert cls.fields == {'f': 1, 'g': 2}


def test_absent_is_not_storable(runtime):
    instance = runtime.new_instance(runtime.make_class('A'))
    with pytest.raises(APIError):
        raw_write(instance, 'x', ABSENT)
    assert instance.storage == ()


def test_fields_are_copied(runtime):
    fields = {'f': 1}
    cls = runtime.make_class('A', fields=fields)
    fields['g'] = 2
    assert 'g' not in cls.fields


def test_class_attributes(runtime):
    cls = Class('A', base_class=runtime.object_class, fields={}, metaclass=runtime.type_class)
    assert cls.name == 'A'
    assert cls.metaclass is runtime.type_class
    assert cls.cls is runtime.type_class
    assert repr(cls) == '<Class A>'
