"""Test Runtime construction, isolation, and the runtime context stack."""

import logging

import pytest

import objmodel
from objmodel import APIError
from objmodel import InternalError
from objmodel import Runtime
from objmodel import RuntimeConfig
from objmodel import get_context

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def test_make_class_defaults(runtime):
    cls = runtime.make_class('A')
    assert cls.base_class is runtime.object_class
    assert cls.metaclass is runtime.type_class
    assert cls.fields == {}
    assert runtime.ancestors(cls) == [cls, runtime.object_class]


def test_make_class_validation(runtime):
    a = runtime.make_class('A')
    with pytest.raises(APIError):
        runtime.make_class(42)
    with pytest.raises(APIError):
        runtime.make_class('B', base_class='A')
    with pytest.raises(APIError):
        runtime.make_class('B', base_class=runtime.new_instance(a))
    with pytest.raises(APIError):
        # Metaclasses must derive from the default metaclass.
        runtime.make_class('B', metaclass=a)
    # API errors are also TypeErrors.
    with pytest.raises(TypeError):
        runtime.make_class('B', metaclass=a)


def test_new_instance_validation(runtime):
    with pytest.raises(InternalError):
        runtime.new_instance('A')
    with pytest.raises(InternalError):
        runtime.new_instance(runtime.new_instance(runtime.make_class('A')))


def test_runtimes_are_isolated():
    first = Runtime()
    second = Runtime()
    assert first.object_class is not second.object_class
    assert first.empty_layout is not second.empty_layout

    a = first.make_class('A')
    with pytest.raises(APIError):
        second.make_class('B', base_class=a)
    with pytest.raises(APIError):
        second.new_instance(a)

    obj = first.new_instance(a)
    first.write(obj, 'x', 1)
    assert first.layout_count() == 2
    assert second.layout_count() == 1
    other = second.new_instance(second.make_class('A'))
    second.write(other, 'x', 1)
    assert other.layout is not obj.layout


def test_layout_count(runtime):
    cls = runtime.make_class('A')
    assert runtime.layout_count() == 1
    for names in (('x', 'y'), ('x', 'y'), ('x', 'z')):
        obj = runtime.new_instance(cls)
        for name in names:
            runtime.write(obj, name, None)
    # empty, x, xy, xz
    assert runtime.layout_count() == 4


def test_context_stack():
    default = get_context()
    with Runtime() as runtime:
        assert get_context() is runtime
        cls = objmodel.make_class('A')
        assert cls.base_class is runtime.object_class
        obj = objmodel.new_instance(cls)
        objmodel.write(obj, 'x', 1)
        assert objmodel.read(obj, 'x') == 1
        assert objmodel.is_instance(obj, cls)
        assert objmodel.is_subclass(cls, runtime.object_class)
        assert objmodel.ancestors(cls) == [cls, runtime.object_class]
        assert objmodel.has_attribute(obj, 'x')
        with Runtime() as inner:
            assert get_context() is inner
        assert get_context() is runtime
    assert get_context() is default


def test_context_protocol_warnings():
    runtime = Runtime()
    with pytest.warns(UserWarning):
        runtime.finalize()

    outer = Runtime()
    inner = Runtime()
    outer.__enter__()
    inner.__enter__()
    with pytest.warns(UserWarning):
        outer.finalize()
    assert get_context() is inner
    inner.finalize()
    assert inner not in objmodel.context._context
    assert outer not in objmodel.context._context

    with Runtime() as active:
        with pytest.raises(APIError):
            active.__enter__()


def test_hook_names_from_config():
    config = RuntimeConfig(miss_hook='doesNotUnderstand', write_hook='setSlot', bind_hook='bindTo')
    runtime = Runtime(config)
    cls = runtime.make_class('A', fields={
        'doesNotUnderstand': lambda obj, name: 'dnu:' + name,
        '__getattr__': lambda obj, name: 'wrong hook',
    })
    obj = runtime.new_instance(cls)
    assert runtime.read(obj, 'anything') == 'dnu:anything'
    runtime.write(obj, 'x', 1)
    assert runtime.read(obj, 'x') == 1
    assert 'setSlot' in runtime.object_class.fields
    assert '__setattr__' not in runtime.object_class.fields


def test_config_validation():
    with pytest.raises(TypeError):
        RuntimeConfig(miss_hook='')
    with pytest.raises(ValueError):
        RuntimeConfig(miss_hook='hook', write_hook='hook')
    with pytest.raises(APIError):
        Runtime(config={'miss_hook': 'x'})


def test_config_from_environ():
    config = RuntimeConfig.from_environ({'OBJMODEL_MISS_HOOK': 'missing', 'OBJMODEL_WRITE_HOOK': ''})
    assert config.miss_hook == 'missing'
    assert config.write_hook == '__setattr__'
    assert config.bind_hook == '__get__'
    assert RuntimeConfig.from_environ({}) == RuntimeConfig()


def test_config_from_os_environ(monkeypatch):
    monkeypatch.setenv('OBJMODEL_BIND_HOOK', 'bind')
    assert RuntimeConfig.from_environ().bind_hook == 'bind'


def test_explicit_runtime_leaves_default_untouched():
    default = get_context()
    classes_before = default.layout_count()
    runtime = Runtime()
    obj = runtime.new_instance(runtime.make_class('A'))
    runtime.write(obj, 'x', 1)
    assert get_context() is default
    assert default.layout_count() == classes_before
    assert obj.layout.parent is runtime.empty_layout
