"""Bootstrap the two root classes of a class graph.

The universal base class (``object``) has no base class and is an instance of
the default metaclass. The default metaclass (``type``) derives from
``object`` and is an instance of itself. Neither can be constructed with its
final class reference in place, so both are built with a placeholder and
patched once ``type`` exists. This is the only time the class of a Class
changes after construction.
"""

from __future__ import annotations

__all__ = ['bootstrap']

import logging
import typing

from objmodel.config import RuntimeConfig
from objmodel.model import Class
from objmodel.protocol import default_write_hook

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


def bootstrap(config: RuntimeConfig) -> typing.Tuple[Class, Class]:
    """Create the universal base class and the default metaclass.

    Returns:
        (object_class, type_class)
    """
    object_class = Class(name=config.object_name,
                         base_class=None,
                         fields={config.write_hook: default_write_hook},
                         metaclass=None)
    type_class = Class(name=config.type_name,
                       base_class=object_class,
                       fields={},
                       metaclass=None)
    # Close the graph.
    type_class.cls = type_class
    object_class.cls = type_class
    logger.debug('Bootstrapped root classes {} and {}.'.format(object_class.name, type_class.name))
    return object_class, type_class
