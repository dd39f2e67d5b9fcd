"""Shared storage layouts for instances ("hidden classes" or maps).

A Layout describes which attribute names occupy which storage slots of an
Instance. Layouts are interned in a transition trie rooted at an empty
Layout: extending a Layout with a name always produces the same successor
object, so instances that gain the same attributes in the same order end up
sharing one Layout and can store their values positionally.

Addition order matters. Adding ``x`` then ``y`` reaches a different Layout
than adding ``y`` then ``x``, even though both describe the same attribute
set.

Layouts hold no references to the instances that use them.
"""

from __future__ import annotations

__all__ = ['Layout']

import logging
import types
import typing

from objmodel.exceptions import InternalError

logger = logging.getLogger(__name__)
logger.debug('Importing {}'.format(__name__))


class Layout:
    """Immutable mapping of attribute names to slot indices.

    Construct only the root of a transition trie directly. Every other
    Layout should be obtained with :py:meth:`extend`.
    """
    __slots__ = ('_slots', '_names', '_transitions', '_parent')

    def __init__(self, names: typing.Sequence[str] = (), parent: Layout = None):
        self._names: typing.Tuple[str, ...] = tuple(names)
        slots = {name: index for index, name in enumerate(self._names)}
        if len(slots) != len(self._names):
            raise InternalError('Duplicate attribute names in layout: {}'.format(self._names))
        self._slots = types.MappingProxyType(slots)
        self._parent = parent
        # Successor layouts, keyed by the name added.
        self._transitions: typing.Dict[str, Layout] = {}

    @property
    def names(self) -> typing.Tuple[str, ...]:
        """Attribute names in slot order."""
        return self._names

    @property
    def slots(self) -> typing.Mapping[str, int]:
        """Read-only view of the name to slot index mapping."""
        return self._slots

    @property
    def parent(self) -> typing.Optional[Layout]:
        """The Layout this one extends, or None for the root of the trie."""
        return self._parent

    def slot_of(self, name: str) -> typing.Optional[int]:
        """Get the slot index for *name*, or None if the name has no slot."""
        return self._slots.get(name)

    def extend(self, name: str) -> Layout:
        """Get the canonical successor Layout that adds *name* at the next free slot.

        Raises:
            InternalError if *name* already occupies a slot.
        """
        if name in self._slots:
            raise InternalError('Cannot extend {} with {}: name already has a slot.'.format(
                repr(self), repr(name)))
        successor = self._transitions.get(name)
        if successor is None:
            successor = Layout(self._names + (name,), parent=self)
            self._transitions[name] = successor
            logger.debug('New layout transition {} + {}'.format(self._names, repr(name)))
        return successor

    def transitions(self) -> typing.Mapping[str, Layout]:
        """Read-only view of the successor Layouts created so far."""
        return types.MappingProxyType(self._transitions)

    def walk(self) -> typing.Iterator[Layout]:
        """Iterate over this Layout and every Layout reachable from it, depth first."""
        pending = [self]
        while pending:
            layout = pending.pop()
            yield layout
            pending.extend(reversed(list(layout._transitions.values())))

    def __len__(self):
        return len(self._names)

    def __contains__(self, name):
        return name in self._slots

    def __repr__(self):
        return '<Layout {}>'.format(', '.join(self._names) or '(empty)')
