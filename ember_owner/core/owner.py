"""
Owner association.

Framework objects (services, routes, components, ...) are the responsibility
of an owner, which instantiated them and manages their lifetime. This module
keeps the back-reference from an object to its owner.

The side table is keyed by object identity. For objects that support weak
references the entry holds the object weakly and disappears when it is
garbage collected; other objects (plain `object()` instances, lists,
slotted classes) are held until `clear_owner` is called or they are
destroyed. The owner itself is held weakly whenever it can be.

Immutable primitives (numbers, strings, tuples, None) cannot carry an owner.

Props built for `Factory.create` are `Props` dictionaries: the owner travels
inside them under the `OWNER` key.

Example:
    class PlayAudio(CoreObject):
        @property
        def audio_service(self):
            owner = get_owner(self)
            return owner.lookup(f"service:{self.audio_type}")
"""

import weakref
from typing import Any, Callable, Dict, Optional, Tuple

OWNER = '__owner__'

IMMUTABLE_TYPES = (type(None), bool, int, float, complex, str, bytes, tuple, frozenset)

# id(obj) -> (accessor returning obj, accessor returning the owner)
_owners: Dict[int, Tuple[Callable[[], Any], Callable[[], Any]]] = {}


class Props(dict):
    """Properties handed to `Factory.create`, carrying the owner under OWNER."""


def _forget(key: int, ref: weakref.ref) -> None:
    entry = _owners.get(key)
    # The id may already have been reused by a newer object
    if entry is not None and entry[0] is ref:
        del _owners[key]


def _owner_accessor(owner: Any) -> Callable[[], Any]:
    try:
        return weakref.ref(owner)
    except TypeError:
        return lambda: owner


def _object_accessor(obj: Any) -> Callable[[], Any]:
    key = id(obj)
    try:
        return weakref.ref(obj, lambda r, key=key: _forget(key, r))
    except TypeError:
        # Held strongly, so the id cannot be reused while the entry exists
        return lambda: obj


def get_owner(obj: Any) -> Optional[Any]:
    """
    Fetch the owner responsible for an object.

    The owner can be used to look up or resolve other instances, or to
    register new factories.

    Args:
        obj: An object with an owner

    Returns:
        The owner, or None if none was ever set (or the owner is gone)
    """
    if obj is None:
        return None

    if isinstance(obj, Props):
        return obj.get(OWNER)

    entry = _owners.get(id(obj))
    if entry is None or entry[0]() is not obj:
        return None
    return entry[1]()


def set_owner(obj: Any, owner: Any) -> None:
    """
    Force a new owner on an object, replacing any previous one.

    Mostly useful in tests and when constructing objects by hand outside
    the container.

    Args:
        obj: An object instance, or Props
        owner: The new owner of the object

    Raises:
        TypeError: If obj is an immutable primitive
    """
    if isinstance(obj, Props):
        obj[OWNER] = owner
        return

    if isinstance(obj, IMMUTABLE_TYPES):
        raise TypeError(f"Cannot set an owner on immutable {type(obj).__name__!r} values")

    _owners[id(obj)] = (_object_accessor(obj), _owner_accessor(owner))


def clear_owner(obj: Any) -> None:
    """Remove the owner association of an object, if any."""
    if isinstance(obj, Props):
        obj.pop(OWNER, None)
        return

    entry = _owners.get(id(obj))
    if entry is not None and entry[0]() is obj:
        del _owners[id(obj)]
