"""
Factories and registration options.

A factory is anything with a callable `create(props=None)`. The container
wraps resolved factories in a FactoryManager, which injects the owner into
the props before delegating to the factory.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union
from .exceptions import FactoryInstantiationError, OwnerDestroyedError
from .owner import OWNER, Props, clear_owner, set_owner
from .logging_config import get_logger

logger = get_logger(__name__)


def is_factory(obj: Any) -> bool:
    """
    Check whether an object can produce instances.

    Used to tell "already instantiated object" apart from "factory to be
    invoked". Never raises.

    Args:
        obj: Any value

    Returns:
        True if obj is not None and exposes a callable `create`
    """
    if obj is None:
        return False
    try:
        return callable(getattr(obj, 'create', None))
    except Exception:
        return False


@dataclass(frozen=True)
class RegisterOptions:
    """
    How a registration behaves on lookup.

    None means "not specified": the container falls back to the type
    options, then to its defaults (instantiate and share a single instance).

    Attributes:
        instantiate: Whether lookups call `create` or return the factory itself
        singleton: Whether lookups share one cached result
    """

    instantiate: Optional[bool] = None
    singleton: Optional[bool] = None

    @classmethod
    def coerce(cls, value: Union[None, 'RegisterOptions', Mapping[str, Any]]) -> 'RegisterOptions':
        """
        Build options from None, an existing instance or a mapping.

        Raises:
            TypeError: On unknown option names or unsupported values
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = set(value) - known
            if unknown:
                raise TypeError(f"Unknown register options: {', '.join(sorted(unknown))}")
            return cls(**value)
        raise TypeError(f"Cannot use {type(value).__name__!r} as register options")

    def get(self, option_name: str) -> Optional[bool]:
        """Get an option by name (None when unset or unknown)."""
        return getattr(self, option_name, None)

    def to_dict(self) -> Dict[str, bool]:
        """Only the options that were set."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


class FactoryManager:
    """
    Container-side wrapper around a resolved factory.

    Exposes the factory as `klass` along with its names, and creates
    instances that know their owner.
    """

    def __init__(self, container, factory: Any, full_name: str, normalized_name: str):
        self.container = container
        self.owner = container.owner
        self.klass = factory
        self.full_name = full_name
        self.normalized_name = normalized_name
        self._made_to_string: Optional[str] = None

    @property
    def name(self) -> Optional[str]:
        return getattr(self.klass, '__name__', None)

    def create(self, props: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Create a new instance through the wrapped factory.

        Args:
            props: Properties for the new instance

        Returns:
            Whatever the factory's `create` returns

        Raises:
            OwnerDestroyedError: If the container has been destroyed
            FactoryInstantiationError: If the resolved value is not a factory
        """
        if self.container.is_destroyed:
            raise OwnerDestroyedError(
                f"Cannot create new instances after the owner has been destroyed "
                f"(you attempted to create {self.full_name})"
            )

        if not is_factory(self.klass):
            raise FactoryInstantiationError(
                f"Failed to create an instance of '{self.normalized_name}'. "
                f"Most likely an improperly defined class or an invalid module export."
            )

        instance_props = Props(props or {})
        set_owner(instance_props, self.owner)

        logger.debug(f"Creating instance of {self.normalized_name}")
        return self.klass.create(instance_props)

    def __str__(self) -> str:
        if self._made_to_string is None:
            self._made_to_string = self.container.registry.make_to_string(self.klass, self.full_name)
        return self._made_to_string

    def __repr__(self) -> str:
        return f"<FactoryManager {self.normalized_name}>"


class CoreObject:
    """
    Base class for objects created by the container.

    `create` associates the owner with the instance before `__init__` runs,
    so `get_owner(self)` already works inside the constructor. Remaining
    props become attributes.

    Example:
        class SessionService(CoreObject):
            def __init__(self, **props):
                super().__init__(**props)
                self.store = get_owner(self).lookup('service:store')
    """

    @classmethod
    def create(cls, props: Optional[Mapping[str, Any]] = None):
        props = dict(props) if props else {}
        owner = props.pop(OWNER, None)

        instance = cls.__new__(cls)
        if owner is not None:
            set_owner(instance, owner)
        instance.__init__(**props)
        return instance

    def __init__(self, **props):
        self._is_destroyed = False
        for key, value in props.items():
            setattr(self, key, value)

    @property
    def is_destroyed(self) -> bool:
        return getattr(self, '_is_destroyed', False)

    def will_destroy(self) -> None:
        """Hook called once, right before the object is marked destroyed."""

    def destroy(self) -> None:
        if self.is_destroyed:
            return
        self.will_destroy()
        self._is_destroyed = True
        clear_owner(self)
