"""
Interface definitions using Python Protocols.

This module defines the contracts of the owner system using Python's Protocol
feature (structural subtyping/duck typing):

- Factory / FactoryClass: the shape of something that produces instances
- Resolver: the strategy mapping full names to factories or objects
- IRegistry / IContainer: the two capability sets an owner exposes
- Owner: the combination of both

Example usage:
    class MyResolver:
        def resolve(self, full_name):
            return MY_FACTORIES.get(full_name)

    # MyResolver automatically satisfies the Resolver Protocol
    resolver: Resolver = MyResolver()
"""

from typing import Protocol, Any, Dict, List, Mapping, Optional, TypeVar, Union, runtime_checkable

T = TypeVar('T', covariant=True)


@runtime_checkable
class FactoryClass(Protocol):
    """
    Class-level metadata a factory may carry.

    `positional_params` names the props filled from positional arguments
    (a single name, a list of names, or None).
    """

    positional_params: Union[str, List[str], None]


@runtime_checkable
class Factory(Protocol[T]):
    """
    Protocol for anything able to produce instances.

    Only `create` is required. Factories may also carry `klass`, `name`,
    `full_name` and `normalized_name` metadata; FactoryManager provides all
    of them.

    Whether `create` returns a fresh or a shared instance is decided by the
    registration options, not by the factory.
    """

    def create(self, props: Optional[Mapping[str, Any]] = None) -> T:
        """
        Produce an instance.

        Args:
            props: Initial properties, may contain the owner under OWNER

        Returns:
            The instance
        """
        ...


@runtime_checkable
class Resolver(Protocol):
    """
    Protocol for looking up code by full name.

    A resolver converts naming conventions into the actual classes, functions
    and values the container needs, e.g. which class backs 'service:session'.
    It is agnostic of how that code is organised: modules, a namespace
    object or a plain dictionary all work.

    Only `resolve` is required. A resolver may also implement:

    - known_for_type(type_) -> Dict[str, bool]
    - lookup_description(full_name) -> str
    - make_to_string(factory, full_name) -> str
    - normalize(full_name) -> str

    Use ResolverCapabilities.of(resolver) to find out which ones it has.
    """

    def resolve(self, full_name: str) -> Any:
        """
        Find the factory or object for a full name.

        Args:
            full_name: A '<type>:<name>' string

        Returns:
            The factory or object, or None when the name is unknown.
            Unknown names must not raise.
        """
        ...


@runtime_checkable
class IRegistry(Protocol):
    """Registry operations an owner exposes."""

    def resolve_registration(self, full_name: str) -> Any:
        ...

    def register(self, full_name: str, factory: Any, options: Any = None) -> None:
        ...

    def unregister(self, full_name: str) -> None:
        ...

    def has_registration(self, full_name: str) -> bool:
        ...

    def registered_option(self, full_name: str, option_name: str) -> Optional[bool]:
        ...

    def register_options(self, full_name: str, options: Any) -> None:
        ...

    def registered_options(self, full_name: str) -> Any:
        ...

    def register_options_for_type(self, type_: str, options: Any) -> None:
        ...

    def registered_options_for_type(self, type_: str) -> Any:
        ...


@runtime_checkable
class IContainer(Protocol):
    """Container operations an owner exposes."""

    def lookup(self, full_name: str, options: Any = None) -> Any:
        ...

    def factory_for(self, full_name: str) -> Any:
        ...

    def owner_injection(self) -> Dict[str, Any]:
        ...


@runtime_checkable
class Owner(IRegistry, IContainer, Protocol):
    """
    The object responsible for instantiating framework objects and managing
    their lifetime: registry and container operations together.

    Call sites depend on this Protocol, not on ApplicationInstance.
    """
