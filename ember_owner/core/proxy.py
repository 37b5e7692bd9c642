"""
Registry and container proxies.

Mixins giving an owner the public registry and container operations by
forwarding to `__registry__` and `__container__`.
"""

from typing import Any, Dict, Optional
from .factory import FactoryManager, RegisterOptions
from .names import FullName


class RegistryProxyMixin:
    """Forward registry operations to `self.__registry__`."""

    __registry__ = None

    def resolve_registration(self, full_name: FullName) -> Any:
        """
        Given a full name, return the corresponding factory.

        Args:
            full_name: '<type>:<name>'

        Returns:
            The factory, or None when nothing is registered or resolvable
        """
        if not self.__registry__.is_valid_full_name(full_name):
            return None
        return self.__registry__.resolve(full_name)

    def register(self, full_name: FullName, factory: Any, options: Any = None) -> None:
        """
        Register a factory or value under a full name.

        By default the container instantiates registered factories and
        shares a single instance across lookups:

            owner.register('service:session', SessionService)
            owner.register('config:api-url', 'https://api.example.com', {'instantiate': False})
            owner.register('model:comment', Comment, {'singleton': False})
        """
        self.__registry__.register(full_name, factory, options)

    def unregister(self, full_name: FullName) -> None:
        self.__registry__.unregister(full_name)

    def has_registration(self, full_name: FullName) -> bool:
        return self.__registry__.has(full_name)

    def registered_option(self, full_name: FullName, option_name: str) -> Optional[bool]:
        return self.__registry__.get_option(full_name, option_name)

    def register_options(self, full_name: FullName, options: Any) -> None:
        self.__registry__.options(full_name, options)

    def registered_options(self, full_name: FullName) -> Optional[RegisterOptions]:
        return self.__registry__.get_options(full_name)

    def register_options_for_type(self, type_: str, options: Any) -> None:
        """
        Options applied to every registration of a type, e.g. make all
        `model:` lookups return new instances:

            owner.register_options_for_type('model', {'singleton': False})
        """
        self.__registry__.options_for_type(type_, options)

    def registered_options_for_type(self, type_: str) -> Optional[RegisterOptions]:
        return self.__registry__.get_options_for_type(type_)


class ContainerProxyMixin:
    """Forward container operations to `self.__container__`."""

    __container__ = None

    def lookup(self, full_name: FullName, options: Any = None) -> Any:
        """
        Given a full name, return the corresponding instance.

        Instances are singletons by default:

            owner.lookup('service:session') is owner.lookup('service:session')  # True

        Pass {'singleton': False} for a fresh instance, or
        {'instantiate': False} together with an instantiate=False
        registration for the raw value.
        """
        return self.__container__.lookup(full_name, options)

    def factory_for(self, full_name: FullName) -> Optional[FactoryManager]:
        """
        Given a full name, return the factory manager for it.

        The manager's `klass` is the registered class; `create(props)`
        builds instances with this owner.
        """
        return self.__container__.factory_for(full_name)

    def owner_injection(self) -> Dict[str, Any]:
        return self.__container__.owner_injection()
