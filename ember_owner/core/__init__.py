"""
Core module providing the owner: registry, container and owner association.

Includes interfaces, exceptions, and the factory helpers.
"""

from .names import FullName, is_valid_full_name, parse_full_name
from .owner import OWNER, Props, clear_owner, get_owner, set_owner
from .factory import CoreObject, FactoryManager, RegisterOptions, is_factory
from .registry import Registry
from .container import Container
from .proxy import ContainerProxyMixin, RegistryProxyMixin
from .interfaces import Factory, FactoryClass, IContainer, IRegistry, Owner, Resolver
from .exceptions import (
    OwnerError,
    InvalidFullNameError,
    RegistrationError,
    FactoryInstantiationError,
    OwnerDestroyedError,
)

__all__ = [
    'FullName',
    'is_valid_full_name',
    'parse_full_name',
    'OWNER',
    'Props',
    'clear_owner',
    'get_owner',
    'set_owner',
    'CoreObject',
    'FactoryManager',
    'RegisterOptions',
    'is_factory',
    'Registry',
    'Container',
    'ContainerProxyMixin',
    'RegistryProxyMixin',
    'Factory',
    'FactoryClass',
    'IContainer',
    'IRegistry',
    'Owner',
    'Resolver',
    'OwnerError',
    'InvalidFullNameError',
    'RegistrationError',
    'FactoryInstantiationError',
    'OwnerDestroyedError',
]
