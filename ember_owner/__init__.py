"""
ember-owner: dependency injection owner for framework objects.

Register factories by full name ('service:session'), plug in a resolver
for naming conventions, and look instances up through an owner. Every
instance can find its owner again with get_owner().
"""

from .core import (
    OWNER,
    Props,
    Container,
    CoreObject,
    Factory,
    FactoryClass,
    FactoryManager,
    FullName,
    IContainer,
    IRegistry,
    Owner,
    RegisterOptions,
    Registry,
    Resolver,
    get_owner,
    is_factory,
    set_owner,
)
from .core.exceptions import (
    OwnerError,
    InvalidFullNameError,
    RegistrationError,
    FactoryInstantiationError,
    OwnerDestroyedError,
)
from .resolvers import BaseResolver, MappingResolver, NamespaceResolver, ResolverCapabilities
from .application import Application, ApplicationInstance

__version__ = '1.0.0'

__all__ = [
    'OWNER',
    'Props',
    'Container',
    'CoreObject',
    'Factory',
    'FactoryClass',
    'FactoryManager',
    'FullName',
    'IContainer',
    'IRegistry',
    'Owner',
    'RegisterOptions',
    'Registry',
    'Resolver',
    'get_owner',
    'is_factory',
    'set_owner',
    'OwnerError',
    'InvalidFullNameError',
    'RegistrationError',
    'FactoryInstantiationError',
    'OwnerDestroyedError',
    'BaseResolver',
    'MappingResolver',
    'NamespaceResolver',
    'ResolverCapabilities',
    'Application',
    'ApplicationInstance',
]
