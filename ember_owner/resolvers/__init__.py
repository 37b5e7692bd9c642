"""
Resolvers map full names to factories.

Provides the capability record, a mapping-backed resolver and a
naming-convention resolver.
"""

from .base import BaseResolver, ResolverCapabilities
from .mapping import MappingResolver
from .namespace import NamespaceResolver, classify, dasherize

__all__ = [
    'BaseResolver',
    'ResolverCapabilities',
    'MappingResolver',
    'NamespaceResolver',
    'classify',
    'dasherize',
]
