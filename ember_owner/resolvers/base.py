"""
Base resolver and capability detection.

Resolvers implement `resolve` and opt into extra behaviour by defining
`known_for_type`, `lookup_description`, `make_to_string` or `normalize`.
The registry reads a ResolverCapabilities record once instead of probing
for those methods on every call.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

OPTIONAL_CAPABILITIES = ('known_for_type', 'lookup_description', 'make_to_string', 'normalize')


@dataclass(frozen=True)
class ResolverCapabilities:
    """Which optional resolver methods are available."""

    known_for_type: bool = False
    lookup_description: bool = False
    make_to_string: bool = False
    normalize: bool = False

    @classmethod
    def of(cls, resolver: Optional[Any]) -> 'ResolverCapabilities':
        """
        Detect the capabilities of a resolver.

        Args:
            resolver: Any resolver, or None

        Returns:
            Capability flags; all False for None
        """
        if resolver is None:
            return cls()
        return cls(**{
            name: callable(getattr(resolver, name, None))
            for name in OPTIONAL_CAPABILITIES
        })

    def __iter__(self):
        return (name for name in OPTIONAL_CAPABILITIES if getattr(self, name))


class BaseResolver(ABC):
    """
    Abstract base class for resolvers.

    Subclassing is optional; any object with `resolve` satisfies the
    Resolver Protocol.
    """

    @abstractmethod
    def resolve(self, full_name: str) -> Any:
        """Return the factory or object for full_name, or None."""
        pass

    @property
    def capabilities(self) -> ResolverCapabilities:
        return ResolverCapabilities.of(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
