"""
Registry of factories.

Holds explicit registrations and their options, and asks the resolver for
everything else. A registry may have a fallback registry (an application
instance falls back to its application), consulted whenever the registry
itself has no answer.
"""

from typing import Any, Dict, Mapping, Optional
from .cache import MISSING, ResolutionCache
from .container import Container
from .exceptions import RegistrationError
from .factory import RegisterOptions
from .names import FullName, is_valid_full_name, type_of, validate_full_name
from .logging_config import get_logger
from ..config.settings import get_settings
from ..resolvers.base import ResolverCapabilities

logger = get_logger(__name__)


class Registry:
    """
    Name -> factory table with resolver support.

    Resolution order for a normalized name: cached result, known miss,
    resolver, local registrations, then the fallback registry.
    """

    def __init__(
        self,
        resolver: Optional[Any] = None,
        fallback: Optional['Registry'] = None,
        registrations: Optional[Mapping[FullName, Any]] = None,
        cache: Optional[ResolutionCache] = None,
    ):
        """
        Args:
            resolver: Object satisfying the Resolver Protocol
            fallback: Registry consulted when this one has no answer
            registrations: Initial name -> factory registrations
            cache: Resolution cache (built from settings if None)
        """
        self.resolver = resolver
        self.fallback = fallback
        self.capabilities = ResolverCapabilities.of(resolver)
        self.registrations: Dict[FullName, Any] = dict(registrations or {})

        if cache is None:
            settings = get_settings()
            cache = ResolutionCache(
                ttl=settings.resolve_cache_ttl,
                enabled=settings.enable_resolve_cache,
            )
        self._resolve_cache = cache
        self._normalize_cache: Dict[str, FullName] = {}
        self._options: Dict[FullName, RegisterOptions] = {}
        self._type_options: Dict[str, RegisterOptions] = {}

    def container(self, owner: Optional[Any] = None, **kwargs):
        """Create a container backed by this registry."""
        return Container(self, owner=owner, **kwargs)

    # Registration

    def register(self, full_name: FullName, factory: Any, options: Any = None) -> None:
        """
        Register a factory (or any value) under a full name.

        Args:
            full_name: '<type>:<name>'
            factory: Factory, class or plain value; None is rejected
            options: RegisterOptions or a mapping of them

        Raises:
            InvalidFullNameError: If full_name is malformed
            RegistrationError: If factory is None, or the name was already resolved
        """
        validate_full_name(full_name)

        if factory is None:
            raise RegistrationError(f"Attempting to register an unknown factory: '{full_name}'", full_name)

        normalized_name = self.normalize(full_name)

        if self._resolve_cache.has(normalized_name):
            raise RegistrationError(
                f"Cannot re-register: '{full_name}', as it has already been resolved.",
                full_name,
            )

        self._resolve_cache.discard_miss(normalized_name)
        self.registrations[normalized_name] = factory
        self._options[normalized_name] = RegisterOptions.coerce(options)
        logger.debug(f"Registered {normalized_name}")

    def unregister(self, full_name: FullName) -> None:
        """Remove a registration along with its options and cached resolution."""
        validate_full_name(full_name)

        normalized_name = self.normalize(full_name)

        self.registrations.pop(normalized_name, None)
        self._options.pop(normalized_name, None)
        self._resolve_cache.discard(normalized_name)
        logger.debug(f"Unregistered {normalized_name}")

    # Resolution

    def resolve(self, full_name: FullName) -> Any:
        """
        Find the factory for a full name.

        Returns:
            The resolved factory or value, or None when nothing is known
        """
        factory = self._resolve(self.normalize(full_name))
        if factory is None and self.fallback is not None:
            factory = self.fallback.resolve(full_name)
        return factory

    def _resolve(self, normalized_name: FullName) -> Any:
        cached = self._resolve_cache.get(normalized_name)
        if cached is not MISSING:
            return cached
        if self._resolve_cache.is_miss(normalized_name):
            return None

        resolved = None
        if self.resolver is not None:
            resolved = self.resolver.resolve(normalized_name)
        if resolved is None:
            resolved = self.registrations.get(normalized_name)

        if resolved is None:
            self._resolve_cache.add_miss(normalized_name)
        else:
            self._resolve_cache.set(normalized_name, resolved)
        return resolved

    def has(self, full_name: FullName) -> bool:
        """Whether the name resolves to something; False for malformed names."""
        if not self.is_valid_full_name(full_name):
            return False
        return self.resolve(full_name) is not None

    def is_valid_full_name(self, full_name: Any) -> bool:
        return is_valid_full_name(full_name)

    # Naming

    def normalize_full_name(self, full_name: FullName) -> FullName:
        if self.capabilities.normalize:
            return self.resolver.normalize(full_name)
        if self.fallback is not None:
            return self.fallback.normalize_full_name(full_name)
        return full_name

    def normalize(self, full_name: FullName) -> FullName:
        """Canonical form of a full name (memoized)."""
        normalized = self._normalize_cache.get(full_name)
        if normalized is None:
            normalized = self._normalize_cache[full_name] = self.normalize_full_name(full_name)
        return normalized

    def describe(self, full_name: FullName) -> str:
        """Human readable description of what a full name points to."""
        if self.capabilities.lookup_description:
            return self.resolver.lookup_description(full_name)
        if self.fallback is not None:
            return self.fallback.describe(full_name)
        return full_name

    def make_to_string(self, factory: Any, full_name: FullName) -> str:
        if self.capabilities.make_to_string:
            return self.resolver.make_to_string(factory, full_name)
        if self.fallback is not None:
            return self.fallback.make_to_string(factory, full_name)
        if isinstance(factory, str):
            return factory
        name = getattr(factory, '__name__', None) or getattr(factory, 'name', None)
        return name if isinstance(name, str) else '(unknown class)'

    def known_for_type(self, type_: str) -> Dict[FullName, bool]:
        """
        All full names known under a type.

        Merges the fallback's names, local registrations and the resolver's
        names, in that order.
        """
        known: Dict[FullName, bool] = {}
        if self.fallback is not None:
            known.update(self.fallback.known_for_type(type_))
        known.update({
            full_name: True
            for full_name in self.registrations
            if type_of(full_name) == type_
        })
        if self.capabilities.known_for_type:
            known.update(self.resolver.known_for_type(type_))
        return known

    # Options

    def options(self, full_name: FullName, options: Any = None) -> None:
        self._options[self.normalize(full_name)] = RegisterOptions.coerce(options)

    def get_options(self, full_name: FullName) -> Optional[RegisterOptions]:
        options = self._options.get(self.normalize(full_name))
        if options is None and self.fallback is not None:
            options = self.fallback.get_options(full_name)
        return options

    def options_for_type(self, type_: str, options: Any = None) -> None:
        self._type_options[type_] = RegisterOptions.coerce(options)

    def get_options_for_type(self, type_: str) -> Optional[RegisterOptions]:
        options = self._type_options.get(type_)
        if options is None and self.fallback is not None:
            options = self.fallback.get_options_for_type(type_)
        return options

    def get_option(self, full_name: FullName, option_name: str) -> Optional[bool]:
        """
        Effective value of one option.

        Name options win over type options; the fallback is asked only when
        neither is set here.
        """
        normalized_name = self.normalize(full_name)

        options = self._options.get(normalized_name)
        if options is not None and options.get(option_name) is not None:
            return options.get(option_name)

        options = self._type_options.get(type_of(normalized_name))
        if options is not None and options.get(option_name) is not None:
            return options.get(option_name)

        if self.fallback is not None:
            return self.fallback.get_option(full_name, option_name)
        return None

    def __repr__(self) -> str:
        return f"<Registry registrations={len(self.registrations)} resolver={self.resolver!r}>"
