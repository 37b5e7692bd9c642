"""
Dependency Injection Container.

Instantiates factories resolved by a registry, caches singletons, and
destroys what it created on teardown.
"""

from typing import Dict, Any, Mapping, Optional, Union
from .exceptions import FactoryInstantiationError, OwnerDestroyedError
from .factory import FactoryManager, RegisterOptions
from .metrics import MetricsCollector, Timer, get_metrics
from .names import FullName, type_of, validate_full_name
from .owner import Props, set_owner
from .logging_config import get_logger
from ..config.settings import get_settings

logger = get_logger(__name__)

LookupOptions = Union[None, RegisterOptions, Mapping[str, Any]]


def _destroy(instance: Any) -> None:
    destroy = getattr(instance, 'destroy', None)
    if callable(destroy):
        destroy()


class Container:
    """
    Dependency Injection Container.

    Lookups default to singleton instances: the first lookup creates the
    instance and later lookups share it. Registration or lookup options
    can turn off sharing (`singleton=False`) or instantiation
    (`instantiate=False`, the registered value itself is returned).
    """

    def __init__(
        self,
        registry,
        owner: Optional[Any] = None,
        metrics: Optional[MetricsCollector] = None,
    ):
        """
        Initialize the container.

        Args:
            registry: Registry resolving names to factories
            owner: Owner injected into every created instance
            metrics: Metrics collector (global one when metrics are enabled)
        """
        self.registry = registry
        self.owner = owner
        if metrics is None and get_settings().enable_metrics:
            metrics = get_metrics()
        self.metrics = metrics
        self.cache: Dict[FullName, Any] = {}
        self.factory_manager_cache: Dict[FullName, FactoryManager] = {}
        self.is_destroying = False
        self.is_destroyed = False

    def _count(self, name: str, full_name: FullName):
        if self.metrics is not None:
            self.metrics.increment(name, tags={'type': type_of(full_name)})

    # Option policy

    def _is_singleton(self, full_name: FullName) -> bool:
        return self.registry.get_option(full_name, 'singleton') is not False

    def _is_instantiatable(self, full_name: FullName) -> bool:
        return self.registry.get_option(full_name, 'instantiate') is not False

    def _is_singleton_instance(self, full_name: FullName, options: RegisterOptions) -> bool:
        return (
            options.singleton is not False
            and options.instantiate is not False
            and (options.singleton is True or self._is_singleton(full_name))
            and self._is_instantiatable(full_name)
        )

    def _is_factory_instance(self, full_name: FullName, options: RegisterOptions) -> bool:
        return (
            options.instantiate is not False
            and (options.singleton is False or not self._is_singleton(full_name))
            and self._is_instantiatable(full_name)
        )

    def _is_singleton_class(self, full_name: FullName, options: RegisterOptions) -> bool:
        return (
            options.singleton is not False
            and not options.instantiate
            and self._is_singleton(full_name)
            and not self._is_instantiatable(full_name)
        )

    def _is_factory_class(self, full_name: FullName, options: RegisterOptions) -> bool:
        return (
            options.instantiate is False
            and (options.singleton is False or not self._is_singleton(full_name))
            and not self._is_instantiatable(full_name)
        )

    # Lookup

    def lookup(self, full_name: FullName, options: LookupOptions = None) -> Any:
        """
        Get the instance (or raw factory) registered under a full name.

        Args:
            full_name: '<type>:<name>'
            options: singleton/instantiate overrides for this lookup

        Returns:
            Instance, factory, or None if the name resolves to nothing

        Raises:
            OwnerDestroyedError: After the container has been destroyed
            InvalidFullNameError: If full_name is malformed
            FactoryInstantiationError: If the resolved value cannot be instantiated
        """
        if self.is_destroyed:
            raise OwnerDestroyedError(
                f"Cannot call `.lookup('{full_name}')` after the owner has been destroyed"
            )
        validate_full_name(full_name)

        options = RegisterOptions.coerce(options)
        normalized_name = self.registry.normalize(full_name)
        self._count('lookup', normalized_name)

        if options.singleton is True or (options.singleton is None and self._is_singleton(normalized_name)):
            cached = self.cache.get(normalized_name)
            if cached is not None:
                self._count('lookup_cache_hit', normalized_name)
                return cached

        return self._instantiate_factory(normalized_name, full_name, options)

    def factory_for(self, full_name: FullName) -> Optional[FactoryManager]:
        """
        Get the factory manager for a full name.

        Useful for creating instances with custom props, or reading the
        class without instantiating it.

        Raises:
            OwnerDestroyedError: After the container has been destroyed
            InvalidFullNameError: If full_name is malformed
        """
        if self.is_destroyed:
            raise OwnerDestroyedError(
                f"Cannot call `.factory_for('{full_name}')` after the owner has been destroyed"
            )
        validate_full_name(full_name)
        normalized_name = self.registry.normalize(full_name)
        return self._factory_for(normalized_name, full_name)

    def _factory_for(self, normalized_name: FullName, full_name: FullName) -> Optional[FactoryManager]:
        cached = self.factory_manager_cache.get(normalized_name)
        if cached is not None:
            return cached

        factory = self.registry.resolve(normalized_name)
        if factory is None:
            return None

        manager = FactoryManager(self, factory, full_name, normalized_name)
        self.factory_manager_cache[normalized_name] = manager
        return manager

    def _create(self, manager: FactoryManager) -> Any:
        try:
            with Timer('instantiate', self.metrics):
                instance = manager.create()
        except FactoryInstantiationError as e:
            if self.metrics is not None:
                self.metrics.record_error('instantiate', type(e).__name__)
            raise
        self._count('instantiate', manager.normalized_name)
        logger.debug(f"Instantiated {manager.normalized_name}")
        return instance

    def _instantiate_factory(self, normalized_name: FullName, full_name: FullName, options: RegisterOptions) -> Any:
        manager = self._factory_for(normalized_name, full_name)
        if manager is None:
            self._count('lookup_miss', normalized_name)
            return None

        if self._is_singleton_instance(normalized_name, options):
            instance = self.cache[normalized_name] = self._create(manager)
            # Created during teardown; nothing will destroy it later
            if self.is_destroying:
                _destroy(instance)
            return instance

        if self._is_factory_instance(normalized_name, options):
            return self._create(manager)

        if self._is_singleton_class(normalized_name, options) or self._is_factory_class(normalized_name, options):
            return manager.klass

        raise FactoryInstantiationError(f"Could not create factory for '{normalized_name}'")

    # Lifecycle

    def owner_injection(self) -> Dict[str, Any]:
        """Props carrying this container's owner, for manual `create` calls."""
        injection = Props()
        set_owner(injection, self.owner)
        return injection

    def reset(self, full_name: Optional[FullName] = None):
        """
        Drop cached instances so the next lookup creates new ones.

        Args:
            full_name: Only reset this entry; None resets everything
        """
        if self.is_destroyed:
            return

        if full_name is None:
            self._destroy_destroyables()
            self._reset_cache()
            return

        normalized_name = self.registry.normalize(full_name)
        self.factory_manager_cache.pop(normalized_name, None)
        member = self.cache.pop(normalized_name, None)
        if member is not None:
            _destroy(member)

    def destroy(self):
        """Destroy every cached instance; the container keeps answering until finalized."""
        logger.info(f"Destroying container ({len(self.cache)} cached instances)")
        if self.metrics is not None:
            logger.debug(f"Container metrics: {self.metrics.get_summary()}")
        self._destroy_destroyables()
        self.is_destroying = True

    def finalize_destroy(self):
        self._reset_cache()
        self.is_destroyed = True

    def _destroy_destroyables(self):
        for instance in list(self.cache.values()):
            _destroy(instance)

    def _reset_cache(self):
        self.cache = {}
        self.factory_manager_cache = {}

    def __repr__(self) -> str:
        return f"<Container cached={len(self.cache)} destroyed={self.is_destroyed}>"
