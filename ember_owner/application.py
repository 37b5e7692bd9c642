"""
Application and application instance.

An Application holds the base registry and the resolver. Each
ApplicationInstance built from it is an owner: it has its own registry
(falling back to the application's) and its own container, and every
object it creates knows it as its owner.
"""

from typing import Any, Optional
from .core.container import Container
from .core.metrics import MetricsCollector
from .core.proxy import ContainerProxyMixin, RegistryProxyMixin
from .core.registry import Registry
from .core.logging_config import get_logger

logger = get_logger(__name__)


class Application(RegistryProxyMixin):
    """
    Base registry for an application.

    Registrations made here are shared by every instance built from it.

    Example:
        app = Application(resolver=NamespaceResolver(my_app_module))
        app.register('service:session', SessionService)
        instance = app.build_instance()
        session = instance.lookup('service:session')
    """

    def __init__(self, resolver: Optional[Any] = None, registry: Optional[Registry] = None):
        self.resolver = resolver
        self.__registry__ = registry if registry is not None else Registry(resolver=resolver)

    @property
    def registry(self) -> Registry:
        return self.__registry__

    def build_registry(self) -> Registry:
        """A registry for a new instance, falling back to this application's."""
        return Registry(fallback=self.__registry__)

    def build_instance(self, metrics: Optional[MetricsCollector] = None) -> 'ApplicationInstance':
        return ApplicationInstance(self, metrics=metrics)

    def __repr__(self) -> str:
        return f"<Application resolver={self.resolver!r}>"


class ApplicationInstance(RegistryProxyMixin, ContainerProxyMixin):
    """
    Owner of the objects created for one run of an application.

    Satisfies the Owner Protocol. Registrations made on the instance shadow
    the application's without affecting other instances.
    """

    def __init__(self, application: Application, metrics: Optional[MetricsCollector] = None):
        self.application = application
        self.__registry__ = application.build_registry()
        self.__container__ = Container(self.__registry__, owner=self, metrics=metrics)

    @property
    def registry(self) -> Registry:
        return self.__registry__

    @property
    def container(self) -> Container:
        return self.__container__

    @property
    def is_destroyed(self) -> bool:
        return self.__container__.is_destroyed

    def destroy(self) -> None:
        """
        Tear down the instance: destroy every singleton it created.

        Later lookups raise OwnerDestroyedError. Calling it twice is a no-op.
        """
        if self.is_destroyed:
            return
        logger.info("Destroying application instance")
        self.__container__.destroy()
        self.__container__.finalize_destroy()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy()
        return False

    def __repr__(self) -> str:
        return f"<ApplicationInstance destroyed={self.is_destroyed}>"
