"""
Naming-convention resolver over a namespace.

Maps full names to attributes of a module, an object or a mapping:

    'service:user-session'  ->  namespace.UserSessionService
    'route:posts/index'     ->  namespace.PostsIndexRoute
    'application:main'      ->  namespace.Application
"""

import re
from types import ModuleType
from typing import Any, Dict, Iterable, Mapping, Optional
from .base import BaseResolver
from ..core.exceptions import InvalidFullNameError
from ..core.names import is_valid_full_name, make_full_name, parse_full_name
from ..core.logging_config import get_logger

logger = get_logger(__name__)

MAIN = 'main'

_WORD_BOUNDARY = re.compile(r'[-_/.\s]+')
_CAMEL_HUMP = re.compile(r'([a-z\d])([A-Z])')


def classify(name: str) -> str:
    """'user-session' -> 'UserSession', keeping inner capitals."""
    return ''.join(part[:1].upper() + part[1:] for part in _WORD_BOUNDARY.split(name) if part)


def dasherize(name: str) -> str:
    """'userSession' / 'user_session' -> 'user-session'."""
    return _CAMEL_HUMP.sub(r'\1-\2', name).replace('_', '-').lower()


class NamespaceResolver(BaseResolver):
    """
    Resolve full names by class-naming conventions.

    The attribute looked up for '<type>:<name>' is classify(name) followed by
    classify(type). The 'main' entry of a type is the bare classify(type).
    """

    def __init__(self, namespace: Any, name: Optional[str] = None):
        """
        Args:
            namespace: Module, object or mapping holding the classes
            name: Label used in descriptions (defaults to the module name)
        """
        self.namespace = namespace
        self.name = name or self._default_name(namespace)

    @staticmethod
    def _default_name(namespace: Any) -> str:
        if isinstance(namespace, ModuleType):
            return namespace.__name__
        if isinstance(namespace, Mapping):
            return 'namespace'
        return getattr(namespace, '__name__', type(namespace).__name__)

    def _attribute_names(self) -> Iterable[str]:
        if isinstance(self.namespace, Mapping):
            return list(self.namespace.keys())
        return dir(self.namespace)

    def _get(self, attribute: str) -> Any:
        if isinstance(self.namespace, Mapping):
            return self.namespace.get(attribute)
        return getattr(self.namespace, attribute, None)

    def class_name_for(self, full_name: str) -> Optional[str]:
        """Attribute name a full name maps to, or None for malformed names."""
        if not is_valid_full_name(full_name):
            return None
        type_, name = parse_full_name(full_name)
        if name == MAIN:
            return classify(type_)
        return classify(name) + classify(type_)

    def resolve(self, full_name: str) -> Any:
        class_name = self.class_name_for(full_name)
        if not class_name:
            return None

        resolved = self._get(class_name)
        if resolved is None:
            logger.debug(f"{self.name}.{class_name} not found for {full_name}")
        return resolved

    def normalize(self, full_name: str) -> str:
        if not is_valid_full_name(full_name):
            return full_name
        type_, name = parse_full_name(full_name)
        if type_ == 'route':
            name = name.replace('.', '/')
        return make_full_name(type_, dasherize(name))

    def known_for_type(self, type_: str) -> Dict[str, bool]:
        suffix = classify(type_)
        known: Dict[str, bool] = {}
        if not suffix:
            return known

        for attribute in self._attribute_names():
            if not attribute.endswith(suffix) or self._get(attribute) is None:
                continue
            stem = attribute[:-len(suffix)]
            if stem and not stem[0].isupper():
                continue
            try:
                known[make_full_name(type_, dasherize(stem) if stem else MAIN)] = True
            except InvalidFullNameError:
                logger.debug(f"Skipping {self.name}.{attribute}: not a valid '{type_}' name")
        return known

    def lookup_description(self, full_name: str) -> str:
        class_name = self.class_name_for(full_name)
        if not class_name:
            return full_name
        return f"{self.name}.{class_name}"

    def make_to_string(self, factory: Any, full_name: str) -> str:
        return self.lookup_description(full_name)

    def __repr__(self) -> str:
        return f"<NamespaceResolver {self.name}>"
