"""
Dictionary-backed resolver.
"""

from typing import Any, Dict, Mapping, Optional
from .base import BaseResolver
from ..core.names import is_valid_full_name, type_of


class MappingResolver(BaseResolver):
    """
    Resolve full names from a plain mapping.

    Handy for tests and for applications that list their factories
    explicitly. Unknown or malformed names resolve to None.
    """

    def __init__(self, mapping: Optional[Mapping[str, Any]] = None):
        self._mapping: Dict[str, Any] = dict(mapping or {})

    def add(self, full_name: str, factory: Any):
        self._mapping[full_name] = factory

    def resolve(self, full_name: str) -> Any:
        if not is_valid_full_name(full_name):
            return None
        return self._mapping.get(full_name)

    def known_for_type(self, type_: str) -> Dict[str, bool]:
        return {
            full_name: True
            for full_name in self._mapping
            if is_valid_full_name(full_name) and type_of(full_name) == type_
        }

    def __len__(self) -> int:
        return len(self._mapping)
