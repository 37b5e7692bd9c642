"""
Full name definitions.

A full name is a namespace (the type) plus the name of a specific entry
within it, like 'service:session'.
"""

import re
from typing import Any, Tuple
from .exceptions import InvalidFullNameError

FullName = str

SEPARATOR = ':'

VALID_FULL_NAME = re.compile(r'^[^:]+:[^:]+$')


def is_valid_full_name(full_name: Any) -> bool:
    """Check whether a value is a '<type>:<name>' string."""
    return isinstance(full_name, str) and VALID_FULL_NAME.match(full_name) is not None


def validate_full_name(full_name: Any) -> FullName:
    """
    Validate a full name.
    
    Args:
        full_name: Candidate full name
        
    Returns:
        The full name unchanged
        
    Raises:
        InvalidFullNameError: If the value is not a '<type>:<name>' string
    """
    if not is_valid_full_name(full_name):
        raise InvalidFullNameError(full_name)
    return full_name


def parse_full_name(full_name: Any) -> Tuple[str, str]:
    """
    Split a full name into its type and name.
    
    Args:
        full_name: A '<type>:<name>' string
        
    Returns:
        (type, name) tuple
        
    Raises:
        InvalidFullNameError: If the value is not a valid full name
    """
    type_, name = validate_full_name(full_name).split(SEPARATOR)
    return type_, name


def type_of(full_name: FullName) -> str:
    """Type part of a full name (everything before the first separator)."""
    return full_name.split(SEPARATOR, 1)[0]


def make_full_name(type_: str, name: str) -> FullName:
    """Join a type and a name, validating the result."""
    return validate_full_name(f"{type_}{SEPARATOR}{name}")
