"""
Custom exception hierarchy for the owner.

Absence is never an error here: unknown names resolve to None. These
exceptions cover misuse of the registry and container.
"""

from typing import Optional


class OwnerError(Exception):
    """Base exception for all registry and container errors."""
    pass


class InvalidFullNameError(OwnerError, ValueError):
    """Raised when a name is not of the form '<type>:<name>'."""
    
    def __init__(self, full_name, message: Optional[str] = None):
        super().__init__(message or f"'{full_name}' is not a valid full name, expected '<type>:<name>'")
        self.full_name = full_name


class RegistrationError(OwnerError):
    """Raised when a registration is rejected."""
    
    def __init__(self, message: str, full_name: Optional[str] = None):
        super().__init__(message)
        self.full_name = full_name


class FactoryInstantiationError(OwnerError):
    """Raised when a resolved value cannot be instantiated."""
    pass


class OwnerDestroyedError(OwnerError):
    """Raised when the container is used after it has been destroyed."""
    pass
