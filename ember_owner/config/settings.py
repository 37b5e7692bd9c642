"""
Application settings and configuration.

Centralizes all configurable values for the registry and container.
"""

import os
from typing import Optional, Dict, Any
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class Settings:
    """
    Owner settings.
    
    Centralizes all configuration values.
    """
    
    def __init__(self):
        """Initialize settings from environment and defaults."""
        # Resolution Settings
        self.enable_resolve_cache = _env_flag('ENABLE_RESOLVE_CACHE', 'true')
        ttl = os.getenv('RESOLVE_CACHE_TTL', '')
        self.resolve_cache_ttl: Optional[float] = float(ttl) if ttl else None
        self.resolver_namespace = os.getenv('RESOLVER_NAMESPACE')
        
        # Observability Settings
        self.enable_metrics = _env_flag('ENABLE_METRICS', 'true')
        
        # Logging Settings
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        
        Args:
            key: Configuration key (supports dot notation)
            default: Default value if not found
            
        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self
        
        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default
        
        return value if value is not None else default
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            'enable_resolve_cache': self.enable_resolve_cache,
            'resolve_cache_ttl': self.resolve_cache_ttl,
            'resolver_namespace': self.resolver_namespace,
            'enable_metrics': self.enable_metrics,
            'log_level': self.log_level,
        }


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
