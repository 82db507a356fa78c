"""Configuration module with YAML and environment variable support."""

from .settings import LLMProvider, Settings, StorageBackend, get_settings


__all__ = [
    "LLMProvider",
    "Settings",
    "StorageBackend",
    "get_settings",
]
