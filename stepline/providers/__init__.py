"""LLM provider implementations."""

from .openrouter import OpenRouterProvider, ProviderConfig

__all__ = [
    "OpenRouterProvider",
    "ProviderConfig",
]
