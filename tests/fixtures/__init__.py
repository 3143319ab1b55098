"""Shared test fakes for stepline tests.

This package provides:
- A fake LLM provider recording the requests it receives
- Simple step implementations for runner tests
"""

__all__ = [
    "fake_provider",
    "steps",
]
