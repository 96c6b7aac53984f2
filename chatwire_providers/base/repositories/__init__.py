"""Repositories for credential resolution."""

from .keys import KeyResolution, KeysRepository, resolve_credential

__all__ = ["KeyResolution", "KeysRepository", "resolve_credential"]
