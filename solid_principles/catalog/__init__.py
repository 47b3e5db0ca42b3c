"""Catalog of the SOLID principles."""

from .definitions import DEFAULT_PRINCIPLES, register_default_principles
from .registry import PrincipleRegistry, get_principle_registry

__all__ = [
    "DEFAULT_PRINCIPLES",
    "PrincipleRegistry",
    "get_principle_registry",
    "register_default_principles",
]
