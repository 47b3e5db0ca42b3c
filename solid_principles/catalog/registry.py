"""Principle Registry - registry pattern for the tutorial's principles.

New principles, or alternative write-ups of existing ones, are added by
registering them; nothing that reads the catalog has to change.
"""

import threading
from typing import Dict, List, Optional, Union

from solid_principles.domain.exceptions import PrincipleNotFoundError
from solid_principles.domain.principle import Principle, PrincipleId
from solid_principles.infrastructure.logging.logger import get_logger

PrincipleKey = Union[PrincipleId, str]


def _normalize(principle_id: PrincipleKey) -> str:
    if isinstance(principle_id, PrincipleId):
        return principle_id.value
    return principle_id.strip().upper()


class PrincipleRegistry:
    """
    Registry of principles keyed by acronym.

    Registration order is preserved so that listings and the rendered README
    follow S-O-L-I-D order when the defaults are registered.

    Thread-safe singleton implementation.
    """

    _instance: Optional['PrincipleRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize principle registry."""
        self._registrations: Dict[str, Principle] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'PrincipleRegistry':
        """Get singleton instance of principle registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton instance."""
        with cls._lock:
            cls._instance = None

    def register_principle(self, principle: Principle) -> None:
        """
        Register a principle.

        Args:
            principle: Principle with its prose and snippet pair

        Raises:
            ValueError: If the principle is already registered
        """
        key = principle.id.value
        with self._registration_lock:
            if key in self._registrations:
                raise ValueError(f"Principle '{key}' is already registered")
            self._registrations[key] = principle
            self._logger.debug("Registered principle", principle=key, name=principle.name)

    def unregister_principle(self, principle_id: PrincipleKey) -> bool:
        """
        Unregister a principle.

        Returns:
            True if the principle was unregistered, False if it was not registered
        """
        key = _normalize(principle_id)
        with self._registration_lock:
            if key not in self._registrations:
                return False
            del self._registrations[key]
            self._logger.debug("Unregistered principle", principle=key)
            return True

    def get_principle(self, principle_id: PrincipleKey) -> Principle:
        """
        Look up a principle by acronym (case-insensitive).

        Raises:
            PrincipleNotFoundError: If the principle is not registered
        """
        key = _normalize(principle_id)
        with self._registration_lock:
            try:
                return self._registrations[key]
            except KeyError:
                raise PrincipleNotFoundError(key) from None

    def is_registered(self, principle_id: PrincipleKey) -> bool:
        with self._registration_lock:
            return _normalize(principle_id) in self._registrations

    def get_registered_ids(self) -> List[str]:
        with self._registration_lock:
            return list(self._registrations.keys())

    def list_principles(self) -> List[Principle]:
        """All registered principles in registration order."""
        with self._registration_lock:
            return list(self._registrations.values())

    def clear_registrations(self) -> None:
        with self._registration_lock:
            self._registrations.clear()
            self._logger.debug("Cleared all principle registrations")


def get_principle_registry() -> PrincipleRegistry:
    """Get the global principle registry instance."""
    return PrincipleRegistry.get_instance()
