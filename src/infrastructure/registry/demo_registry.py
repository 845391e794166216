"""Demo Registry - Registry pattern for runnable pattern demonstrations.

Demos are registered by name with the function that runs them, so the CLI
can list and run demos without knowing about any of them.

Thread-safe singleton implementation.
"""

from typing import Callable, Dict, List, Optional
import threading

from src.domain.core.exceptions import ConfigurationError, DomainException
from src.infrastructure.logging.logger import get_logger


class UnsupportedDemoError(DomainException):
    """Exception raised when an unknown demo is requested."""
    pass


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self,
                 name: str,
                 category: str,
                 description: str,
                 runner: Callable[[], None]):
        """
        Initialize demo registration.

        Args:
            name: Unique demo name (e.g., 'faceted-builder')
            category: Pattern family the demo belongs to (e.g., 'builder')
            description: One-line summary shown in listings
            runner: Function running the demo
        """
        self.name = name
        self.category = category
        self.description = description
        self.runner = runner

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "category": self.category,
            "description": self.description,
        }

    def __repr__(self) -> str:
        return f"DemoRegistration(name='{self.name}', category='{self.category}')"


class DemoRegistry:
    """
    Registry for pattern demonstrations.

    Registration order is kept, so listings and "run all" follow it.
    """

    _instance: Optional['DemoRegistry'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'DemoRegistry':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize demo registry."""
        if hasattr(self, '_initialized'):
            return

        self._registrations: Dict[str, DemoRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Demo registry initialized")

    def register_demo(self,
                      name: str,
                      category: str,
                      description: str,
                      runner: Callable[[], None]) -> None:
        """
        Register a demo.

        Raises:
            ConfigurationError: If a demo with this name is already registered
        """
        with self._registry_lock:
            if name in self._registrations:
                raise ConfigurationError(f"Demo '{name}' is already registered")

            registration = DemoRegistration(name, category, description, runner)
            self._registrations[name] = registration

            self.logger.debug(f"Registered demo: {name}")

    def run_demo(self, name: str) -> None:
        """
        Run a registered demo.

        Raises:
            UnsupportedDemoError: If the demo is not registered
        """
        registration = self.get_registration(name)
        self.logger.debug(f"Running demo: {name}")
        registration.runner()

    def get_registration(self, name: str) -> DemoRegistration:
        """
        Get registration for the given demo.

        Raises:
            UnsupportedDemoError: If the demo is not registered
        """
        with self._registry_lock:
            if name not in self._registrations:
                available = list(self._registrations.keys())
                raise UnsupportedDemoError(
                    f"Demo '{name}' is not registered. Available demos: {available}"
                )
            return self._registrations[name]

    def get_registered_demos(self, category: Optional[str] = None) -> List[DemoRegistration]:
        """Registered demos in registration order, optionally for one category."""
        with self._registry_lock:
            return [
                r for r in self._registrations.values()
                if category is None or r.category == category
            ]

    def get_categories(self) -> List[str]:
        with self._registry_lock:
            return list(dict.fromkeys(r.category for r in self._registrations.values()))

    def is_demo_registered(self, name: str) -> bool:
        with self._registry_lock:
            return name in self._registrations

    def clear_registrations(self) -> None:
        """
        Clear all demo registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Cleared all demo registrations")


def get_demo_registry() -> DemoRegistry:
    """Get the global demo registry instance."""
    return DemoRegistry()
