"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving the loaders, the path finder and
the navigation service.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        navigation = container.resolve(NavigationService)

        # Testing
        container = Container()
        container.register(PathFinderPort, lambda: FakePathFinder())
        finder = container.resolve(PathFinderPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[Any, Callable[[], Any]] = field(default_factory=dict, repr=False)
    _singletons: Dict[Any, Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[Any] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        key: Any,
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type (or any hashable key).

        Args:
            key: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[key] = factory
            self._singletons.pop(key, None)
            if singleton:
                self._singleton_types.add(key)
            else:
                self._singleton_types.discard(key)

    def resolve(self, key: Any) -> Any:
        """Resolve an instance registered under ``key``.

        Raises:
            KeyError: If the key is not registered.
        """
        with self._lock:
            if key not in self._factories:
                raise KeyError(f"Type not registered: {key}")

            if key in self._singleton_types:
                if key not in self._singletons:
                    self._singletons[key] = self._factories[key]()
                return self._singletons[key]

            return self._factories[key]()

    def is_registered(self, key: Any) -> bool:
        return key in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import DijkstraPathFinder, OsmGraphLoader, PolyGraphLoader
        from .ports.graph import PathFinderPort
        from .services import NavigationService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            PolyGraphLoader,
            lambda: PolyGraphLoader(config.poly, config.geometry),
        )
        container.register(
            OsmGraphLoader,
            lambda: OsmGraphLoader(config.osm, config.geometry),
        )
        container.register(PathFinderPort, DijkstraPathFinder)
        container.register(
            NavigationService,
            lambda: NavigationService(
                loaders=[
                    container.resolve(PolyGraphLoader),
                    container.resolve(OsmGraphLoader),
                ],
                path_finder=container.resolve(PathFinderPort),
                geometry=config.geometry,
            ),
        )
        return container
