"""
Criterion Registry - Named Criterion Factories.

This module provides a thread-safe registry mapping names to criterion
factories. New criteria are plugged in by registering a factory; nothing
in the filter engine changes.

Usage:
    registry = default_registry()
    registry.register("heavy", lambda: PredicateCriterion(is_heavy))

    criterion = registry.create("color", Color.GREEN) & registry.create("heavy")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Callable, Dict, List, Optional

from product_filter.criteria.attribute import ColorCriterion, NameCriterion, SizeCriterion
from product_filter.criteria.base import ensure_criterion
from product_filter.interfaces.criterion import Criterion

logger = logging.getLogger(__name__)

CriterionFactory = Callable[..., Criterion[Any]]


@dataclass
class CriterionInfo:
    """Metadata about a registered criterion factory."""

    name: str
    factory: CriterionFactory
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "tags": self.tags,
            "factory": getattr(self.factory, "__name__", type(self.factory).__name__),
        }


class CriterionRegistry:
    """
    Thread-safe registry of criterion factories.

    Supports:
        - Registration of custom criteria under a unique name
        - Factory arguments forwarded at creation time
        - Validation that factories actually produce criteria
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._criteria: Dict[str, CriterionInfo] = {}
        self._lock = RLock()
        logger.debug("CriterionRegistry initialized")

    def register(
        self,
        name: str,
        factory: CriterionFactory,
        description: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a criterion factory.

        Args:
            name: Unique name for the criterion
            factory: Callable returning a criterion (a criterion class works)
            description: Optional description
            tags: Optional tags for categorization

        Raises:
            ValueError: If the name is already registered or factory is not callable
        """
        if not callable(factory):
            raise ValueError(f"Factory for '{name}' must be callable")

        with self._lock:
            if name in self._criteria:
                raise ValueError(
                    f"Criterion '{name}' is already registered. "
                    f"Use unregister() first."
                )

            self._criteria[name] = CriterionInfo(
                name=name,
                factory=factory,
                description=description,
                tags=tags or [],
            )
            logger.info(f"Registered criterion: {name}")

    def unregister(self, name: str) -> bool:
        """
        Unregister a criterion by name.

        Returns:
            True if removed, False if not found
        """
        with self._lock:
            if name not in self._criteria:
                logger.warning(f"Cannot unregister: criterion '{name}' not found")
                return False

            del self._criteria[name]
            logger.info(f"Unregistered criterion: {name}")
            return True

    def create(self, name: str, *args: Any, **kwargs: Any) -> Criterion[Any]:
        """
        Build a criterion from its registered factory.

        Args:
            name: Registered criterion name
            *args: Positional arguments for the factory
            **kwargs: Keyword arguments for the factory

        Returns:
            New criterion instance

        Raises:
            KeyError: If the name is not registered
            InvalidArgumentError: If the factory rejects its arguments or
                returns something that is not a criterion
        """
        with self._lock:
            info = self._criteria.get(name)
        if info is None:
            raise KeyError(f"Unknown criterion: {name}")

        return ensure_criterion(info.factory(*args, **kwargs), name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._criteria

    def list_all(self) -> Dict[str, CriterionInfo]:
        """List all registered criteria."""
        with self._lock:
            return dict(self._criteria)

    @property
    def registered_count(self) -> int:
        """Total number of registered criteria."""
        with self._lock:
            return len(self._criteria)

    def clear(self) -> None:
        """Remove all registered criteria."""
        with self._lock:
            self._criteria.clear()
            logger.info("Cleared all criteria from registry")


def default_registry() -> CriterionRegistry:
    """Create a registry pre-populated with the product attribute criteria."""
    registry = CriterionRegistry()
    registry.register("color", ColorCriterion, "Product color equals", ["product"])
    registry.register("size", SizeCriterion, "Product size equals", ["product"])
    registry.register("name", NameCriterion, "Product name equals", ["product"])
    return registry
