"""
Registry of objects declared so far.

Field types are resolved against this registry, so only objects opened
before a field is parsed can be referenced.
"""

from typing import Dict, Iterator, List, Optional

from .schema import MetaObject
from ...logging_config import get_logger

logger = get_logger(__name__)


class ObjectRegistry:
    """Ordered, append-only collection of declared objects."""

    def __init__(self, max_objects: Optional[int] = None):
        """
        Initialize empty registry.

        Args:
            max_objects: Soft limit on registered objects (None for no limit)
        """
        self.max_objects = max_objects
        self._objects: List[MetaObject] = []
        self._by_name: Dict[str, MetaObject] = {}

    def register(self, obj: MetaObject) -> bool:
        """
        Register an object.

        Duplicate names are accepted and both objects are kept; lookups
        return the first one registered under a name.

        Returns:
            True if registered, False if the registry is full
        """
        if self.is_full:
            return False

        if obj.name in self._by_name:
            logger.debug("Object '%s' registered more than once", obj.name)
        else:
            self._by_name[obj.name] = obj

        self._objects.append(obj)
        return True

    def find(self, name: str) -> Optional[MetaObject]:
        """Get the first registered object with this name."""
        return self._by_name.get(name)

    def reset(self):
        """Forget every registered object."""
        self._objects.clear()
        self._by_name.clear()

    @property
    def is_full(self) -> bool:
        return self.max_objects is not None and len(self._objects) >= self.max_objects

    def names(self) -> List[str]:
        """Registered object names in registration order, duplicates included."""
        return [obj.name for obj in self._objects]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[MetaObject]:
        return iter(list(self._objects))

    def __repr__(self) -> str:
        return f"ObjectRegistry({self.names()!r})"
