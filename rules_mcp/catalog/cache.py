"""
Registry Cache

Holds each content collection for the lifetime of the owning catalog. A
collection is loaded on first access and kept until it is cleared.
"""

import logging
from typing import Any, Callable, Sequence

from rules_mcp.errors import UnknownEntity

logger = logging.getLogger(__name__)

CollectionLoader = Callable[[], Sequence[Any]]


class RegistryCache:
    """Lazy per-collection cache keyed by collection id."""

    def __init__(self, loaders: dict[str, CollectionLoader] | None = None):
        self._loaders: dict[str, CollectionLoader] = dict(loaders or {})
        self._collections: dict[str, tuple] = {}

    def register(self, collection_id: str, loader: CollectionLoader) -> None:
        """Register (or replace) the loader for a collection and drop its cached copy."""
        self._loaders[collection_id] = loader
        self._collections.pop(collection_id, None)

    def collections(self) -> list[str]:
        return list(self._loaders)

    def is_loaded(self, collection_id: str) -> bool:
        return collection_id in self._collections

    def get_all(self, collection_id: str) -> tuple:
        """
        Return the cached records of a collection, loading them on first access.

        Raises:
            UnknownEntity: no loader registered for collection_id
        """
        cached = self._collections.get(collection_id)
        if cached is not None:
            return cached

        loader = self._loaders.get(collection_id)
        if loader is None:
            raise UnknownEntity("collection", collection_id)

        records = tuple(loader())
        # Publish only after the load completes
        self._collections[collection_id] = records
        logger.debug(f"Loaded {len(records)} record(s) into collection '{collection_id}'")
        return records

    def clear(self, collection_id: str | None = None) -> None:
        """Forget one collection, or every collection when collection_id is None."""
        if collection_id is None:
            self._collections.clear()
            logger.debug("Cleared all cached collections")
            return
        self._collections.pop(collection_id, None)
        logger.debug(f"Cleared cached collection '{collection_id}'")
