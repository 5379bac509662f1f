"""Caller-owned cache of extracted property metadata.

extract_metadata never caches on its own. Applications that query the same
properties repeatedly (e.g. an inspector redrawing on every frame) can hold
one of these and drop it when the model classes change.
"""

import logging
from collections import OrderedDict

from ..config.settings import settings
from ..errors import ContractViolation
from ..extractors import extract_metadata
from ..models.metadata_record import MetadataRecord
from ..models.property_handle import PropertyHandle

logger = logging.getLogger(__name__)


class MetadataCache:
    """Bounded cache of MetadataRecords keyed by (owner, property name).

    When full, the oldest inserted entry is evicted.
    """

    def __init__(self, max_size: int | None = None):
        if max_size is None:
            max_size = settings.cache_max_size
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.entries: OrderedDict[tuple[str, str], MetadataRecord] = OrderedDict()
        self.max_size = max_size
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _key(prop: PropertyHandle | None) -> tuple[str, str]:
        if prop is None:
            raise ContractViolation("Attempted to cache property attributes of a None property")
        return prop.owner, prop.name

    def get(self, prop: PropertyHandle | None) -> MetadataRecord:
        """Return the cached record for prop, extracting it on a miss."""
        key = self._key(prop)

        record = self.entries.get(key)
        if record is not None:
            self._hits += 1
            return record

        self._misses += 1
        record = extract_metadata(prop)
        self.entries[key] = record

        if len(self.entries) > self.max_size:
            evicted, _ = self.entries.popitem(last=False)
            logger.debug(f"Evicted {evicted[0]}.{evicted[1]} from metadata cache")

        return record

    def invalidate(self, prop: PropertyHandle | None) -> bool:
        """Drop the entry for prop. Returns True if one was cached."""
        return self.entries.pop(self._key(prop), None) is not None

    def stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with 'hits', 'misses', 'size', 'hit_rate'
        """
        total = self._hits + self._misses
        hit_rate = (self._hits / total * 100) if total > 0 else 0

        return {
            "hits": self._hits,
            "misses": self._misses,
            "size": len(self.entries),
            "hit_rate": hit_rate,
        }

    def clear(self):
        """Clears the cache and its counters."""
        self.entries.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, prop: PropertyHandle | None) -> bool:
        return prop is not None and (prop.owner, prop.name) in self.entries
