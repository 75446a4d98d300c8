"""Explicit cache of resampled images keyed by image identity and size."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Callable, Hashable, Tuple

import logging

from ..models import DrawingConfig, Size

LOGGER = logging.getLogger(__name__)

CacheKey = Tuple[Hashable, Tuple[float, float]]
CacheEntry = Tuple[Any, Any]  # (source image, resized image)


class ImageResizeCache:
    """LRU mapping ``(image key, (width, height)) -> resized image``.

    The cache is owned by whoever owns the drawing surface; entries are only
    dropped by LRU overflow or by explicit :meth:`evict` / :meth:`clear`.
    ``key`` maps an image to its identity and defaults to :func:`id`. Each
    entry keeps a reference to its source image, so an id cannot be reused
    by another image while the entry lives; evict images you discard to
    release them. Not thread-safe.
    """

    def __init__(
        self, max_entries: int = 64, key: Callable[[Any], Hashable] = id
    ) -> None:
        if max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        self._max_entries = int(max_entries)
        self._key = key
        self._entries: "OrderedDict[CacheKey, CacheEntry]" = OrderedDict()

    @classmethod
    def from_config(
        cls, cfg: DrawingConfig, key: Callable[[Any], Hashable] = id
    ) -> "ImageResizeCache":
        return cls(max_entries=cfg.image_cache_size, key=key)

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def _cache_key(self, image: Any, size: Size) -> CacheKey:
        return self._key(image), size.as_tuple()

    def __len__(self) -> int:
        return len(self._entries)

    def _matches(self, entry: CacheEntry, image: Any) -> bool:
        # identity keys must also refer to the very same source object
        return self._key is not id or entry[0] is image

    def __contains__(self, item: Tuple[Any, Size]) -> bool:
        image, size = item
        entry = self._entries.get(self._cache_key(image, size))
        return entry is not None and self._matches(entry, image)

    def get_or_create(
        self, image: Any, size: Size, factory: Callable[[Any, Size], Any]
    ) -> Any:
        """Return the cached variant of ``image`` at ``size``, creating it if needed."""
        key = self._cache_key(image, size)
        entry = self._entries.get(key)
        if entry is not None and self._matches(entry, image):
            self._entries.move_to_end(key)
            LOGGER.debug("Resize cache hit for %s at %sx%s", key[0], *key[1])
            return entry[1]

        LOGGER.debug("Resize cache miss for %s at %sx%s", key[0], *key[1])
        resized = factory(image, size)
        if self._max_entries == 0:
            return resized
        self._entries[key] = (image, resized)
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_entries:
            dropped, _ = self._entries.popitem(last=False)
            LOGGER.debug("Resize cache dropped %s at %sx%s", dropped[0], *dropped[1])
        return resized

    def evict(self, image: Any) -> int:
        """Drop every cached variant of ``image``; returns how many were removed."""
        ident = self._key(image)
        stale = [k for k in self._entries if k[0] == ident]
        for k in stale:
            del self._entries[k]
        if stale:
            LOGGER.debug("Evicted %d resized variant(s) of %s", len(stale), ident)
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["ImageResizeCache"]
