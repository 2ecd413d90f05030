"""Source loading for the imposer."""

from .collector import CollectionResult, collect_sources, release_sources

__all__ = [
    "CollectionResult",
    "collect_sources",
    "release_sources",
]
