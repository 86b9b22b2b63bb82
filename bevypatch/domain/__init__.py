"""
Domain layer for bevy-patch.

Contains pure domain objects with no I/O or side effects:
- GitRef: The branch, tag or revision a remote source is pinned to
- LocalSource: A local checkout of the umbrella repository
- RemoteSource: A GitHub repository plus a GitRef

These objects are immutable and describe where every patched crate
resolves from.
"""

from .source import GitRef, LocalSource, RemoteSource, SourceTarget

__all__ = [
    'GitRef',
    'LocalSource',
    'RemoteSource',
    'SourceTarget',
]
