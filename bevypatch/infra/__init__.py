"""
Infrastructure layer for bevy-patch.

Contains abstractions for external systems:
- GitHubClient: GitHub contents API access
- list_subdirectories: Local directory listing

These provide clean interfaces that can be mocked for testing.
"""

from .github_client import GitHubClient, ContentEntry, GitHubError
from .local_fs import list_subdirectories

__all__ = [
    'GitHubClient',
    'ContentEntry',
    'GitHubError',
    'list_subdirectories',
]
