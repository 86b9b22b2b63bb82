"""
Crate discovery for bevy-patch.

Finds the names of the sub-crates that live in the umbrella repository's
``crates/`` directory, either in a local checkout or through the GitHub
contents API. Providers share one interface so another host only needs a
new provider; normalization and rendering stay untouched.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional

from .domain.source import GitRef, LocalSource, RemoteSource, SourceTarget
from .errors import PatchError
from .infra.github_client import GitHubClient
from .infra.local_fs import list_subdirectories
from .repo_ref import CRATES_DIR, build_query

logger = logging.getLogger(__name__)


class CrateProvider(ABC):
    """Source of crate names for one source target."""

    @abstractmethod
    def list_crates(self) -> List[str]:
        """Return crate names in ascending order."""

    @abstractmethod
    def describe(self) -> str:
        """Context attached to errors raised by this provider."""


class LocalCrateProvider(CrateProvider):
    """Lists ``<path>/crates`` on the local filesystem."""

    def __init__(self, path: str):
        self.path = path

    @property
    def crates_dir(self) -> str:
        return os.path.join(self.path, CRATES_DIR)

    def describe(self) -> str:
        return f"Local path: {self.path!r}"

    def list_crates(self) -> List[str]:
        # Sorted so output does not depend on filesystem iteration order
        return sorted(list_subdirectories(self.crates_dir))


class GitHubCrateProvider(CrateProvider):
    """Lists the ``crates`` directory of a GitHub repository at a ref."""

    def __init__(self, repository: str, ref: GitRef, client: GitHubClient):
        self.repository = repository
        self.ref = ref
        self.client = client

    @property
    def query_url(self) -> str:
        return build_query(self.repository, self.ref.value)

    def describe(self) -> str:
        return f"Github url: {self.repository!r}, ref: {self.ref.value!r}"

    def list_crates(self) -> List[str]:
        entries = self.client.list_contents(self.query_url)
        return sorted(entry.name for entry in entries if entry.is_dir)


def get_provider(target: SourceTarget, client: Optional[GitHubClient] = None) -> CrateProvider:
    """
    Pick the crate provider for a source target.

    Args:
        target: Local or remote source
        client: GitHub client for remote targets (a default one is created if omitted)
    """
    if isinstance(target, LocalSource):
        return LocalCrateProvider(target.path)
    if isinstance(target, RemoteSource):
        return GitHubCrateProvider(target.repository, target.ref, client or GitHubClient())
    raise TypeError(f"Unsupported source target: {target!r}")


def discover_crates(target: SourceTarget, client: Optional[GitHubClient] = None) -> List[str]:
    """
    Discover the crate names for a source target.

    Args:
        target: Local or remote source
        client: GitHub client for remote targets

    Returns:
        Sorted crate names

    Raises:
        PatchError: Annotated with the path, or repository and ref, being queried
    """
    provider = get_provider(target, client)
    try:
        crates = provider.list_crates()
    except PatchError as e:
        e.with_context(provider.describe())
        raise

    logger.info(f"Found {len(crates)} crates ({provider.describe()})")
    return crates
