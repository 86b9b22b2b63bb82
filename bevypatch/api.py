"""
High-level Python API for bevy-patch.

Example:
    import bevypatch

    # Patch to a local checkout
    lines = bevypatch.generate(bevypatch.local("../bevy"))

    # Patch to a fork at a tag
    lines = bevypatch.generate(bevypatch.remote("aceeri", tag="v0.14.0"))
    print("\\n".join(lines))
"""

from typing import Any, Dict, List, Optional

from .config import load_config, get_default_config, merge_configs
from .discovery import discover_crates
from .domain.source import LocalSource, RemoteSource, SourceTarget
from .infra.github_client import GitHubClient
from .render import render_patch_block
from .repo_ref import normalize, select_git_ref


def local(path: str) -> LocalSource:
    """Source target for a local checkout of the umbrella repository."""
    return LocalSource(path)


def remote(repository: str,
           branch: Optional[str] = None,
           tag: Optional[str] = None,
           rev: Optional[str] = None,
           default_branch: str = "main",
           umbrella: str = "bevy") -> RemoteSource:
    """
    Source target for a GitHub repository.

    Args:
        repository: Repository shorthand, normalized to an HTTPS URL
        branch: Branch to pin to
        tag: Tag to pin to (wins over branch and rev)
        rev: Revision to pin to
        default_branch: Branch used when no ref is given
        umbrella: Repository name assumed when only an owner is given
    """
    ref = select_git_ref(tag=tag, branch=branch, rev=rev, default_branch=default_branch)
    return RemoteSource(normalize(repository, umbrella=umbrella), ref)


def generate(target: SourceTarget,
             config: Optional[Dict[str, Any]] = None,
             client: Optional[GitHubClient] = None) -> List[str]:
    """
    Discover crates for ``target`` and render the patch block.

    Nothing is rendered unless discovery succeeds.

    Args:
        target: Local or remote source
        config: Configuration (loaded from disk if omitted)
        client: GitHub client for remote targets (built from config if omitted)

    Returns:
        Patch block lines

    Raises:
        PatchError: If crate discovery fails
    """
    if config is None:
        config = load_config()
    else:
        config = merge_configs(get_default_config(), config)
    umbrella = config['defaults']['umbrella']

    if isinstance(target, RemoteSource) and client is None:
        with GitHubClient.from_config(config) as owned_client:
            crates = discover_crates(target, owned_client)
    else:
        crates = discover_crates(target, client)

    return render_patch_block(target, crates, umbrella=umbrella)


__all__ = ['local', 'remote', 'generate']
