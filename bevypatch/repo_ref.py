"""
Repository reference handling for bevy-patch.

Turns the shorthand accepted on the command line into a canonical GitHub
URL, builds the REST query that lists the umbrella repository's crates,
and picks the single ref the patch block is pinned to.

Accepted repository shorthand:
    https://github.com/bevyengine/bevy
    http://github.com/aceeri/bevy  -> https://github.com/aceeri/bevy
    github.com/aceeri/bevy         -> https://github.com/aceeri/bevy
    aceeri/bevy                    -> https://github.com/aceeri/bevy
    aceeri                         -> https://github.com/aceeri/bevy
"""

import logging
from typing import Optional

from .domain.source import GitRef, DEFAULT_BRANCH

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com/"
GITHUB_API_REPOS = "api.github.com/repos/"
CRATES_DIR = "crates"


def normalize(raw: str, umbrella: str = "bevy") -> str:
    """
    Normalize a repository reference to ``https://github.com/owner/repo``.

    Each rule only patches what is missing, so already canonical input
    comes back unchanged. Nothing is validated here; a bad reference
    surfaces when the API query is made.

    Args:
        raw: Repository shorthand (owner, owner/repo, host/owner/repo or URL)
        umbrella: Repository name assumed when only an owner is given

    Returns:
        Canonical HTTPS URL
    """
    corrected = raw

    # aceeri -> aceeri/bevy
    if "/" not in corrected:
        corrected = f"{corrected}/{umbrella}"

    # aceeri/bevy -> github.com/aceeri/bevy
    if GITHUB_HOST not in corrected:
        corrected = f"{GITHUB_HOST}{corrected}"

    corrected = corrected.replace("http://", "https://")

    # github.com/aceeri/bevy -> https://github.com/aceeri/bevy
    if "https://" not in corrected:
        corrected = f"https://{corrected}"

    return corrected


def build_query(repository: str, git_ref: str) -> str:
    """
    Build the GitHub "list directory contents" URL for the crates directory.

    Args:
        repository: Repository reference (normalized or shorthand)
        git_ref: Branch, tag or revision to list at

    Returns:
        ``https://api.github.com/repos/<owner>/<repo>/contents/crates?ref=<git_ref>``
    """
    api_url = normalize(repository).replace(GITHUB_HOST, GITHUB_API_REPOS)

    if api_url.endswith(".git"):
        api_url = api_url[:-4]

    return f"{api_url}/contents/{CRATES_DIR}?ref={git_ref}"


def select_git_ref(tag: Optional[str] = None,
                   branch: Optional[str] = None,
                   rev: Optional[str] = None,
                   default_branch: str = DEFAULT_BRANCH) -> GitRef:
    """
    Pick the ref to pin to: tag, then branch, then rev, then the default branch.

    Lower-precedence refs supplied alongside a higher one are ignored.
    """
    supplied = [(kind, value) for kind, value in
                (('tag', tag), ('branch', branch), ('rev', rev))
                if value is not None]

    if not supplied:
        return GitRef("branch", default_branch)

    kind, value = supplied[0]
    for ignored_kind, ignored_value in supplied[1:]:
        logger.debug(f"Ignoring --{ignored_kind} {ignored_value!r}, --{kind} takes precedence")

    return GitRef(kind, value)
