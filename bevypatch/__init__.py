"""
bevy-patch - Generate [patch.crates-io] entries for bevy and its sub-crates.

bevy lives in one umbrella repository whose crates/ directory holds many
independently published crates. Patching a project to a fork, branch or
local checkout means overriding all of them at once; bevy-patch lists the
crates and renders one patch line per crate, all pointing at the same source.

Quick Start:
    import bevypatch

    # Local checkout
    lines = bevypatch.generate(bevypatch.local("../bevy"))

    # A fork on GitHub, pinned to a branch
    lines = bevypatch.generate(bevypatch.remote("aceeri", branch="my-feature"))

    print("\\n".join(lines))
"""

__version__ = "0.1.0"

# High-level API
from .api import local, remote, generate

# Domain objects
from .domain import GitRef, LocalSource, RemoteSource

# Building blocks
from .repo_ref import normalize, build_query, select_git_ref
from .discovery import CrateProvider, discover_crates
from .render import render_patch_block, format_patch_block

# Errors
from .errors import (
    PatchError,
    LocalIOError,
    NameEncodingError,
    TransportError,
    RemoteApiError,
)

__all__ = [
    # Version
    "__version__",
    # High-level API
    "local",
    "remote",
    "generate",
    # Domain objects
    "GitRef",
    "LocalSource",
    "RemoteSource",
    # Building blocks
    "normalize",
    "build_query",
    "select_git_ref",
    "CrateProvider",
    "discover_crates",
    "render_patch_block",
    "format_patch_block",
    # Errors
    "PatchError",
    "LocalIOError",
    "NameEncodingError",
    "TransportError",
    "RemoteApiError",
]
