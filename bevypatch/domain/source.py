"""
Source target domain objects for bevy-patch.

A source target says where the umbrella package and all of its sibling
crates are patched to: either a local path or a git repository at a ref.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

GIT_REF_KINDS = ('tag', 'branch', 'rev')

DEFAULT_BRANCH = "main"


@dataclass(frozen=True)
class GitRef:
    """A branch, tag or revision selecting a repository state."""
    kind: str = "branch"  # tag, branch or rev
    value: str = DEFAULT_BRANCH

    def __post_init__(self):
        if self.kind not in GIT_REF_KINDS:
            raise ValueError(f"Unknown git ref kind: {self.kind!r}")

    @classmethod
    def default(cls) -> 'GitRef':
        return cls("branch", DEFAULT_BRANCH)

    def specifier(self) -> str:
        """Cargo dependency key for this ref, e.g. ``tag = "v0.14.0"``."""
        return f'{self.kind} = "{self.value}"'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'value': self.value,
        }


@dataclass(frozen=True)
class LocalSource:
    """Patch every crate to a local checkout of the umbrella repository."""
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': 'path',
            'path': self.path,
        }


@dataclass(frozen=True)
class RemoteSource:
    """Patch every crate to one git repository at one ref."""
    repository: str
    ref: GitRef = field(default_factory=GitRef.default)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': 'git',
            'repository': self.repository,
            'ref': self.ref.to_dict(),
        }


SourceTarget = Union[LocalSource, RemoteSource]
