"""
Patch block rendering for bevy-patch.

Produces the ``[patch.crates-io]`` lines that point the umbrella crate and
every discovered sub-crate at the same source.
"""

from typing import List, Sequence

from .domain.source import LocalSource, RemoteSource, SourceTarget

PATCH_HEADER = "[patch.crates-io]"
PATCH_COMMENT = "# Bevy Patch"


def render_dependency(name: str, target: SourceTarget, subdir: str = "") -> str:
    """
    Render one ``name = { ... }`` line.

    Args:
        name: Crate name on the left-hand side
        target: Source every line points at
        subdir: Path below a local checkout (ignored for git sources)
    """
    if isinstance(target, LocalSource):
        path = f"{target.path}/{subdir}" if subdir else target.path
        return f'{name} = {{ path = "{path}" }}'
    if isinstance(target, RemoteSource):
        return f'{name} = {{ git = "{target.repository}", {target.ref.specifier()} }}'
    raise TypeError(f"Unsupported source target: {target!r}")


def render_patch_block(target: SourceTarget, crate_names: Sequence[str],
                       umbrella: str = "bevy") -> List[str]:
    """
    Render the patch block as a list of lines.

    Crate lines follow the order of ``crate_names``; callers sort.
    """
    lines = [
        PATCH_HEADER,
        PATCH_COMMENT,
        render_dependency(umbrella, target),
    ]
    for name in crate_names:
        lines.append(render_dependency(name, target, subdir=f"crates/{name}"))
    return lines


def format_patch_block(lines: Sequence[str]) -> str:
    return "\n".join(lines)
