"""
Local filesystem access for bevy-patch.

Lists the immediate subdirectories of a directory and turns OS failures
into LocalIOError / NameEncodingError.
"""

import os
import logging
from pathlib import Path
from typing import List, Union

from ..errors import LocalIOError, NameEncodingError

logger = logging.getLogger(__name__)


def ensure_text_name(name: str) -> str:
    """
    Return ``name`` if it is valid text.

    Undecodable bytes in a file name come back from the OS as lone
    surrogates; such names cannot be written to a manifest.

    Raises:
        NameEncodingError: If the name cannot be encoded as UTF-8
    """
    try:
        name.encode('utf-8')
    except UnicodeEncodeError as e:
        raise NameEncodingError(f"couldn't convert directory name {name!r} to text") from e
    return name


def list_subdirectories(path: Union[str, Path]) -> List[str]:
    """
    List names of the immediate subdirectories of ``path``.

    Plain files and symlinks (even to directories) are skipped.

    Returns:
        Directory names in filesystem order

    Raises:
        LocalIOError: If the directory does not exist or cannot be read
        NameEncodingError: If an entry name is not valid text
    """
    names = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if not entry.is_dir(follow_symlinks=False):
                    continue
                names.append(ensure_text_name(entry.name))
    except OSError as e:
        raise LocalIOError(f"couldn't read directory {os.fspath(path)}: {e.strerror or e}") from e

    logger.debug(f"Found {len(names)} directories in {path}")
    return names
