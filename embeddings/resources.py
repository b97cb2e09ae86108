"""Lookup of named data files (embedding tables) across resource directories."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

logger = logging.getLogger(__name__)


class ResourceNotFoundError(FileNotFoundError):
    """Raised when a named resource cannot be located in any search directory."""

    def __init__(self, name: str, searched: Optional[list[Path]] = None):
        self.name = name
        self.searched = searched or []
        locations = ", ".join(str(p) for p in self.searched) or "no search directories"
        super().__init__(f"Resource not found: {name} (searched {locations})")


def resolve_resource(
    name: Union[str, Path],
    search_dirs: Optional[Iterable[Union[str, Path]]] = None,
) -> Path:
    """Resolve a resource name to an existing file.

    A name that already points at a file is returned unchanged. Otherwise each
    directory in ``search_dirs`` is tried in order and the first hit wins.

    Raises:
        ResourceNotFoundError: if no candidate exists.
    """
    candidate = Path(name)
    if candidate.is_file():
        return candidate

    searched = []
    for directory in search_dirs or []:
        directory = Path(directory)
        searched.append(directory)
        path = directory / candidate
        if path.is_file():
            logger.debug("Resolved resource %s -> %s", name, path)
            return path

    raise ResourceNotFoundError(str(name), searched)
