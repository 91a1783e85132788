"""
File content lookup: resolves a category/filename pair to a file on disk
"""
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet

from storage_api.core.errors import InvalidArgumentError, NotFoundError, StorageIOError
from storage_api.services.classifier import content_type_of, extension_of
from storage_api.services.scanner import PathLike, is_plain_name, resolve_within


@dataclass(frozen=True)
class ResolvedFile:
    path: Path
    filename: str
    content_type: str


def resolve_for_stream(
    root: PathLike,
    category: str,
    filename: str,
    excluded: AbstractSet[str] = frozenset(),
) -> ResolvedFile:
    """
    Locate a file of a category on disk.

    Raises:
        InvalidArgumentError: If a segment is not a single name or the path
            resolves outside the storage root
        NotFoundError: If there is no such regular file
    """
    if not (is_plain_name(category) and is_plain_name(filename)):
        raise InvalidArgumentError("Category and filename must be plain names")
    path = resolve_within(root, category, filename)

    if category in excluded or filename in excluded:
        raise NotFoundError("File not found")
    try:
        is_file = path.is_file()
    except OSError as e:
        raise StorageIOError(f"Cannot stat '{filename}': {e.strerror or e}")
    if not is_file:
        raise NotFoundError("File not found")

    return ResolvedFile(
        path=path,
        filename=filename,
        content_type=content_type_of(extension_of(filename)),
    )
