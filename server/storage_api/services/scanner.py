"""
Directory scanning: categories under the storage root and the files inside them
"""
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, List, Union

from storage_api.core.errors import InvalidArgumentError, NotFoundError, StorageIOError
from storage_api.services.classifier import classify_extension, extension_of, format_bytes

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class Category:
    name: str


@dataclass(frozen=True)
class FileEntry:
    name: str
    size: int
    extension: str
    type: str

    @property
    def size_formatted(self) -> str:
        return format_bytes(self.size)


def resolve_within(root: PathLike, *parts: str) -> Path:
    """
    Join path segments onto root and make sure the result stays under it.

    Both sides are fully resolved, so ``..`` segments and symlinks pointing
    outside the root are rejected.

    Raises:
        InvalidArgumentError: If the resolved path escapes the root
    """
    base = Path(root).resolve()
    try:
        target = base.joinpath(*parts).resolve()
    except (ValueError, OSError) as e:
        raise InvalidArgumentError(f"Invalid path: {e}")

    if target != base and base not in target.parents:
        logger.warning("Rejected path outside storage root: %r", os.path.join(*parts))
        raise InvalidArgumentError("Path escapes the storage root")
    return target


def is_plain_name(name: str) -> bool:
    """True for a single path component other than "." and ".." """
    if name in ("", ".", ".."):
        return False
    return os.sep not in name and not (os.altsep and os.altsep in name)


def _scan(directory: Path) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        logger.error("Cannot read directory %s: %s", directory, e)
        raise StorageIOError(f"Cannot read directory '{directory.name}': {e.strerror or e}")


def _stat(entry: os.DirEntry) -> os.stat_result:
    try:
        return entry.stat()
    except OSError as e:
        logger.error("Cannot stat %s: %s", entry.path, e)
        raise StorageIOError(f"Cannot stat '{entry.name}': {e.strerror or e}")


def list_categories(root: PathLike, excluded: AbstractSet[str]) -> List[Category]:
    """
    List the immediate subdirectories of root that are not denylisted.

    Order follows directory enumeration. Any unreadable entry aborts the
    whole listing.
    """
    categories = []
    for entry in _scan(Path(root)):
        if entry.name in excluded:
            continue
        if stat.S_ISDIR(_stat(entry).st_mode):
            categories.append(Category(name=entry.name))
    return categories


def list_files(root: PathLike, category: str, excluded: AbstractSet[str]) -> List[FileEntry]:
    """
    List the regular files directly inside a category.

    Args:
        root: Storage root
        category: Category (subdirectory) name
        excluded: Entry names never listed

    Returns:
        List[FileEntry]: One entry per file, nested directories skipped

    Raises:
        InvalidArgumentError: If the category is not a plain name or resolves outside root
        NotFoundError: If the category does not exist
        StorageIOError: If the directory or one of its entries cannot be read
    """
    if not is_plain_name(category):
        raise InvalidArgumentError("Category must be a plain directory name")
    category_path = resolve_within(root, category)
    if category in excluded or not category_path.is_dir():
        raise NotFoundError("Category not found")

    files = []
    for entry in _scan(category_path):
        if entry.name in excluded:
            continue
        info = _stat(entry)
        if not stat.S_ISREG(info.st_mode):
            continue
        ext = extension_of(entry.name)
        files.append(FileEntry(
            name=entry.name,
            size=info.st_size,
            extension=ext,
            type=classify_extension(ext),
        ))
    return files
