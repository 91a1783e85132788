"""
Catalog views across every category: flat listing and search
"""
from dataclasses import dataclass
from typing import AbstractSet, Iterator, List, Optional

from storage_api.core.errors import InvalidArgumentError
from storage_api.services.scanner import FileEntry, PathLike, list_categories, list_files


@dataclass(frozen=True)
class CatalogEntry:
    """A file entry together with the category that owns it"""
    category: str
    file: FileEntry


def _walk(root: PathLike, excluded: AbstractSet[str]) -> Iterator[CatalogEntry]:
    for category in list_categories(root, excluded):
        for entry in list_files(root, category.name, excluded):
            yield CatalogEntry(category=category.name, file=entry)


def list_all_files(root: PathLike, excluded: AbstractSet[str]) -> List[CatalogEntry]:
    return list(_walk(root, excluded))


def search(
    root: PathLike,
    excluded: AbstractSet[str],
    query: Optional[str] = None,
    file_type: Optional[str] = None,
) -> List[CatalogEntry]:
    """
    Find files by name/category substring and/or classified type.

    The query is matched case-insensitively against both the file name and
    its category name, so a query naming a category returns all of its files.

    Args:
        root: Storage root
        excluded: Entry names never listed
        query: Substring to look for, empty means no text filter
        file_type: Classified type to keep; values no file has match nothing

    Returns:
        List[CatalogEntry]: Matching entries in enumeration order

    Raises:
        InvalidArgumentError: If neither filter is given
    """
    if not query and not file_type:
        raise InvalidArgumentError("Please provide search query (q) or type filter")

    needle = (query or "").lower()
    results = []
    for item in _walk(root, excluded):
        if needle and needle not in item.file.name.lower() and needle not in item.category.lower():
            continue
        if file_type and item.file.type != file_type:
            continue
        results.append(item)
    return results
