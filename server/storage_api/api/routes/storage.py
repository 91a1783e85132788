"""
Storage endpoints router: categories, listings, search and file delivery

Handlers are plain functions so FastAPI runs the blocking filesystem calls
in its thread pool.
"""
import logging
from pathlib import Path
from typing import FrozenSet, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import FileResponse

from storage_api.api.dependencies import get_excluded, get_storage_root
from storage_api.models.schemas import (
    CatalogFileOut,
    CategoryFiles,
    CategoryList,
    CategoryOut,
    ErrorOut,
    FileEntryOut,
    FileList,
    SearchResults,
)
from storage_api.services import catalog, content, scanner
from storage_api.services.classifier import format_bytes
from storage_api.services.scanner import FileEntry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Storage"])

ERROR_RESPONSES = {
    400: {"model": ErrorOut},
    404: {"model": ErrorOut},
    500: {"model": ErrorOut},
}


def _file_url(prefix: str, category: str, filename: str) -> str:
    return f"/api/{prefix}/{quote(category, safe='')}/{quote(filename, safe='')}"


def _file_out(category: str, entry: FileEntry) -> dict:
    return {
        "name": entry.name,
        "size": entry.size,
        "sizeFormatted": entry.size_formatted,
        "type": entry.type,
        "extension": entry.extension,
        "url": _file_url("files", category, entry.name),
        "downloadUrl": _file_url("download", category, entry.name),
    }


def _catalog_out(item: catalog.CatalogEntry) -> CatalogFileOut:
    return CatalogFileOut(category=item.category, **_file_out(item.category, item.file))


@router.get("/categories", response_model=CategoryList, responses=ERROR_RESPONSES)
def get_categories(
    root: Path = Depends(get_storage_root),
    excluded: FrozenSet[str] = Depends(get_excluded),
):
    """List categories (top-level folders of the storage root)"""
    categories = []
    for category in scanner.list_categories(root, excluded):
        base = f"/api/categories/{quote(category.name, safe='')}"
        categories.append(CategoryOut(name=category.name, path=base, filesUrl=f"{base}/files"))
    return CategoryList(categories=categories, count=len(categories))


@router.get("/categories/{category}/files", response_model=CategoryFiles, responses=ERROR_RESPONSES)
def get_category_files(
    category: str,
    root: Path = Depends(get_storage_root),
    excluded: FrozenSet[str] = Depends(get_excluded),
):
    """
    List the files of one category

    Args:
        category: Category name, already percent-decoded by the router
    """
    entries = scanner.list_files(root, category, excluded)
    return CategoryFiles(
        category=category,
        files=[FileEntryOut(**_file_out(category, entry)) for entry in entries],
        count=len(entries),
        totalSize=format_bytes(sum(entry.size for entry in entries)),
    )


@router.get("/files", response_model=FileList, responses=ERROR_RESPONSES)
def get_all_files(
    root: Path = Depends(get_storage_root),
    excluded: FrozenSet[str] = Depends(get_excluded),
):
    """Flat list of every file in every category"""
    files = [_catalog_out(item) for item in catalog.list_all_files(root, excluded)]
    return FileList(files=files, count=len(files))


@router.get(
    "/search",
    response_model=SearchResults,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def search_files(
    q: Optional[str] = Query(None, description="Substring of file or category name"),
    file_type: Optional[str] = Query(None, alias="type", description="image, video or other"),
    root: Path = Depends(get_storage_root),
    excluded: FrozenSet[str] = Depends(get_excluded),
):
    """Search files by name substring and/or type"""
    query = (q or "").lower()
    file_type = file_type or None
    results = [
        _catalog_out(item)
        for item in catalog.search(root, excluded, query=query, file_type=file_type)
    ]
    logger.debug("Search q=%r type=%r matched %d files", query, file_type, len(results))
    return SearchResults(results=results, count=len(results), query=query, type=file_type)


def _deliver(
    disposition: str,
    category: str,
    filename: str,
    root: Path,
    excluded: FrozenSet[str],
) -> FileResponse:
    resolved = content.resolve_for_stream(root, category, filename, excluded)
    return FileResponse(
        path=resolved.path,
        media_type=resolved.content_type,
        filename=resolved.filename,
        content_disposition_type=disposition,
    )


@router.get("/files/{category}/{filename}", responses=ERROR_RESPONSES)
def get_file(
    category: str,
    filename: str,
    root: Path = Depends(get_storage_root),
    excluded: FrozenSet[str] = Depends(get_excluded),
):
    """Stream a file inline; Range requests are honoured for media seeking"""
    return _deliver("inline", category, filename, root, excluded)


@router.get("/download/{category}/{filename}", responses=ERROR_RESPONSES)
def download_file(
    category: str,
    filename: str,
    root: Path = Depends(get_storage_root),
    excluded: FrozenSet[str] = Depends(get_excluded),
):
    """Stream a file as an attachment so browsers offer to save it"""
    return _deliver("attachment", category, filename, root, excluded)
