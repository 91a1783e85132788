"""
Pydantic models and schemas for API responses
"""
from pydantic import BaseModel
from typing import Dict, List, Optional


class CategoryOut(BaseModel):
    """Category with its locators"""
    name: str
    path: str
    filesUrl: str


class CategoryList(BaseModel):
    categories: List[CategoryOut]
    count: int


class FileEntryOut(BaseModel):
    """File metadata as returned by category listings"""
    name: str
    size: int
    sizeFormatted: str
    type: str
    extension: str
    url: str
    downloadUrl: str


class CatalogFileOut(FileEntryOut):
    """File metadata annotated with its category"""
    category: str


class CategoryFiles(BaseModel):
    category: str
    files: List[FileEntryOut]
    count: int
    totalSize: str


class FileList(BaseModel):
    files: List[CatalogFileOut]
    count: int


class SearchResults(BaseModel):
    results: List[CatalogFileOut]
    count: int
    query: str = ""
    type: Optional[str] = None


class Health(BaseModel):
    status: str
    timestamp: str


class ApiInfo(BaseModel):
    name: str
    version: str
    endpoints: Dict[str, str]


class ErrorOut(BaseModel):
    error: str
