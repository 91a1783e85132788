"""
Request dependencies exposing the storage configuration held on app.state
"""
from pathlib import Path
from typing import FrozenSet

from fastapi import Request


def get_storage_root(request: Request) -> Path:
    return request.app.state.storage_dir


def get_excluded(request: Request) -> FrozenSet[str]:
    return request.app.state.excluded
