"""
File type classification and size formatting
"""
import os

IMAGE = "image"
VIDEO = "video"
OTHER = "other"

IMAGE_EXTENSIONS = frozenset({'.jpg', '.jpeg', '.png', '.gif', '.webp', '.bmp'})
VIDEO_EXTENSIONS = frozenset({'.mov', '.mp4', '.avi', '.mkv', '.webm'})

CONTENT_TYPES = {
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.png': 'image/png',
    '.gif': 'image/gif',
    '.webp': 'image/webp',
    '.bmp': 'image/bmp',
    '.mov': 'video/quicktime',
    '.mp4': 'video/mp4',
    '.avi': 'video/x-msvideo',
    '.mkv': 'video/x-matroska',
    '.webm': 'video/webm',
}
DEFAULT_CONTENT_TYPE = 'application/octet-stream'

SIZE_UNITS = ('Bytes', 'KB', 'MB', 'GB')


def format_bytes(size: int) -> str:
    """
    Render a byte count as a human readable string.

    Values are rounded to two decimals with trailing zeros dropped
    ("1.5 KB", "1 GB"). There is no unit above GB, so very large sizes
    are reported as thousands of GB.
    """
    if size == 0:
        return '0 Bytes'

    index = 0
    while index < len(SIZE_UNITS) - 1 and size >= 1024 ** (index + 1):
        index += 1

    value = f"{size / 1024 ** index:.2f}".rstrip('0').rstrip('.')
    return f"{value} {SIZE_UNITS[index]}"


def extension_of(filename: str) -> str:
    """Lowercased extension including the dot, or an empty string"""
    return os.path.splitext(filename)[1].lower()


def classify_extension(ext: str) -> str:
    if ext in IMAGE_EXTENSIONS:
        return IMAGE
    if ext in VIDEO_EXTENSIONS:
        return VIDEO
    return OTHER


def content_type_of(ext: str) -> str:
    return CONTENT_TYPES.get(ext, DEFAULT_CONTENT_TYPE)
