"""
Storage error kinds and their HTTP status codes
"""


class StorageError(Exception):
    """Base class for every error the storage layer reports to clients"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StorageError):
    """Category or file does not exist"""
    status_code = 404


class InvalidArgumentError(StorageError):
    """Missing search parameters or a path that is not a plain name inside the root"""
    status_code = 400


class StorageIOError(StorageError):
    """Unreadable directory or file"""
    status_code = 500
