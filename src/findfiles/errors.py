from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    INVALID_URL = auto()
    DOWNLOAD = auto()
    ARCHIVE = auto()
    IO = auto()
    TRAVERSAL = auto()


class FindFilesError(Exception):
    """
    Base class for every failure that aborts a run.

    Subclasses set `kind` so callers can tell failures apart without parsing messages.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidUrlError(FindFilesError):
    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid GitHub URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class DownloadError(FindFilesError):
    kind = ErrorKind.DOWNLOAD

    def __init__(self, url: str, reason: str, *, status_code: int | None = None) -> None:
        super().__init__(f"Failed to download {url}: {reason}")
        self.url = url
        self.reason = reason
        self.status_code = status_code


class ArchiveError(FindFilesError):
    kind = ErrorKind.ARCHIVE


class IoError(FindFilesError):
    kind = ErrorKind.IO

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class TraversalError(FindFilesError):
    kind = ErrorKind.TRAVERSAL

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path
        self.reason = reason
