"""
Error types raised while packing one directory.

Each error carries the path it concerns and is raised ``from`` the underlying
OSError / zipfile error so the original reason is kept. The CLI catches
CbzError per directory, prints ``describe()`` and moves on.
"""
from pathlib import Path
from typing import Optional


class CbzError(Exception):
    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path

    def describe(self) -> str:
        """Message followed by the chained cause, if any."""
        message = str(self)
        cause = self.__cause__
        if cause is not None:
            message = f"{message}: {cause}"
        return message


class DirectoryReadError(CbzError):
    pass


class FileOpenError(CbzError):
    pass


class FileReadError(CbzError):
    pass


class ArchiveWriteError(CbzError):
    pass


class DeletionError(CbzError):
    pass
