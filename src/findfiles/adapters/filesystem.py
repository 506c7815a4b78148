from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from ..core import Entry, NodeKind, SourceAdapter
from ..errors import IoError, TraversalError


class FileSystemSource(SourceAdapter):
    """
    Local directory source.

    Paths keep the form they were given in, so a root of '.' yields 'src/a.py'
    and a root of 'downloaded_repo' yields 'downloaded_repo/src/a.py'.
    Symlinks are reported as OTHER and are neither followed nor matched.
    """

    def __init__(self, root_cwd: Path | None = None) -> None:
        self._cwd = None if root_cwd is None else Path(root_cwd)

    def resolve_root(self, root_spec: str) -> Path:
        root = Path(root_spec)
        return root if self._cwd is None else self._cwd / root

    def list_dir(self, dir_path: Path) -> Iterable[Entry]:
        entries: list[Entry] = []
        try:
            with os.scandir(dir_path) as it:
                for e in it:
                    if e.is_dir(follow_symlinks=False):
                        kind = NodeKind.DIRECTORY
                    elif e.is_file(follow_symlinks=False):
                        kind = NodeKind.FILE
                    else:
                        kind = NodeKind.OTHER
                    entries.append(Entry(path=dir_path / e.name, name=e.name, kind=kind))
        except NotADirectoryError:
            if dir_path.is_file():
                raise
            raise TraversalError(dir_path, "not a directory or regular file") from None
        except OSError as exc:
            raise TraversalError(dir_path, exc.strerror or str(exc)) from exc
        return entries

    def read_text(self, file_path: Path) -> str:
        try:
            with file_path.open("r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as exc:
            raise IoError(file_path, f"not valid UTF-8 text ({exc.reason})") from exc
        except OSError as exc:
            raise IoError(file_path, exc.strerror or str(exc)) from exc
