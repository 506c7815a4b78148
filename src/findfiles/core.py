from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, Iterator, Protocol

from .errors import IoError
from .filters import (
    is_ignored_dir,
    matches_extension,
    resolve_extensions,
    resolve_ignored_dirs,
)

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    DIRECTORY = auto()
    FILE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Entry:
    path: Path
    name: str
    kind: NodeKind


class Writer(Protocol):
    def write(self, text: str) -> None: ...


class SourceAdapter(Protocol):
    def resolve_root(self, root_spec: str) -> Path: ...
    def list_dir(self, dir_path: Path) -> Iterable[Entry]: ...
    def read_text(self, file_path: Path) -> str: ...


class Formatter(Protocol):
    def body(self, path: str, text: str) -> str: ...


class StdoutWriter(Writer):
    def write(self, text: str) -> None:
        sys.stdout.write(text)


class StringWriter(Writer):
    """In-memory sink for printed file contents; `main(writer=...)` takes one instead of stdout."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def text(self) -> str:
        return "".join(self._parts)


class FileScanner:
    """
    Depth-first walk that reports files by extension and prunes ignored directories.

    Directory listing failures propagate as `TraversalError` and end the walk.
    Failures reading a matched file's contents are logged and the walk goes on.
    """

    def __init__(
        self,
        source: SourceAdapter,
        formatter: Formatter,
        *,
        extensions: list[str],
        ignored_dirs: list[str],
        print_contents: bool,
    ) -> None:
        self.source = source
        self.formatter = formatter
        self.extensions = resolve_extensions(list(extensions))
        self.ignored_dirs = resolve_ignored_dirs(list(ignored_dirs))
        self.print_contents = print_contents

    def iter_matches(self, root_spec: str) -> Iterator[Entry]:
        root = self.source.resolve_root(root_spec)
        if is_ignored_dir(root.name, ignored_dirs=self.ignored_dirs):
            logger.debug("Scan root %s is an ignored directory", root)
            return
        stack: list[Path] = [root]
        while stack:
            current = stack.pop()
            try:
                entries = list(self.source.list_dir(current))
            except NotADirectoryError:
                # The root itself is a file
                entry = Entry(path=current, name=current.name, kind=NodeKind.FILE)
                if self._extension_match(entry.name):
                    yield entry
                continue
            # Sort directories then files, both case-insensitive
            dirs = [e for e in entries if e.kind is NodeKind.DIRECTORY]
            files = [e for e in entries if e.kind is NodeKind.FILE]
            dirs.sort(key=lambda e: e.name.casefold())
            files.sort(key=lambda e: e.name.casefold())

            for entry in reversed(dirs):  # reversed for stack DFS order
                if is_ignored_dir(entry.name, ignored_dirs=self.ignored_dirs):
                    logger.debug("Skipping ignored directory %s", entry.path)
                    continue
                stack.append(entry.path)

            for entry in files:
                if self._extension_match(entry.name):
                    yield entry

    def run(self, root_spec: str, writer: Writer) -> int:
        count = 0
        for entry in self.iter_matches(root_spec):
            count += 1
            logger.info("Found file: %s", entry.path)
            if self.print_contents:
                self._print_file(entry, writer)
        return count

    def _extension_match(self, filename: str) -> bool:
        return matches_extension(filename, extensions=self.extensions)

    def _print_file(self, entry: Entry, writer: Writer) -> None:
        try:
            text = self.source.read_text(entry.path)
        except IoError as exc:
            logger.error("Error reading file %s: %s", entry.path, exc.reason)
            return
        writer.write(self.formatter.body(str(entry.path), text))
