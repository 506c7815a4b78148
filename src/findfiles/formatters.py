from __future__ import annotations

from .defaults import SEPARATOR_WIDTH


class HashFormatter:
    def header(self, path: str) -> str:
        return f"# File: {path}\n"

    def separator(self) -> str:
        return f"# {'-' * SEPARATOR_WIDTH}\n"

    def body(self, path: str, text: str) -> str:
        return f"{self.header(path)}{text}\n{self.separator()}"
