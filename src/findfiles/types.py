import os
from dataclasses import dataclass
from typing import Annotated, NewType

from annotated_types import Predicate


def _is_extension(value: str) -> bool:
    return bool(value.removeprefix(".")) and "/" not in value and os.path.sep not in value


def _is_dir_name(value: str) -> bool:
    return bool(value) and "/" not in value and os.path.sep not in value


TExtension = Annotated[NewType("TExtension", str), Predicate(_is_extension)]
"""A file extension, with or without its leading dot: 'py' and '.py' are the same extension."""

TDirName = Annotated[NewType("TDirName", str), Predicate(_is_dir_name)]
"""A directory base name. Matched exactly against each directory's name, never against its path."""


@dataclass(frozen=True)
class GithubInfo:
    repo_url: str
    branch_name: str | None = None
    folder_path: str | None = None

    @property
    def owner(self) -> str:
        return self.repo_url.rstrip("/").split("/")[-2]

    @property
    def repo(self) -> str:
        return self.repo_url.rstrip("/").split("/")[-1]
