from __future__ import annotations

from pathlib import PurePath

from typeguard import typechecked

from .types import TDirName, TExtension, _is_dir_name, _is_extension


@typechecked
def is_extension(value: str) -> bool:
    return _is_extension(value)


@typechecked
def is_dir_name(value: str) -> bool:
    return _is_dir_name(value)


@typechecked
def resolve_extensions(custom_extensions: list[TExtension]) -> frozenset[str]:
    """Normalize configured extensions to their dotless form, dropping empty values."""
    return frozenset(ext.removeprefix(".") for ext in custom_extensions if is_extension(ext))


@typechecked
def resolve_ignored_dirs(custom_ignored: list[TDirName]) -> frozenset[str]:
    return frozenset(name for name in custom_ignored if is_dir_name(name))


@typechecked
def extension_of(name: str) -> str | None:
    """
    Return the text after the last dot of a file name, or None.

    Leading-dot names such as '.bashrc' have no extension.
    """
    suffix = PurePath(name).suffix
    return suffix[1:] if suffix else None


@typechecked
def matches_extension(name: str, *, extensions: frozenset[str]) -> bool:
    extension = extension_of(name)
    return extension is not None and extension in extensions


@typechecked
def is_ignored_dir(name: str, *, ignored_dirs: frozenset[str]) -> bool:
    return name in ignored_dirs
