from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import requests

from .adapters.filesystem import FileSystemSource
from .adapters.github import GitHubArchiveSource
from .cli_common import Context, parse_common_args
from .core import FileScanner, StdoutWriter, Writer
from .defaults import DEFAULT_RUN_PATH
from .errors import FindFilesError, TraversalError
from .formatters import HashFormatter
from .log import setup_logging
from .util import parse_github_url

logger = logging.getLogger(__name__)


def resolve_search_path(ctx: Context, *, session: Optional[requests.Session] = None) -> Path | None:
    """
    Return the directory to scan, downloading the repository first if a GitHub URL was given.

    The returned directory is the archive's own top folder under the download directory,
    or the folder the URL names inside it. Returns None when that folder does not exist.
    """
    if not ctx.github_url:
        return Path(DEFAULT_RUN_PATH)

    info = parse_github_url(ctx.github_url)
    source = GitHubArchiveSource(info, session=session)
    logger.info("Downloading repository from: %s", source.zip_url)
    extracted = source.fetch(Path(ctx.download_dir))
    logger.info("Repository downloaded and extracted to: %s", extracted)

    if info.folder_path is None:
        return extracted

    candidate = extracted / info.folder_path
    if not candidate.exists():
        logger.warning("Specified folder '%s' not found in the repository.", candidate)
        return None
    if not candidate.resolve().is_relative_to(extracted.resolve()):
        raise TraversalError(candidate, "resolves outside the extracted repository")
    return candidate


def run(ctx: Context, writer: Writer, *, session: Optional[requests.Session] = None) -> int:
    search_path = resolve_search_path(ctx, session=session)
    if search_path is None:
        return 0
    scanner = FileScanner(
        FileSystemSource(),
        HashFormatter(),
        extensions=ctx.extensions,
        ignored_dirs=ctx.ignored_dirs,
        print_contents=ctx.print_contents,
    )
    count = scanner.run(str(search_path), writer)
    logger.info("Matched %d file(s) under %s", count, search_path)
    return 0


def main(
    *,
    argv: list[str] | None = None,
    writer: Writer | None = None,
    session: Optional[requests.Session] = None,
) -> int:
    ctx: Context = parse_common_args(argv)
    setup_logging(ctx.verbose)
    if not ctx.extensions:
        logger.warning("No extensions given; nothing will match. Pass -e/--extensions.")
    try:
        return run(ctx, writer or StdoutWriter(), session=session)
    except FindFilesError as exc:
        logger.debug("Run aborted with %s", exc.kind.name, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
