from __future__ import annotations

import argparse
import textwrap
from dataclasses import dataclass, field

from findfiles.defaults import (
    DEFAULT_BRANCH,
    DEFAULT_DOWNLOAD_DIR,
    DEFAULT_EXTENSIONS,
    DEFAULT_IGNORED_DIRS,
    DEFAULT_PRINT_CONTENTS,
    DEFAULT_VERBOSITY,
)
from findfiles.types import TDirName, TExtension


@dataclass(slots=True)
class Context:
    github_url: str | None = None
    extensions: list[TExtension] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    ignored_dirs: list[TDirName] = field(default_factory=lambda: list(DEFAULT_IGNORED_DIRS))
    print_contents: bool = DEFAULT_PRINT_CONTENTS
    verbose: int = DEFAULT_VERBOSITY
    download_dir: str = DEFAULT_DOWNLOAD_DIR


def _version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("findfiles")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    epilog = textwrap.dedent(
        f"""
        GITHUB REPOSITORIES
        With -g,--github-url the repository is downloaded as a zip archive and extracted into --download-dir, which is kept after the run.
        A URL of the form https://github.com/<owner>/<repo>/tree/<branch>/<folder> restricts the search to <folder> on <branch>.
        Without a branch, '{DEFAULT_BRANCH}' is used.

        MATCHING
        Extensions are compared case-sensitively against the text after a file's last dot. 'py' and '.py' are equivalent.
        Ignored directories are matched by exact base name, so '-i build' prunes every directory named 'build' but not 'build-tools'.
        """
    )

    parser = argparse.ArgumentParser(
        prog="findfiles",
        description="Search for files by extension in the current directory or in a GitHub repository",
        add_help=True,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
    )
    parser.add_argument(
        "-g",
        "--github-url",
        type=str,
        default=None,
        help="GitHub URL to download and search.",
    )
    parser.add_argument(
        "-e",
        "--extensions",
        type=str,
        nargs="+",
        action="extend",
        default=None,
        help="File extensions to search for (repeatable).",
    )
    parser.add_argument(
        "-i",
        "--ignored-dirs",
        type=str,
        nargs="+",
        action="extend",
        default=None,
        help="Directory names to skip entirely (repeatable).",
    )
    parser.add_argument(
        "-p",
        "--print-contents",
        action="store_true",
        default=DEFAULT_PRINT_CONTENTS,
        help="Print the contents of each matched file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=DEFAULT_VERBOSITY,
        help="Increase output verbosity (-v for info, -vv for debug).",
    )
    parser.add_argument(
        "--download-dir",
        type=str,
        default=DEFAULT_DOWNLOAD_DIR,
        help=f"Where to extract a downloaded repository (default: {DEFAULT_DOWNLOAD_DIR}).",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def parse_common_args(argv: list[str] | None = None) -> Context:
    args = build_parser().parse_args(argv)
    return Context(
        github_url=args.github_url,
        extensions=list(args.extensions or DEFAULT_EXTENSIONS),
        ignored_dirs=list(args.ignored_dirs or DEFAULT_IGNORED_DIRS),
        print_contents=bool(args.print_contents),
        verbose=int(args.verbose),
        download_dir=args.download_dir,
    )
