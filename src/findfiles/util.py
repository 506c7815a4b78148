from __future__ import annotations

import posixpath
from urllib.parse import urlparse

from .defaults import GITHUB_BASE_URL, GITHUB_HOST, TREE_SEGMENT
from .errors import InvalidUrlError
from .types import GithubInfo


def parse_github_url(url: str) -> GithubInfo:
    """
    Split a GitHub web URL into the repository URL, branch and in-repo folder.

    Examples:
    - https://github.com/<owner>/<repo>                       -> no branch, no folder
    - https://github.com/<owner>/<repo>/tree/<branch>         -> branch, no folder
    - https://github.com/<owner>/<repo>/tree/<branch>/a/b     -> branch, folder 'a/b'

    Anything after <repo> that is not 'tree/<branch>' is ignored. Dot segments are
    resolved first, so '/octo/widgets/tree/main/../../x' reads as '/octo/widgets/x'.
    """
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except ValueError as exc:
        raise InvalidUrlError(url, str(exc)) from exc
    if not parsed.scheme or not parsed.netloc:
        raise InvalidUrlError(url, "not a well-formed URL")
    if hostname != GITHUB_HOST:
        raise InvalidUrlError(url, f"host is {hostname!r}, expected {GITHUB_HOST!r}")

    # Resolve "." and ".." the way a browser would before reading owner/repo/tree/branch
    path = posixpath.normpath(parsed.path) if parsed.path else ""
    segments = path.removeprefix("/").split("/")
    if len(segments) < 2 or not segments[0] or not segments[1]:
        raise InvalidUrlError(url, "URL doesn't contain a valid repository path")

    owner = segments[0]
    repo = segments[1].removesuffix(".git")
    if not repo:
        raise InvalidUrlError(url, "URL doesn't contain a valid repository path")
    repo_url = f"{GITHUB_BASE_URL}/{owner}/{repo}"

    branch_name: str | None = None
    folder_path: str | None = None
    if len(segments) >= 4 and segments[2] == TREE_SEGMENT and segments[3]:
        branch_name = segments[3]
        rest = [s for s in segments[4:] if s]
        if rest:
            folder_path = "/".join(rest)

    return GithubInfo(repo_url=repo_url, branch_name=branch_name, folder_path=folder_path)


def build_zip_url(repo_url: str, branch: str) -> str:
    return f"{repo_url}/archive/{branch}.zip"
