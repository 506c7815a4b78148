from __future__ import annotations

import logging
import shutil
import tempfile
import time
import zipfile
from contextlib import suppress
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Iterable, Optional

import requests

from ..defaults import (
    ARCHIVE_FILENAME,
    DEFAULT_BRANCH,
    DOWNLOAD_CHUNK_SIZE,
    MAX_WAIT_SECONDS,
    REQUEST_TIMEOUT,
)
from ..errors import ArchiveError, DownloadError, IoError
from ..types import GithubInfo
from ..util import build_zip_url

logger = logging.getLogger(__name__)


def _parse_rate_limit_wait_seconds(resp: requests.Response) -> Optional[int]:
    ra = resp.headers.get("Retry-After")
    if ra:
        with suppress(ValueError, OverflowError):
            return max(0, int(float(ra)))
    reset = resp.headers.get("X-RateLimit-Reset")
    if reset:
        with suppress(ValueError, OverflowError):
            reset_ts = int(float(reset))
            now = int(time.time())
            return max(0, reset_ts - now)
    return None


def _get(session: requests.Session, url: str, *, stream: bool = False) -> requests.Response:
    for attempt in range(2):
        try:
            resp = session.get(url, stream=stream, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            raise DownloadError(url, str(exc)) from exc
        wait = None
        if resp.status_code in (403, 429):
            wait = _parse_rate_limit_wait_seconds(resp)
        if wait is not None and wait > MAX_WAIT_SECONDS:
            resp.close()
            raise DownloadError(
                url,
                f"rate limit wait {wait}s exceeds {MAX_WAIT_SECONDS}s",
                status_code=resp.status_code,
            )
        if wait is not None and attempt == 0:
            resp.close()
            logger.warning("Rate limited by GitHub, retrying %s in %ss", url, wait)
            time.sleep(wait)
            continue
        break
    if not 200 <= resp.status_code < 300:
        resp.close()
        raise DownloadError(url, f"HTTP {resp.status_code}", status_code=resp.status_code)
    return resp


def download_file(session: requests.Session, url: str, dest: Path) -> Path:
    resp = _get(session, url, stream=True)
    written = 0
    try:
        with resp, dest.open("wb") as f:
            for chunk in resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                f.write(chunk)
                written += len(chunk)
    except requests.RequestException as exc:
        raise DownloadError(url, str(exc)) from exc
    except OSError as exc:
        raise IoError(dest, exc.strerror or str(exc)) from exc
    logger.debug("Downloaded %d bytes from %s to %s", written, url, dest)
    return dest


def _member_parts(name: str) -> tuple[str, ...]:
    """
    Return the normalized path parts of an archive member name.

    Raises ArchiveError for absolute names, drive-qualified names, and names
    whose '..' components climb above the extraction directory.
    """
    posix_name = name.replace("\\", "/")
    if PurePosixPath(posix_name).is_absolute() or PureWindowsPath(name).drive:
        msg = f"Refusing to extract absolute archive entry {name!r}"
        raise ArchiveError(msg)
    parts: list[str] = []
    for part in posix_name.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if not parts:
                msg = f"Refusing to extract archive entry {name!r} outside the target directory"
                raise ArchiveError(msg)
            parts.pop()
            continue
        parts.append(part)
    return tuple(parts)


def top_level_dir(names: Iterable[str]) -> Optional[str]:
    """
    Return the one directory every archive member sits under, or None.

    GitHub wraps its archives in a folder named after the repository's canonical
    name and the ref, e.g. 'Widgets-main' or 'widgets-1.0' for tag 'v1.0'.
    """
    tops: set[str] = set()
    nested = False
    for name in names:
        parts = _member_parts(name)
        if not parts:
            continue
        tops.add(parts[0])
        nested = nested or len(parts) > 1 or name.endswith("/")
    if len(tops) == 1 and nested:
        return tops.pop()
    return None


def _extract(zip_path: Path, target_folder: Path) -> Optional[str]:
    try:
        archive = zipfile.ZipFile(zip_path)
    except zipfile.BadZipFile as exc:
        msg = f"Downloaded file is not a valid zip archive: {exc}"
        raise ArchiveError(msg) from exc
    except OSError as exc:
        raise IoError(zip_path, exc.strerror or str(exc)) from exc

    with archive:
        try:
            target_folder.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise IoError(target_folder, exc.strerror or str(exc)) from exc

        for info in archive.infolist():
            parts = _member_parts(info.filename)
            outpath = target_folder.joinpath(*parts)
            try:
                if info.filename.endswith("/"):
                    outpath.mkdir(parents=True, exist_ok=True)
                    continue
                if not parts:
                    continue
                outpath.parent.mkdir(parents=True, exist_ok=True)
                with archive.open(info) as src, outpath.open("wb") as dst:
                    shutil.copyfileobj(src, dst)
            except zipfile.BadZipFile as exc:
                msg = f"Corrupt archive entry {info.filename!r}: {exc}"
                raise ArchiveError(msg) from exc
            except OSError as exc:
                raise IoError(outpath, exc.strerror or str(exc)) from exc
        return top_level_dir(archive.namelist())


def extract_archive(zip_path: Path, target_folder: Path) -> Path:
    _extract(zip_path, target_folder)
    return target_folder


def _download_and_extract(session: requests.Session, zip_url: str, target_folder: Path) -> Optional[str]:
    with tempfile.TemporaryDirectory(prefix="findfiles-") as tmp:
        zip_path = Path(tmp) / ARCHIVE_FILENAME
        download_file(session, zip_url, zip_path)
        return _extract(zip_path, target_folder)


def download_and_extract(
    zip_url: str, target_folder: Path, *, session: Optional[requests.Session] = None
) -> Path:
    """
    Download the zip at `zip_url` and extract it under `target_folder`.

    The archive is staged in a temporary directory which is removed on exit,
    whether or not extraction succeeded. The extracted tree is left in place.
    """
    _download_and_extract(session or requests.Session(), zip_url, target_folder)
    return target_folder


class GitHubArchiveSource:
    def __init__(self, info: GithubInfo, session: Optional[requests.Session] = None) -> None:
        self.info = info
        self.branch = info.branch_name or DEFAULT_BRANCH
        self._session = session or requests.Session()

    @property
    def zip_url(self) -> str:
        return build_zip_url(self.info.repo_url, self.branch)

    def fetch(self, target_folder: Path) -> Path:
        """Download and extract into `target_folder`; return the archive's own top folder inside it."""
        top = _download_and_extract(self._session, self.zip_url, target_folder)
        return target_folder / top if top else target_folder
