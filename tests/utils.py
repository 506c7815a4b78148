from __future__ import annotations

import io
import zipfile
from pathlib import Path
from unittest.mock import MagicMock


def write_text_file(path: Path, content: str) -> None:
    """Create parents and write UTF-8 text to a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_bytes_file(path: Path, content: bytes) -> None:
    """Create parents and write raw bytes to a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


def zip_bytes(entries: dict[str, bytes | None]) -> bytes:
    """Build an in-memory zip. A None value makes the entry a directory."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, data in entries.items():
            if data is None:
                zf.writestr(zipfile.ZipInfo(name), b"")
            else:
                zf.writestr(name, data)
    return buf.getvalue()


def fake_response(status_code: int = 200, content: bytes = b"", headers: dict | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = headers or {}
    resp.iter_content.side_effect = lambda chunk_size=1: iter(
        [content[i : i + chunk_size] for i in range(0, len(content), chunk_size)]
    )
    return resp


def fake_session(*responses: MagicMock) -> MagicMock:
    """A requests.Session stand-in whose get() returns the given responses in order."""
    session = MagicMock()
    session.get.side_effect = list(responses)
    return session
