"""
File I/O helpers: atomic replace and exclusive create.

All functions operate on explicit paths — no implicit directory lookups.
Both write to a temp file in the target directory first, so a reader
never observes a half-written file.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from ..exceptions import FileIOError


def _write_temp(directory: Path, content: bytes) -> str:
    fd, tmp_path = tempfile.mkstemp(dir=str(directory), suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    return tmp_path


def _default_mode() -> int:
    """Mode a plain ``open(path, "w")`` would create under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write(path: str | Path, content: str, encoding: str = "utf-8") -> Path:
    """Write ``content`` to ``path`` via temp file + rename, replacing any existing file.

    The result keeps the mode of the file it replaces, or gets the umask
    default for a new file (mkstemp alone would leave it at 0600).
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else _default_mode()
        tmp_path = _write_temp(path.parent, content.encode(encoding))
    except OSError as e:
        raise FileIOError(f"Cannot write {path}: {e}") from e
    try:
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)  # atomic on POSIX
    except OSError as e:
        os.unlink(tmp_path)
        raise FileIOError(f"Cannot write {path}: {e}") from e
    return path


def exclusive_create(path: str | Path, content: str, encoding: str = "utf-8") -> Path:
    """Create ``path`` with ``content``, failing if it already exists.

    The body is written to a temp file and then hard-linked into place;
    ``os.link`` refuses to overwrite, so two writers racing on the same
    name cannot clobber each other.

    Raises:
        FileExistsError: If ``path`` already exists.
        FileIOError: For any other I/O failure.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = _write_temp(path.parent, content.encode(encoding))
    except OSError as e:
        raise FileIOError(f"Cannot write {path}: {e}") from e
    try:
        os.link(tmp_path, path)
    except FileExistsError:
        raise
    except OSError as e:
        raise FileIOError(f"Cannot create {path}: {e}") from e
    finally:
        os.unlink(tmp_path)
    return path
