"""Temporary files and directories with fixed names, removed when dropped."""

from __future__ import annotations

import os
import shutil
import tempfile
import threading
import weakref
from pathlib import Path
from typing import Optional

_PREFIX = "rsassist-"


def tmpname() -> str:
    """A file name derived from the current thread's name."""
    return _PREFIX + threading.current_thread().name.replace("::", "-")


def _create_file(path: Path, src: str) -> None:
    with open(path, "xb") as fh:
        fh.write(src.encode("utf-8"))


class TmpFile:
    """A file holding ``src``, deleted on ``close`` or when garbage collected.

    With no ``name`` the file is named by :func:`tmpname`; with no
    ``directory`` it is created in the system temporary directory. The name
    is used exactly, and creation fails if the file already exists.
    """

    def __init__(
        self,
        src: str,
        name: Optional[str] = None,
        directory: Optional[os.PathLike | str] = None,
    ) -> None:
        base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
        self._path = base / (name if name is not None else tmpname())
        _create_file(self._path, src)
        self._finalizer = weakref.finalize(self, self._path.unlink, missing_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        """Delete the file."""
        self._finalizer()

    def __enter__(self) -> "TmpFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"TmpFile: {str(self._path)!r}"


class TmpDir:
    """A directory for test files.

    ``TmpDir()`` creates a fresh directory whose name starts with
    :func:`tmpname` and owns it; ``TmpDir(path)`` wraps an existing directory
    and never removes it.
    """

    def __init__(self, path: Optional[os.PathLike | str] = None) -> None:
        self._finalizer: Optional[weakref.finalize] = None
        if path is None:
            self._path = Path(tempfile.mkdtemp(prefix=tmpname()))
            self._own()
        else:
            self._path = Path(path)

    def _own(self) -> None:
        self._finalizer = weakref.finalize(
            self, shutil.rmtree, self._path, ignore_errors=True
        )

    @property
    def path(self) -> Path:
        return self._path

    def nested_dir(self, dir_name: str) -> "TmpDir":
        """A directory named ``dir_name`` inside this one, created if absent."""
        new_path = self._path / dir_name
        if new_path.exists():
            return TmpDir(new_path)
        new_path.mkdir()
        nested = TmpDir(new_path)
        nested._own()
        return nested

    def write_file(self, file_name: str, src: str) -> TmpFile:
        """Create ``file_name`` in this directory holding ``src``."""
        return TmpFile(src, name=file_name, directory=self._path)

    def cleanup(self) -> None:
        """Remove the directory if this object created it."""
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> "TmpDir":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"TmpDir: {str(self._path)!r}"


def get_pos_and_source(src: str) -> tuple[int, str]:
    """Split a marked snippet into the byte offset of ``~`` and the clean text."""
    index = src.find("~")
    if index == -1:
        raise ValueError("source has no '~' cursor marker")
    return len(src[:index].encode("utf-8")), src.replace("~", "")