"""Locate the source tree of the Rust standard library."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)

DEFAULT_PATHS = ("/usr/local/src/rust/src", "/usr/src/rust/src")


class RustSrcPathError(Exception):
    """The standard library source path could not be determined."""

    path: Optional[Path] = None


class MissingSrcPath(RustSrcPathError):
    """No source path was configured and none could be found."""

    def __init__(self) -> None:
        super().__init__(
            "RUST_SRC_PATH environment variable must be set to point to the src "
            "directory of a rust checkout. E.g. \"/home/foouser/src/rust/library\"  "
            "(or  \"/home/foouser/src/rust/src\" in older toolchains)"
        )


class SrcPathDoesNotExist(RustSrcPathError):
    """The configured source path does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(
            "can't find the directory pointed to by the RUST_SRC_PATH variable "
            f"\"{str(self.path)!r}\". Try using an absolute fully qualified path "
            "and make sure it points to the src directory of a rust checkout - "
            "e.g. \"/home/foouser/src/rust/library\" (or  "
            "\"/home/foouser/src/rust/src\" in older toolchains)."
        )


class NotRustSourceTree(RustSrcPathError):
    """The configured path exists but holds no standard library sources."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(
            "Unable to find libstd under RUST_SRC_PATH. N.B. RUST_SRC_PATH variable "
            "needs to point to the *src* directory inside a rust checkout e.g. "
            "\"/home/foouser/src/rust/library\" (or  \"/home/foouser/src/rust/src\" "
            f"in older toolchains). Current value \"{str(self.path)!r}\""
        )


def check_rust_sysroot() -> Optional[Path]:
    """Ask ``rustc`` for its sysroot and return the library sources under it."""
    try:
        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    sysroot = Path(text.strip())
    for relative in ("lib/rustlib/src/rust/library", "lib/rustlib/src/rust/src"):
        candidate = sysroot / relative
        if candidate.exists():
            return candidate
    return None


def validate_rust_src_path(path: os.PathLike | str) -> Path:
    """Return ``path`` if it is a standard library source tree, else raise."""
    path = Path(path)
    if not path.exists():
        raise SrcPathDoesNotExist(path)
    if (path / "libstd").exists() or (path / "std" / "src").exists():
        return path
    raise NotRustSourceTree(path / "libstd")


def get_rust_src_path() -> Path:
    """Find the standard library sources.

    ``RUST_SRC_PATH`` is consulted first, then the ``rustc`` sysroot, then a
    couple of conventional install locations.
    """
    log.debug("Getting rust source path. Trying env var RUST_SRC_PATH.")
    srcpaths = os.environ.get("RUST_SRC_PATH", "")
    if srcpaths:
        first = srcpaths.split(os.pathsep)[0]
        if not first:
            raise SrcPathDoesNotExist(Path(first))
        return validate_rust_src_path(Path(first))

    log.debug("Trying rustc --print sysroot.")
    sysroot_path = check_rust_sysroot()
    if sysroot_path is not None:
        return validate_rust_src_path(sysroot_path)

    log.debug("Trying default paths: %s", ", ".join(DEFAULT_PATHS))
    for candidate in DEFAULT_PATHS:
        try:
            return validate_rust_src_path(Path(candidate))
        except RustSrcPathError:
            continue

    log.warning("Rust stdlib source path not found!")
    raise MissingSrcPath()