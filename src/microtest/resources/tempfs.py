# src/microtest/resources/tempfs.py
"""Scoped temporary files and directories.

A TempFile or TempDir creates its filesystem entry on construction and
removes it when its scope ends: on ``__exit__``, on an explicit
``cleanup()``, or at the latest when the handle is garbage collected
(``weakref.finalize``, the same mechanism tempfile.TemporaryDirectory
uses). Removal is best effort; errors are logged and dropped.

Usage:
    with TempDir() as workdir:
        (workdir.path / "data.bin").write_bytes(payload)
        run_under_test(workdir.path)
    # workdir.path no longer exists here, even if run_under_test raised

Handles are not copyable. ``transfer()`` moves ownership to a new handle
so exactly one owner removes the entry.
"""

from __future__ import annotations

import os
import shutil
import tempfile
import weakref
from pathlib import Path
from types import TracebackType
from typing import Self

from microtest.contracts.enums import ResourceKind
from microtest.contracts.errors import TempResourceError
from microtest.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PREFIX = "microtest-"


def _remove_entry(path: Path, kind: ResourceKind) -> None:
    """Remove a file or a directory tree, tolerating every OS error."""
    try:
        if kind is ResourceKind.DIRECTORY:
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        logger.debug("Temp resource already gone", path=str(path), kind=kind.value)
    except OSError as exc:
        logger.debug("Temp resource cleanup failed", path=str(path), kind=kind.value, error=str(exc))
    else:
        logger.debug("Temp resource removed", path=str(path), kind=kind.value)


class ScopedTempResource:
    """Exclusive owner of one temporary filesystem entry."""

    kind: ResourceKind

    def __init__(self, path: Path) -> None:
        self._path = path
        self._finalizer = weakref.finalize(self, _remove_entry, path, self.kind)

    @classmethod
    def _adopt(cls, path: Path) -> Self:
        instance = cls.__new__(cls)
        ScopedTempResource.__init__(instance, path)
        return instance

    @property
    def path(self) -> Path:
        """Absolute path of the entry."""
        return self._path

    @property
    def created(self) -> bool:
        """True while this handle still owns (and will remove) the entry."""
        return self._finalizer.alive

    def cleanup(self) -> None:
        """Remove the entry now. Idempotent; later calls do nothing."""
        self._finalizer()

    def transfer(self) -> Self:
        """Move ownership of the entry to a new handle.

        This handle stops owning the entry; its scope ending no longer
        removes anything.

        Raises:
            TempResourceError: If this handle no longer owns an entry.
        """
        if not self._finalizer.alive:
            raise TempResourceError(f"{self._path} is no longer owned by this handle")
        self._finalizer.detach()
        return type(self)._adopt(self._path)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    def __copy__(self) -> Self:
        raise TypeError(f"{type(self).__name__} cannot be copied; use transfer() to move ownership")

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        raise TypeError(f"{type(self).__name__} cannot be copied; use transfer() to move ownership")

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        state = "owned" if self.created else "released"
        return f"{type(self).__name__}({str(self._path)!r}, {state})"


class TempFile(ScopedTempResource):
    """Empty, uniquely named temporary file."""

    kind = ResourceKind.FILE

    def __init__(self, *, prefix: str = DEFAULT_PREFIX, suffix: str = "", root: Path | None = None) -> None:
        """Create the file.

        Raises:
            TempResourceError: If the file cannot be created.
        """
        try:
            fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=root)
        except OSError as exc:
            raise TempResourceError(f"Cannot create temp file in {root or tempfile.gettempdir()}: {exc}") from exc
        os.close(fd)
        super().__init__(Path(name).resolve())
        logger.debug("Temp resource created", path=name, kind=self.kind.value)


class TempDir(ScopedTempResource):
    """Empty, uniquely named temporary directory, removed recursively."""

    kind = ResourceKind.DIRECTORY

    def __init__(self, *, prefix: str = DEFAULT_PREFIX, suffix: str = "", root: Path | None = None) -> None:
        """Create the directory.

        Raises:
            TempResourceError: If the directory cannot be created.
        """
        try:
            name = tempfile.mkdtemp(prefix=prefix, suffix=suffix, dir=root)
        except OSError as exc:
            raise TempResourceError(f"Cannot create temp directory in {root or tempfile.gettempdir()}: {exc}") from exc
        super().__init__(Path(name).resolve())
        logger.debug("Temp resource created", path=name, kind=self.kind.value)


def make_tmpfile(*, suffix: str = "", root: Path | None = None) -> TempFile:
    """Create a scoped temporary file."""
    return TempFile(suffix=suffix, root=root)


def make_tmpdir(*, suffix: str = "", root: Path | None = None) -> TempDir:
    """Create a scoped temporary directory."""
    return TempDir(suffix=suffix, root=root)
