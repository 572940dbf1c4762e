"""Scoped temporary filesystem resources."""

from microtest.resources.tempfs import (
    ScopedTempResource,
    TempDir,
    TempFile,
    make_tmpdir,
    make_tmpfile,
)

__all__ = [
    "ScopedTempResource",
    "TempDir",
    "TempFile",
    "make_tmpdir",
    "make_tmpfile",
]
