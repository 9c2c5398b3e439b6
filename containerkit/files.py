"""Packing files and directories into gzip-compressed tar archives."""

from __future__ import annotations

import io
import os
import stat
import tarfile
from collections.abc import Iterator


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` is a directory.

    Raises ``OSError`` (for example ``FileNotFoundError``) when the path
    cannot be examined.
    """
    return stat.S_ISDIR(os.stat(path).st_mode)


def _walk(path: str) -> Iterator[str]:
    """Yield ``path`` and everything below it in lexical order, depth first."""
    yield path
    if os.path.isdir(path) and not os.path.islink(path):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def tar_dir(src: str | os.PathLike[str], file_mode: int) -> bytes:
    """Pack a directory into a gzip-compressed tar archive.

    Entry names are kept relative to the parent of ``src``, so the archive
    holds the directory itself as its top-level entry. Symbolic links are
    skipped and every entry gets ``file_mode`` as its permission bits.
    """
    src = os.path.abspath(os.fspath(src))
    print(f">> creating TAR file from directory: {src}")

    base_dir = os.path.basename(src)
    index = src.rfind(base_dir)

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        for path in _walk(src):
            if os.path.islink(path):
                print(f">> skipping symlink: {path}")
                continue

            arcname = path[index:].replace(os.sep, "/")
            info = archive.gettarinfo(path, arcname=arcname)
            info.mode = file_mode

            if info.isreg():
                with open(path, "rb") as data:
                    archive.addfile(info, data)
            else:
                archive.addfile(info)

    return buffer.getvalue()


def tar_file(file_content: bytes, base_path: str, file_mode: int) -> bytes:
    """Pack a single file's content into a gzip-compressed tar archive.

    The entry is named after the last element of ``base_path``.
    """
    info = tarfile.TarInfo(name=os.path.basename(base_path))
    info.mode = file_mode
    info.size = len(file_content)

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
        archive.addfile(info, io.BytesIO(file_content))

    return buffer.getvalue()