"""File system operations, real and simulated."""

from __future__ import annotations

import abc
import os
import stat as stat_module
from collections.abc import Iterator

from ccinit.logger import Logger

PathArg = "str | os.PathLike[str]"


class FileSystemError(Exception):
    """Raised when a path cannot be created as requested."""


def _format_mode(mode: int) -> str:
    return "-" + stat_module.filemode(mode & 0o7777)[1:]


class FileSystem(abc.ABC):
    """Operations the initializer needs from a file system."""

    @abc.abstractmethod
    def exists(self, path) -> bool:
        """Return True if ``path`` exists."""

    @abc.abstractmethod
    def create_dir(self, path, mode: int) -> None:
        """Create ``path`` and its parents unless it already is a directory."""

    @abc.abstractmethod
    def create_file(self, path, content: bytes, mode: int) -> None:
        """Create ``path`` with ``content`` unless it already exists."""

    @abc.abstractmethod
    def walk(self, root) -> Iterator[tuple[str, os.stat_result]]:
        """Yield ``(path, info)`` for ``root`` and everything below it."""

    @abc.abstractmethod
    def stat(self, path) -> os.stat_result:
        """Return file information for ``path``; raise OSError if absent."""


class OSFileSystem(FileSystem):
    """The real operating-system file system."""

    def exists(self, path) -> bool:
        try:
            os.stat(path)
        except (OSError, ValueError):
            return False
        return True

    def create_dir(self, path, mode: int) -> None:
        path = os.fspath(path)
        if self.exists(path):
            if not stat_module.S_ISDIR(self.stat(path).st_mode):
                raise FileSystemError(f"path exists but is not a directory: {path}")
            return
        os.makedirs(path, mode, exist_ok=True)

    def create_file(self, path, content: bytes, mode: int) -> None:
        path = os.fspath(path)
        if self.exists(path):
            if stat_module.S_ISDIR(self.stat(path).st_mode):
                raise FileSystemError(f"path exists but is a directory: {path}")
            return
        parent = os.path.dirname(path) or "."
        try:
            self.create_dir(parent, 0o755)
        except (FileSystemError, OSError) as exc:
            raise FileSystemError(f"failed to create parent directory: {exc}") from exc
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)

    def walk(self, root) -> Iterator[tuple[str, os.stat_result]]:
        root = os.fspath(root)
        try:
            info = os.lstat(root)
        except OSError as exc:
            raise FileSystemError(f"failed to stat {root}: {exc}") from exc
        yield from self._walk(root, info)

    def _walk(self, path: str, info: os.stat_result) -> Iterator[tuple[str, os.stat_result]]:
        yield path, info
        if not stat_module.S_ISDIR(info.st_mode):
            return
        try:
            names = sorted(os.listdir(path))
        except OSError as exc:
            raise FileSystemError(f"failed to read directory {path}: {exc}") from exc
        for name in names:
            child = os.path.join(path, name)
            try:
                child_info = os.lstat(child)
            except OSError as exc:
                raise FileSystemError(f"failed to stat {child}: {exc}") from exc
            yield from self._walk(child, child_info)

    def stat(self, path) -> os.stat_result:
        return os.stat(path)


class DryRunFileSystem(FileSystem):
    """Reports what would be created without changing anything."""

    def __init__(self, wrapped: FileSystem, logger: Logger) -> None:
        self.wrapped = wrapped
        self.logger = logger

    def exists(self, path) -> bool:
        return self.wrapped.exists(path)

    def create_dir(self, path, mode: int) -> None:
        path = os.fspath(path)
        if self.exists(path):
            if not stat_module.S_ISDIR(self.wrapped.stat(path).st_mode):
                raise FileSystemError(f"path exists but is not a directory: {path}")
            self.logger.info(f"Would skip existing directory: {path}")
            return
        self.logger.info(f"Would create directory: {path} (mode: {_format_mode(mode)})")

    def create_file(self, path, content: bytes, mode: int) -> None:
        path = os.fspath(path)
        if self.exists(path):
            if stat_module.S_ISDIR(self.wrapped.stat(path).st_mode):
                raise FileSystemError(f"path exists but is a directory: {path}")
            self.logger.info(f"Would skip existing file: {path}")
            return
        self.logger.info(
            f"Would create file: {path} (mode: {_format_mode(mode)}, "
            f"size: {len(content)} bytes)"
        )

    def walk(self, root) -> Iterator[tuple[str, os.stat_result]]:
        return self.wrapped.walk(root)

    def stat(self, path) -> os.stat_result:
        return self.wrapped.stat(path)