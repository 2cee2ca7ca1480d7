"""Access to the bundled template tree."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

EXECUTABLE_SUFFIXES = (".sh", ".bash")
DEFAULT_FILE_MODE = 0o644
EXECUTABLE_FILE_MODE = 0o755
DEFAULT_DIR_MODE = 0o755


class TemplateError(Exception):
    """Raised when a template cannot be read or listed."""


def default_template_root() -> Path:
    """Return the directory holding the bundled ``.claude`` templates."""
    return Path(__file__).resolve().parent / "data" / ".claude"


class TemplateManager:
    """Reads template files below a root directory."""

    def __init__(self, root: str | os.PathLike[str] | None = None) -> None:
        self.root = Path(root) if root is not None else default_template_root()

    def walk(self) -> Iterator[tuple[str, bool, TemplateError | None]]:
        """Yield ``(relative_path, is_dir, error)`` in lexical pre-order.

        The root itself is not yielded. Paths use forward slashes. An
        unreadable root or directory yields an entry whose error is set.
        """
        try:
            names = sorted(os.listdir(self.root))
        except OSError as exc:
            yield str(self.root), False, TemplateError(
                f"failed to read template directory {self.root}: {exc}"
            )
            return
        yield from self._walk_children(self.root, "", names)

    def _walk_children(
        self, directory: Path, rel_dir: str, names: list[str]
    ) -> Iterator[tuple[str, bool, TemplateError | None]]:
        for name in names:
            full = directory / name
            rel = f"{rel_dir}/{name}" if rel_dir else name
            is_dir = full.is_dir() and not full.is_symlink()
            yield rel, is_dir, None
            if not is_dir:
                continue
            try:
                children = sorted(os.listdir(full))
            except OSError as exc:
                yield rel, True, TemplateError(
                    f"failed to read template directory {full}: {exc}"
                )
                continue
            yield from self._walk_children(full, rel, children)

    def _full_path(self, rel_path: str) -> Path:
        return self.root.joinpath(*[part for part in rel_path.split("/") if part])

    def read_file(self, rel_path: str) -> bytes:
        full = self._full_path(rel_path)
        try:
            return full.read_bytes()
        except OSError as exc:
            raise TemplateError(f"failed to read template file {full}: {exc}") from exc

    def file_info(self, rel_path: str) -> os.stat_result:
        full = self._full_path(rel_path)
        try:
            return full.stat()
        except OSError as exc:
            raise TemplateError(f"failed to stat template file {full}: {exc}") from exc

    def has_templates(self) -> bool:
        try:
            with os.scandir(self.root) as entries:
                return any(True for _ in entries)
        except OSError:
            return False

    def list_templates(self) -> list[str]:
        """Return the relative paths of all template files."""
        templates = []
        for rel, is_dir, error in self.walk():
            if error is not None:
                raise TemplateError(f"failed to list templates: {error}") from error
            if not is_dir:
                templates.append(rel)
        return templates

    def file_mode(self, rel_path: str) -> int:
        if rel_path.endswith(EXECUTABLE_SUFFIXES):
            return EXECUTABLE_FILE_MODE
        return DEFAULT_FILE_MODE

    def dir_mode(self) -> int:
        return DEFAULT_DIR_MODE