"""Copies the template tree into a target project."""

from __future__ import annotations

import os
import stat as stat_module
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ccinit.filesystem import DryRunFileSystem, FileSystem, FileSystemError, OSFileSystem
from ccinit.logger import Logger, pluralize
from ccinit.templates import TemplateError, TemplateManager

if TYPE_CHECKING:
    from ccinit.cli import Config

TARGET_SUBDIR = ".claude"


class InitError(Exception):
    """Raised when initialization fails or completes with errors."""


@dataclass
class Statistics:
    """Counts of what an initialization run did."""

    files_created: int = 0
    files_skipped: int = 0
    dirs_created: int = 0
    dirs_skipped: int = 0
    errors: list[Exception] = field(default_factory=list)

    def total_created(self) -> int:
        return self.files_created + self.dirs_created

    def total_skipped(self) -> int:
        return self.files_skipped + self.dirs_skipped


class Engine:
    """Creates missing template files and directories below the target."""

    def __init__(
        self,
        config: Config,
        templates: TemplateManager | None = None,
        logger: Logger | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.config = config
        self.logger = logger if logger is not None else Logger(config.verbose, config.no_color)
        fs = filesystem if filesystem is not None else OSFileSystem()
        if config.dry_run and not isinstance(fs, DryRunFileSystem):
            fs = DryRunFileSystem(fs, self.logger)
        self.fs = fs
        self.templates = templates if templates is not None else TemplateManager()
        self.stats = Statistics()

    def run(self) -> Statistics:
        """Process every template; raise InitError on failure."""
        self.logger.debug(f"Starting cc-init with target directory: {self.config.target_dir}")

        if not self.templates.has_templates():
            raise InitError("no template files found in the .claude template directory")

        if self.config.verbose:
            try:
                names = self.templates.list_templates()
            except TemplateError:
                names = None
            if names is not None:
                self.logger.debug(f"Found {len(names)} template files")
                for name in names:
                    self.logger.debug(f"  - {name}")

        try:
            for rel_path, is_dir, error in self.templates.walk():
                if error is not None:
                    self.logger.error(f"Error accessing {rel_path}: {error}")
                    self.stats.errors.append(error)
                    continue
                target = os.path.join(
                    self.config.target_dir,
                    TARGET_SUBDIR,
                    *[part for part in rel_path.split("/") if part],
                )
                if is_dir:
                    self._process_directory(target)
                else:
                    self._process_file(rel_path, target)
        except (InitError, FileSystemError, TemplateError, OSError) as exc:
            raise InitError(f"failed to process templates: {exc}") from exc

        self.show_summary()

        if self.stats.errors:
            raise InitError(f"completed with {len(self.stats.errors)} errors")
        return self.stats

    def _stat_existing(self, target: str) -> os.stat_result:
        try:
            return self.fs.stat(target)
        except OSError as exc:
            raise InitError(f"failed to stat {target}: {exc}") from exc

    def _process_directory(self, target: str) -> None:
        self.logger.debug(f"Processing directory: {target}")

        if self.fs.exists(target):
            info = self._stat_existing(target)
            if not stat_module.S_ISDIR(info.st_mode):
                error = FileSystemError(f"path exists but is not a directory: {target}")
                self.stats.errors.append(error)
                raise error
            self.logger.dir_skipped(self.format_path(target))
            self.stats.dirs_skipped += 1
            return

        try:
            self.fs.create_dir(target, self.templates.dir_mode())
        except (FileSystemError, OSError) as exc:
            self.logger.error(f"Failed to create directory {target}: {exc}")
            self.stats.errors.append(exc)
            raise

        self.logger.dir_created(self.format_path(target))
        self.stats.dirs_created += 1

    def _process_file(self, rel_path: str, target: str) -> None:
        self.logger.debug(f"Processing file: {rel_path} -> {target}")

        if self.fs.exists(target):
            info = self._stat_existing(target)
            if stat_module.S_ISDIR(info.st_mode):
                error = FileSystemError(f"path exists but is a directory: {target}")
                self.stats.errors.append(error)
                raise error
            self.logger.file_skipped(self.format_path(target))
            self.stats.files_skipped += 1
            return

        try:
            content = self.templates.read_file(rel_path)
        except TemplateError as exc:
            self.logger.error(f"Failed to read template file {rel_path}: {exc}")
            self.stats.errors.append(exc)
            raise

        mode = self.templates.file_mode(rel_path)
        try:
            self.fs.create_file(target, content, mode)
        except (FileSystemError, OSError) as exc:
            self.logger.error(f"Failed to create file {target}: {exc}")
            self.stats.errors.append(exc)
            raise

        self.logger.file_created(self.format_path(target))
        self.stats.files_created += 1

    def format_path(self, path: str) -> str:
        """Return ``path`` relative to the target directory when it lies inside it."""
        try:
            rel = os.path.relpath(path, self.config.target_dir)
        except ValueError:
            return path
        if rel.startswith(".."):
            return path
        return rel

    @staticmethod
    def _describe(files: int, dirs: int) -> str:
        items = []
        if files > 0:
            items.append(f"{files} {pluralize('file', files)}")
        if dirs > 0:
            items.append(f"{dirs} {pluralize('directory', dirs)}")
        return " and ".join(items)

    def show_summary(self) -> None:
        stats = self.stats
        total_created = stats.total_created()
        total_skipped = stats.total_skipped()

        self.logger.stream.write("\n")

        if self.config.dry_run:
            self.logger.info("DRY RUN - No changes were made")
            self.logger.stream.write("\n")

        if total_created > 0:
            self.logger.success(
                f"Created {self._describe(stats.files_created, stats.dirs_created)}"
            )

        if total_skipped > 0:
            self.logger.info(
                f"Skipped {self._describe(stats.files_skipped, stats.dirs_skipped)} "
                "(already exist)"
            )

        if stats.errors:
            count = len(stats.errors)
            self.logger.error(
                f"Encountered {count} {pluralize('error', count)} during initialization"
            )
            if self.config.verbose:
                for error in stats.errors:
                    self.logger.error(f"  - {error}")

        if total_created == 0 and total_skipped > 0:
            self.logger.info("All Claude configuration files already exist")
        elif not stats.errors:
            self.logger.success("Claude configuration initialized successfully")