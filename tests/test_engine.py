import io
import os
import stat

import pytest

from ccinit.cli import Config
from ccinit.engine import Engine, InitError, Statistics
from ccinit.logger import Logger
from ccinit.templates import TemplateManager


@pytest.fixture
def template_root(tmp_path):
    root = tmp_path / "tpl"
    (root / "commands").mkdir(parents=True)
    (root / "hooks").mkdir()
    (root / "settings.json").write_text('{"a": 1}')
    (root / "commands" / "hello.md").write_text("hello")
    (root / "hooks" / "run.sh").write_text("#!/bin/sh\n")
    return root


@pytest.fixture
def target(tmp_path):
    path = tmp_path / "proj"
    path.mkdir()
    return path


def make_engine(target, template_root, dry_run=False, verbose=False):
    out = io.StringIO()
    err = io.StringIO()
    config = Config(target_dir=str(target), dry_run=dry_run, verbose=verbose, no_color=True)
    logger = Logger(verbose=verbose, no_color=True, stream=out, error_stream=err)
    engine = Engine(config, TemplateManager(template_root), logger)
    return engine, out, err


def test_run_creates_files_and_directories(target, template_root):
    engine, out, _ = make_engine(target, template_root)
    stats = engine.run()
    claude = target / ".claude"
    assert (claude / "settings.json").read_text() == '{"a": 1}'
    assert (claude / "commands" / "hello.md").read_text() == "hello"
    assert (claude / "hooks" / "run.sh").read_text() == "#!/bin/sh\n"
    assert stats.files_created == 3
    assert stats.dirs_created == 2
    assert stats.errors == []
    assert "Claude configuration initialized successfully" in out.getvalue()


def test_shell_script_is_executable(target, template_root):
    engine, _, _ = make_engine(target, template_root)
    stats = engine.run()
    assert stats.files_created == 3
    script_mode = stat.S_IMODE(os.stat(target / ".claude" / "hooks" / "run.sh").st_mode)
    plain_mode = stat.S_IMODE(os.stat(target / ".claude" / "settings.json").st_mode)
    assert script_mode & 0o100 == 0o100
    assert plain_mode & 0o111 == 0


def test_second_run_skips_everything(target, template_root):
    make_engine(target, template_root)[0].run()
    engine, out, _ = make_engine(target, template_root)
    stats = engine.run()
    assert stats.total_created() == 0
    assert stats.files_skipped == 3
    assert stats.dirs_skipped == 2
    assert "All Claude configuration files already exist" in out.getvalue()


def test_existing_file_is_not_overwritten(target, template_root):
    claude = target / ".claude"
    claude.mkdir()
    (claude / "settings.json").write_text("mine")
    engine, _, _ = make_engine(target, template_root)
    stats = engine.run()
    assert (claude / "settings.json").read_text() == "mine"
    assert stats.files_skipped == 1
    assert stats.files_created == 2


def test_dry_run_changes_nothing(target, template_root):
    engine, out, _ = make_engine(target, template_root, dry_run=True)
    stats = engine.run()
    assert not (target / ".claude").exists()
    text = out.getvalue()
    assert "DRY RUN - No changes were made" in text
    assert "Would create file" in text
    assert stats.files_created == 3


def test_empty_template_root_raises(tmp_path, target):
    empty = tmp_path / "empty"
    empty.mkdir()
    engine, _, _ = make_engine(target, empty)
    with pytest.raises(InitError, match="no template files found"):
        engine.run()


def test_directory_in_place_of_file_aborts(target, template_root):
    (target / ".claude" / "settings.json").mkdir(parents=True)
    engine, _, _ = make_engine(target, template_root)
    with pytest.raises(InitError, match="failed to process templates"):
        engine.run()
    assert len(engine.stats.errors) == 1


def test_file_in_place_of_directory_aborts(target, template_root):
    claude = target / ".claude"
    claude.mkdir()
    (claude / "commands").write_text("not a dir")
    engine, _, _ = make_engine(target, template_root)
    with pytest.raises(InitError, match="not a directory"):
        engine.run()


def test_format_path_inside_and_outside(target, template_root, tmp_path):
    engine, _, _ = make_engine(target, template_root)
    inside = os.path.join(str(target), ".claude", "x.md")
    assert engine.format_path(inside) == os.path.join(".claude", "x.md")
    outside = str(tmp_path / "elsewhere")
    assert engine.format_path(outside) == outside


def test_summary_lists_counts(target, template_root):
    engine, out, _ = make_engine(target, template_root)
    engine.run()
    assert "Created 3 files and 2 directories" in out.getvalue()


def test_verbose_lists_templates(target, template_root):
    engine, out, _ = make_engine(target, template_root, verbose=True)
    engine.run()
    text = out.getvalue()
    assert "[DEBUG] Found 3 template files" in text
    assert "[DEBUG]   - commands/hello.md" in text


def test_statistics_totals():
    stats = Statistics(files_created=2, dirs_created=1, files_skipped=4, dirs_skipped=3)
    assert stats.total_created() == 3
    assert stats.total_skipped() == 7