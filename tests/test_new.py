import io
from pathlib import Path

import pytest

from doksnet.commands.new import find_documentation_files, handle
from doksnet.config import DoksConfig
from doksnet.errors import DoksError
from doksnet.prompts import Prompter


def make(text: str = "") -> tuple[Prompter, io.StringIO]:
    out = io.StringIO()
    return Prompter(io.StringIO(text), out), out


def test_file_discovery(tmp_path: Path):
    (tmp_path / "README.md").write_text("# Main readme")
    (tmp_path / "DOCS.md").write_text("# Documentation")
    (tmp_path / "guide.txt").write_text("Guide content")
    (tmp_path / "random.rs").write_text("// Code file")
    assert find_documentation_files(tmp_path) == ["README.md", "DOCS.md"]


def test_discovery_orders_readme_first_and_skips_directories(tmp_path: Path):
    for name in ("b.md", "a.md", "readme.rst", "README.md", "notes.txt"):
        (tmp_path / name).write_text("x")
    (tmp_path / "dir.md").mkdir()
    assert find_documentation_files(tmp_path) == ["README.md", "readme.rst", "a.md", "b.md"]


def test_discovery_missing_directory(tmp_path: Path):
    with pytest.raises(DoksError):
        find_documentation_files(tmp_path / "missing")


def test_new_creates_doks_file(tmp_path: Path):
    (tmp_path / "README.md").write_text("# Test README\nThis is a test.")
    prompter, out = make("0\n")
    created = handle(tmp_path, prompter)
    assert created == tmp_path / ".doks"
    assert "default_doc=README.md" in created.read_text()
    assert "Found documentation file: README.md" in out.getvalue()


def test_new_fails_when_doks_exists(tmp_path: Path):
    (tmp_path / ".doks").write_text("existing")
    prompter, _ = make()
    with pytest.raises(DoksError, match="A .doks file already exists"):
        handle(tmp_path, prompter)
    assert (tmp_path / ".doks").read_text() == "existing"


def test_new_selects_among_several(tmp_path: Path):
    (tmp_path / "README.md").write_text("# Readme")
    (tmp_path / "GUIDE.md").write_text("# Guide")
    prompter, _ = make("1\n")
    handle(tmp_path, prompter)
    assert DoksConfig.from_file(tmp_path / ".doks").default_doc == "GUIDE.md"


def test_new_asks_when_no_docs(tmp_path: Path):
    prompter, _ = make("docs.md\n")
    handle(tmp_path, prompter)
    assert DoksConfig.from_file(tmp_path / ".doks").default_doc == "docs.md"


def test_new_defaults_to_readme_when_no_docs(tmp_path: Path):
    prompter, _ = make("\n")
    handle(tmp_path, prompter)
    assert DoksConfig.from_file(tmp_path / ".doks").default_doc == "README.md"


def test_new_uses_cwd_by_default(tmp_path: Path, monkeypatch):
    (tmp_path / "README.md").write_text("# Readme")
    monkeypatch.chdir(tmp_path)
    prompter, _ = make()
    handle(prompter=prompter)
    assert DoksConfig.from_file(tmp_path / ".doks").default_doc == "README.md"