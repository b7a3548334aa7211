import io
import uuid
from pathlib import Path

import pytest

from doksnet.commands.add import handle
from doksnet.config import DoksConfig
from doksnet.errors import DoksError
from doksnet.hashing import hash_content, verify_hash
from doksnet.partition import Partition
from doksnet.prompts import Prompter


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "README.md").write_text("# Test\nLine 2\nLine 3\nLine 4")
    src = tmp_path / "src"
    src.mkdir()
    (src / "main.rs").write_text('fn main() {\n    println!("Hello");\n}')
    DoksConfig("README.md").to_file(tmp_path / ".doks")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make(text: str) -> tuple[Prompter, io.StringIO]:
    out = io.StringIO()
    return Prompter(io.StringIO(text), out), out


def test_add_saves_mapping(project: Path):
    prompter, out = make("README.md:2-3\ny\nsrc/main.rs:1-2\ny\n  my mapping  \n")
    mapping = handle(prompter)
    config = DoksConfig.from_file(project / ".doks")
    assert config.mappings == [mapping]
    saved = config.mappings[0]
    assert saved.doc_partition == "README.md:2-3"
    assert saved.code_partition == "src/main.rs:1-2"
    assert saved.description == "my mapping"
    assert verify_hash(Partition.parse("README.md:2-3").extract_content(), saved.doc_hash)
    assert saved.code_hash == hash_content(
        Partition.parse("src/main.rs:1-2").extract_content()
    )
    assert uuid.UUID(saved.id).version == 4
    assert "Line 2\nLine 3" in out.getvalue()


def test_add_empty_answers(project: Path):
    prompter, _ = make("\n\nsrc/main.rs\n\n\n")
    mapping = handle(prompter)
    assert mapping.doc_partition == "README.md:"
    assert mapping.description is None
    assert verify_hash((project / "README.md").read_text(), mapping.doc_hash)


def test_add_cancel_documentation(project: Path):
    prompter, out = make("README.md:1\nn\n")
    assert handle(prompter) is None
    assert DoksConfig.from_file(project / ".doks").mappings == []
    assert "Documentation selection cancelled" in out.getvalue()


def test_add_cancel_code(project: Path):
    prompter, out = make("README.md:1\ny\nsrc/main.rs:1\nn\n")
    assert handle(prompter) is None
    assert DoksConfig.from_file(project / ".doks").mappings == []
    assert "Code selection cancelled" in out.getvalue()


def test_add_missing_file(project: Path):
    prompter, _ = make("missing.md:1\n")
    with pytest.raises(DoksError, match="Failed to extract documentation content"):
        handle(prompter)


def test_add_bad_code_range(project: Path):
    prompter, _ = make("README.md:1\ny\nsrc/main.rs:1-99\n")
    with pytest.raises(DoksError, match="Failed to extract code content"):
        handle(prompter)


def test_add_without_doks(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    prompter, _ = make("")
    with pytest.raises(DoksError, match="No .doks file found"):
        handle(prompter)