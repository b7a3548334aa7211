import io

import pytest

from doksnet.commands.interactive import check_partition_detailed, handle
from doksnet.config import DoksConfig, Mapping
from doksnet.errors import DoksError
from doksnet.hashing import hash_content
from doksnet.prompts import Prompter


def _prompter(answers: str) -> Prompter:
    return Prompter(io.StringIO(answers), io.StringIO())


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "README.md").write_text("# Title\nOriginal doc\nLine 3", encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.rs").write_text(
        'fn main() {\n    println!("Hello");\n}', encoding="utf-8"
    )
    config = DoksConfig("README.md")
    config.add_mapping(
        Mapping(
            id="mapping-one",
            doc_partition="README.md:2",
            code_partition="src/main.rs:2",
            doc_hash=hash_content("Original doc"),
            code_hash=hash_content('    println!("Hello");'),
            description="Test mapping",
        )
    )
    config.to_file(tmp_path / ".doks")
    return tmp_path


def _break_doc(root):
    (root / "README.md").write_text("# Title\nModified doc\nLine 3", encoding="utf-8")


def test_check_partition_detailed_passes(project):
    assert check_partition_detailed("README.md:2", hash_content("Original doc"), "documentation") is None


def test_check_partition_detailed_parse_error(project):
    message = check_partition_detailed("README.md:abc", "0" * 64, "code")
    assert message.startswith("Failed to parse code partition")


def test_check_partition_detailed_missing_file(project):
    message = check_partition_detailed("missing.md:1", "0" * 64, "documentation")
    assert message.startswith("Failed to extract documentation content")


def test_check_partition_detailed_changed(project):
    expected = hash_content("something else")
    message = check_partition_detailed("README.md:2", expected, "documentation")
    assert "documentation content has changed" in message
    assert expected[:8] in message
    assert hash_content("Original doc")[:8] in message


def test_no_doks_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(DoksError, match="No .doks file found"):
        handle(_prompter(""))


def test_empty_mappings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    DoksConfig("README.md").to_file(tmp_path / ".doks")
    prompter = _prompter("")
    assert handle(prompter) is False
    assert "No mappings found" in prompter.stdout.getvalue()


def test_all_pass(project):
    prompter = _prompter("")
    assert handle(prompter) is False
    output = prompter.stdout.getvalue()
    assert "✅ Passed: 1/1" in output
    assert "All mappings are up to date!" in output


def test_update_hashes(project):
    _break_doc(project)
    prompter = _prompter("0\n")
    assert handle(prompter) is True
    output = prompter.stdout.getvalue()
    assert "❌ Failed: 1/1" in output
    assert "--- Current content ---" in output
    assert "Updated documentation hash" in output
    saved = DoksConfig.from_file(project / ".doks")
    assert saved.mappings[0].doc_hash == hash_content("Modified doc")
    assert saved.mappings[0].code_hash == hash_content('    println!("Hello");')
    assert check_partition_detailed(
        saved.mappings[0].doc_partition, saved.mappings[0].doc_hash, "documentation"
    ) is None


def test_update_hashes_with_missing_code_file(project):
    (project / "src" / "main.rs").unlink()
    prompter = _prompter("0\n")
    assert handle(prompter) is True
    output = prompter.stdout.getvalue()
    assert "Could not extract current code content" in output
    assert "Updated code hash" not in output
    saved = DoksConfig.from_file(project / ".doks")
    assert saved.mappings[0].code_hash == hash_content('    println!("Hello");')


def test_edit_hint(project):
    _break_doc(project)
    prompter = _prompter("1\n")
    assert handle(prompter) is False
    assert "Use 'doksnet edit mapping-' to edit this mapping" in prompter.stdout.getvalue()


def test_remove_confirmed(project):
    _break_doc(project)
    prompter = _prompter("2\ny\n")
    assert handle(prompter) is True
    assert "Mapping removed" in prompter.stdout.getvalue()
    assert DoksConfig.from_file(project / ".doks").mappings == []


def test_remove_declined_by_default(project):
    _break_doc(project)
    before = (project / ".doks").read_text(encoding="utf-8")
    prompter = _prompter("2\n\n")
    assert handle(prompter) is False
    assert (project / ".doks").read_text(encoding="utf-8") == before


def test_skip(project):
    _break_doc(project)
    prompter = _prompter("3\n")
    assert handle(prompter) is False
    output = prompter.stdout.getvalue()
    assert "Skipped" in output
    assert "Interactive testing complete!" in output
    assert "Changes saved" not in output