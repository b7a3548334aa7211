"""The ``test-interactive`` command: verify mappings and repair the failing ones."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TextIO

from doksnet.commands.common import extract_content_if_possible, load_project, preview
from doksnet.config import DoksConfig, Mapping
from doksnet.errors import DoksError
from doksnet.hashing import hash_content, verify_hash
from doksnet.partition import Partition
from doksnet.prompts import Prompter

_ACTIONS = (
    "Update hashes (accept current content)",
    "Edit this mapping",
    "Remove this mapping",
    "Skip (leave as-is)",
)

_PREVIEW_LIMIT = 300


@dataclass(frozen=True)
class _Failure:
    mapping: Mapping
    doc_error: str | None
    code_error: str | None


def check_partition_detailed(
    partition_str: str, expected_hash: str, content_type: str
) -> str | None:
    """Return a description of why the partition fails, or None when it matches."""
    try:
        partition = Partition.parse(partition_str)
    except DoksError as exc:
        return f"Failed to parse {content_type} partition: {exc}"
    try:
        content = partition.extract_content()
    except DoksError as exc:
        return f"Failed to extract {content_type} content: {exc}"
    if not verify_hash(content, expected_hash):
        current_hash = hash_content(content)
        return (
            f"{content_type} content has changed "
            f"(expected: {expected_hash[:8]}..., actual: {current_hash[:8]}...)"
        )
    return None


def _show_side(partition_str: str, heading: str, noun: str, out: TextIO) -> None:
    print(f"\n{heading}", file=out)
    content = extract_content_if_possible(partition_str)
    if content is None:
        print(f"⚠️  Could not extract current {noun} content", file=out)
        return
    print("--- Current content ---", file=out)
    print(preview(content, _PREVIEW_LIMIT), file=out)


def _show_changes(failure: _Failure, out: TextIO) -> None:
    print("\n📋 Changes detected:", file=out)
    if failure.doc_error is not None:
        _show_side(
            failure.mapping.doc_partition,
            "📄 Documentation content has changed:",
            "documentation",
            out,
        )
    if failure.code_error is not None:
        _show_side(
            failure.mapping.code_partition, "💻 Code content has changed:", "code", out
        )


def _run_checks(config: DoksConfig, out: TextIO) -> tuple[int, list[_Failure]]:
    total = len(config.mappings)
    passed = 0
    failures: list[_Failure] = []
    for number, mapping in enumerate(config.mappings, start=1):
        print(f"🔍 Testing mapping {number}/{total}: {mapping.id[:8]}", file=out)
        if mapping.description is not None:
            print(f"   📝 Description: {mapping.description}", file=out)
        print(f"   📄 Doc: {mapping.doc_partition}", file=out)
        print(f"   💻 Code: {mapping.code_partition}", file=out)

        doc_error = check_partition_detailed(
            mapping.doc_partition, mapping.doc_hash, "documentation"
        )
        code_error = check_partition_detailed(
            mapping.code_partition, mapping.code_hash, "code"
        )
        if doc_error is None and code_error is None:
            print("   ✅ PASS", file=out)
            passed += 1
        else:
            print("   ❌ FAIL", file=out)
            failures.append(_Failure(dataclasses.replace(mapping), doc_error, code_error))
        print(file=out)
    return passed, failures


def _fix(config: DoksConfig, failure: _Failure, prompter: Prompter) -> bool:
    """Offer the repair actions for one failure; return whether the config changed."""
    out = prompter.stdout
    mapping = failure.mapping
    current = next((m for m in config.mappings if m.id == mapping.id), None)
    if current is None:
        return False

    print(f"\n🚨 Failed mapping: {mapping.id} ({mapping.id[:8]}...)", file=out)
    if mapping.description is not None:
        print(f"📝 Description: {mapping.description}", file=out)
    print(f"📄 Doc: {mapping.doc_partition}", file=out)
    print(f"💻 Code: {mapping.code_partition}", file=out)
    _show_changes(failure, out)

    action = prompter.select("What would you like to do?", _ACTIONS, default=0)
    if action == 0:
        if failure.doc_error is not None:
            content = extract_content_if_possible(mapping.doc_partition)
            if content is not None:
                current.doc_hash = hash_content(content)
                print("✅ Updated documentation hash", file=out)
        if failure.code_error is not None:
            content = extract_content_if_possible(mapping.code_partition)
            if content is not None:
                current.code_hash = hash_content(content)
                print("✅ Updated code hash", file=out)
        return True
    if action == 1:
        print(f"💡 Use 'doksnet edit {mapping.id[:8]}' to edit this mapping", file=out)
        return False
    if action == 2:
        if prompter.confirm("Are you sure you want to remove this mapping?", default=False):
            config.mappings.remove(current)
            print("✅ Mapping removed", file=out)
            return True
        return False
    print("⏭️  Skipped", file=out)
    return False


def handle(prompter: Prompter | None = None) -> bool:
    """Test all mappings and walk through fixing failures; return whether changes were saved."""
    prompter = prompter or Prompter()
    out = prompter.stdout
    doks_path, config = load_project()

    total = len(config.mappings)
    if not total:
        print("📭 No mappings found. Use 'doksnet add' to create some first.", file=out)
        return False

    print(f"🧪 Interactive Testing Mode - {total} mappings", file=out)
    print(f"📄 Default documentation file: {config.default_doc}", file=out)
    print(file=out)

    passed, failures = _run_checks(config, out)

    print("📊 Test Results Summary:", file=out)
    if passed:
        print(f"   ✅ Passed: {passed}/{total}", file=out)
    if failures:
        print(f"   ❌ Failed: {len(failures)}/{total}", file=out)
    print(file=out)

    if not failures:
        print("🎉 All mappings are up to date!", file=out)
        return False

    print("🛠️  Let's fix the failed mappings...", file=out)
    modified = False
    for failure in failures:
        if _fix(config, failure, prompter):
            modified = True

    if modified:
        config.to_file(doks_path)
        print("\n💾 Changes saved to .doks file", file=out)

    print("\n🏁 Interactive testing complete!", file=out)
    return modified