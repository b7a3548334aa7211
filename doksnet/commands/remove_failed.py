"""The ``remove-failed`` command: drop mappings whose content no longer matches."""

from __future__ import annotations

from doksnet.commands.common import load_project
from doksnet.config import Mapping
from doksnet.errors import DoksError
from doksnet.hashing import verify_hash
from doksnet.partition import Partition
from doksnet.prompts import Prompter


def partition_is_valid(partition_str: str, expected_hash: str) -> bool:
    """Tell whether a partition can be read and still hashes to ``expected_hash``."""
    try:
        content = Partition.parse(partition_str).extract_content()
    except DoksError:
        return False
    return verify_hash(content, expected_hash)


def _failure_reasons(mapping: Mapping) -> list[str]:
    reasons = []
    if not partition_is_valid(mapping.doc_partition, mapping.doc_hash):
        reasons.append("documentation")
    if not partition_is_valid(mapping.code_partition, mapping.code_hash):
        reasons.append("code")
    return reasons


def handle(prompter: Prompter | None = None) -> list[Mapping]:
    """Find failing mappings and, after confirmation, remove them; return those removed."""
    prompter = prompter or Prompter()
    out = prompter.stdout
    doks_path, config = load_project()

    if not config.mappings:
        print("📭 No mappings found. Use 'doksnet add' to create some first.", file=out)
        return []

    print(f"🔍 Checking {len(config.mappings)} mappings for failures...", file=out)

    failed = [
        (mapping, reasons)
        for mapping in config.mappings
        if (reasons := _failure_reasons(mapping))
    ]
    if not failed:
        print("✅ No failed mappings found! All mappings are up to date.", file=out)
        return []

    print(f"\n🚨 Found {len(failed)} failed mapping(s):", file=out)
    for mapping, reasons in failed:
        print(f"   📍 ID: {mapping.id[:8]} ({mapping.id}...)", file=out)
        print(f"      📄 Doc: {mapping.doc_partition}", file=out)
        print(f"      💻 Code: {mapping.code_partition}", file=out)
        if mapping.description is not None:
            print(f"      📝 Description: {mapping.description}", file=out)
        print(f"      ❌ Failed: {', '.join(reasons)}", file=out)
        print(file=out)

    print("💡 These mappings have content that no longer matches their stored hashes.", file=out)

    if not prompter.confirm(f"Remove all {len(failed)} failed mapping(s)?", default=False):
        print("❌ Removal cancelled. Failed mappings remain.", file=out)
        print("💡 Tip: Use 'doksnet edit <id>' to fix individual mappings", file=out)
        print("💡 Tip: Use 'doksnet test-interactive' for guided fixing", file=out)
        return []

    removed = [mapping for mapping, _ in failed]
    removed_ids = {id(mapping) for mapping in removed}
    config.mappings = [m for m in config.mappings if id(m) not in removed_ids]
    config.to_file(doks_path)

    print(f"✅ Successfully removed {len(removed)} failed mapping(s)", file=out)
    print(f"📊 Remaining mappings: {len(config.mappings)}", file=out)
    if not config.mappings:
        print("💡 No mappings remain. Use 'doksnet add' to create new ones.", file=out)
    return removed