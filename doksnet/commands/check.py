"""The ``test`` command: verify every mapping against its stored hashes."""

from __future__ import annotations

from doksnet.commands.common import load_project
from doksnet.errors import DoksError
from doksnet.hashing import hash_content, verify_hash
from doksnet.partition import Partition


def check_partition(partition_str: str, expected_hash: str, content_type: str) -> None:
    """Raise DoksError unless the partition reads and matches ``expected_hash``."""
    try:
        partition = Partition.parse(partition_str)
    except DoksError as exc:
        raise DoksError(
            f"Failed to parse {content_type} partition '{partition_str}': {exc}"
        ) from exc
    try:
        content = partition.extract_content()
    except DoksError as exc:
        raise DoksError(f"Failed to extract {content_type} content: {exc}") from exc

    if not verify_hash(content, expected_hash):
        current_hash = hash_content(content)
        raise DoksError(
            f"{content_type} content has changed "
            f"(expected: {expected_hash[:8]}..., actual: {current_hash[:8]}...)"
        )


def _errors_for(partition_str: str, expected_hash: str, content_type: str) -> list[str]:
    try:
        check_partition(partition_str, expected_hash, content_type)
    except DoksError as exc:
        return [str(exc)]
    return []


def handle() -> int:
    """Test all mappings, print a report and return the exit status (0 or 1)."""
    _, config = load_project()
    total = len(config.mappings)
    if not total:
        print("📭 No mappings found. Use 'doksnet add' to create some first.")
        return 0

    print(f"🧪 Testing {total} documentation-code mappings")
    print(f"📄 Default documentation file: {config.default_doc}")
    print()

    failures: list[tuple[int, str, list[str]]] = []
    passed = 0
    for number, mapping in enumerate(config.mappings, start=1):
        print(f"🔍 Testing mapping {number}/{total}: {mapping.id}")
        if mapping.description is not None:
            print(f"   📝 Description: {mapping.description}")
        print(f"   📄 Doc: {mapping.doc_partition}")
        print(f"   💻 Code: {mapping.code_partition}")

        errors = [
            f"Documentation: {error}"
            for error in _errors_for(mapping.doc_partition, mapping.doc_hash, "documentation")
        ] + [
            f"Code: {error}"
            for error in _errors_for(mapping.code_partition, mapping.code_hash, "code")
        ]
        if errors:
            print("   ❌ FAIL")
            failures.append((number, mapping.id, errors))
        else:
            print("   ✅ PASS")
            passed += 1
        print()

    print("📊 Test Results Summary:")
    if passed:
        print(f"   ✅ Passed: {passed}/{total}")
    if failures:
        print(f"   ❌ Failed: {len(failures)}/{total}")
        print("\n🚨 Failed Mappings Details:")
        for number, mapping_id, errors in failures:
            print(f"   {number}. {mapping_id} (ID: {mapping_id[:8]})")
            for error in errors:
                print(f"      • {error}")
        print("\n💡 Tip: Use 'doksnet edit <id>' to fix broken mappings")
        return 1

    print("\n🎉 All mappings are up to date!")
    return 0