"""The ``add`` command: record a new documentation-code mapping."""

from __future__ import annotations

import uuid
from typing import TextIO

from doksnet.commands.common import load_project, preview
from doksnet.config import Mapping
from doksnet.errors import DoksError
from doksnet.hashing import hash_content
from doksnet.partition import Partition
from doksnet.prompts import Prompter


def _extract(partition_str: str, what: str) -> str:
    partition = Partition.parse(partition_str)
    try:
        return partition.extract_content()
    except DoksError as exc:
        raise DoksError(f"Failed to extract {what} content: {exc}") from exc


def _show_preview(out: TextIO, heading: str, content: str) -> None:
    print(f"\n{heading}", file=out)
    print("---", file=out)
    print(preview(content), file=out)
    print("---", file=out)


def handle(prompter: Prompter | None = None) -> Mapping | None:
    """Interactively add a mapping; return it, or None when the user cancels."""
    prompter = prompter or Prompter()
    out = prompter.stdout
    doks_path, config = load_project()

    print("📝 Adding new documentation-code mapping", file=out)
    print(f"Current default documentation file: {config.default_doc}", file=out)

    doc_partition = prompter.input_text(
        "Documentation partition (e.g., README.md:10-20 or README.md:10-20@5-15)",
        initial=f"{config.default_doc}:",
    )
    doc_content = _extract(doc_partition, "documentation")
    _show_preview(out, "📄 Documentation content preview:", doc_content)
    if not prompter.confirm("Is this the correct documentation content?", default=True):
        print("❌ Documentation selection cancelled", file=out)
        return None

    code_partition = prompter.input_text(
        "Code partition (e.g., src/main.rs:15-30 or src/lib.rs:5-25@10-50)"
    )
    code_content = _extract(code_partition, "code")
    _show_preview(out, "💻 Code content preview:", code_content)
    if not prompter.confirm("Is this the correct code content?", default=True):
        print("❌ Code selection cancelled", file=out)
        return None

    description = prompter.input_text(
        "Optional description for this mapping", allow_empty=True
    ).strip()

    mapping = Mapping(
        id=str(uuid.uuid4()),
        doc_partition=doc_partition,
        code_partition=code_partition,
        doc_hash=hash_content(doc_content),
        code_hash=hash_content(code_content),
        description=description or None,
    )
    config.add_mapping(mapping)
    config.to_file(doks_path)

    print("✅ Successfully added mapping!", file=out)
    print(f"📊 Total mappings: {len(config.mappings)}", file=out)
    return mapping