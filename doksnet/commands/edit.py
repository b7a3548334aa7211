"""The ``edit`` command: change an existing documentation-code mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from doksnet.commands.common import load_project, preview
from doksnet.config import Mapping
from doksnet.errors import DoksError
from doksnet.hashing import hash_content
from doksnet.partition import Partition
from doksnet.prompts import Prompter

_OPTIONS = (
    "Documentation partition",
    "Code partition",
    "Description",
    "Both documentation and code partitions",
    "Cancel",
)


@dataclass(frozen=True)
class _Side:
    partition_attr: str
    hash_attr: str
    icon: str
    noun: str


_DOC = _Side("doc_partition", "doc_hash", "📄", "documentation")
_CODE = _Side("code_partition", "code_hash", "💻", "code")


def _edit_partition(mapping: Mapping, side: _Side, prompter: Prompter) -> None:
    out = prompter.stdout
    current = getattr(mapping, side.partition_attr)
    print(f"\n{side.icon} Editing {side.noun} partition", file=out)
    print(f"Current value: {current}", file=out)

    new_partition = prompter.input_text(f"New {side.noun} partition", initial=current)
    if new_partition == current:
        print(f"ℹ️  No changes made to {side.noun} partition", file=out)
        return

    partition = Partition.parse(new_partition)
    try:
        content = partition.extract_content()
    except DoksError as exc:
        raise DoksError(f"Failed to extract {side.noun} content: {exc}") from exc

    print(f"\n{side.icon} New {side.noun} content preview:", file=out)
    print("---", file=out)
    print(preview(content), file=out)
    print("---", file=out)

    title = side.noun.capitalize()
    if prompter.confirm("Apply this change?", default=True):
        setattr(mapping, side.partition_attr, new_partition)
        setattr(mapping, side.hash_attr, hash_content(content))
        print(f"✅ {title} partition updated", file=out)
    else:
        print(f"❌ {title} partition change cancelled", file=out)


def _edit_description(mapping: Mapping, prompter: Prompter) -> None:
    out = prompter.stdout
    current = mapping.description or ""
    print("\n📝 Editing description", file=out)
    print(f"Current value: {current or '(none)'}", file=out)

    answer = prompter.input_text(
        "New description (leave empty to remove)", initial=current, allow_empty=True
    )
    new_description = answer.strip() or None
    if new_description != mapping.description:
        mapping.description = new_description
        print("✅ Description updated", file=out)
    else:
        print("ℹ️  No changes made to description", file=out)


def _show_mapping(mapping: Mapping, out: TextIO) -> None:
    print(f"✏️  Editing mapping: {mapping.id}", file=out)
    print("Current values:", file=out)
    print(f"📄 Documentation: {mapping.doc_partition}", file=out)
    print(f"💻 Code: {mapping.code_partition}", file=out)
    print(f"📝 Description: {mapping.description or '(none)'}", file=out)
    print(file=out)


def handle(mapping_id: str, prompter: Prompter | None = None) -> Mapping | None:
    """Edit the first mapping whose id starts with ``mapping_id``.

    Returns the edited mapping, or None when there is nothing to edit or the
    user cancels.
    """
    prompter = prompter or Prompter()
    out = prompter.stdout
    doks_path, config = load_project()
    if not config.mappings:
        print("📭 No mappings found. Use 'doksnet add' to create some first.", file=out)
        return None

    mapping = next((m for m in config.mappings if m.id.startswith(mapping_id)), None)
    if mapping is None:
        raise DoksError(f"No mapping found with ID starting with '{mapping_id}'")

    _show_mapping(mapping, out)
    selection = prompter.select("What would you like to edit?", _OPTIONS, default=0)

    if selection == 0:
        _edit_partition(mapping, _DOC, prompter)
    elif selection == 1:
        _edit_partition(mapping, _CODE, prompter)
    elif selection == 2:
        _edit_description(mapping, prompter)
    elif selection == 3:
        _edit_partition(mapping, _DOC, prompter)
        _edit_partition(mapping, _CODE, prompter)
    else:
        print("❌ Edit cancelled", file=out)
        return None

    config.to_file(doks_path)
    print("✅ Successfully updated mapping!", file=out)
    return mapping