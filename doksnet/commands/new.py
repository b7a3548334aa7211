"""The ``new`` command: create a .doks file for a project."""

from __future__ import annotations

import os
from pathlib import Path

from doksnet.config import DOKS_FILE_NAME, DoksConfig
from doksnet.errors import DoksError
from doksnet.prompts import Prompter

_DOC_PATTERNS = frozenset(
    name.lower()
    for name in (
        "README.md",
        "README.rst",
        "README.txt",
        "README",
        "DOCS.md",
        "DOCUMENTATION.md",
        "GUIDE.md",
        "MANUAL.md",
    )
)


def _sort_key(name: str) -> tuple[bool, str]:
    return (not name.lower().startswith("readme"), name)


def find_documentation_files(path: str | Path) -> list[str]:
    """List documentation files directly inside ``path``, README files first."""
    try:
        with os.scandir(path) as entries:
            names = [entry.name for entry in entries if entry.is_file()]
    except OSError as exc:
        raise DoksError(f"Cannot read directory {path}: {exc}") from exc
    found = [
        name
        for name in names
        if name.lower() in _DOC_PATTERNS or name.endswith(".md")
    ]
    return sorted(found, key=_sort_key)


def handle(path: str | Path | None = None, prompter: Prompter | None = None) -> Path:
    """Create a .doks file in ``path`` (default: the working directory) and return its path."""
    prompter = prompter or Prompter()
    out = prompter.stdout
    target = Path(path) if path is not None else Path.cwd()
    doks_path = target / DOKS_FILE_NAME
    if doks_path.exists():
        raise DoksError("A .doks file already exists in this directory")

    print(f"🚀 Initializing new doksnet project in: {target}", file=out)
    doc_files = find_documentation_files(target)

    if not doc_files:
        default_doc = prompter.input_text(
            "No documentation files found. Please specify a documentation file",
            initial="README.md",
        )
    elif len(doc_files) == 1:
        default_doc = doc_files[0]
        print(f"📄 Found documentation file: {default_doc}", file=out)
    else:
        print("📚 Found multiple documentation files:", file=out)
        choice = prompter.select("Select the default documentation file", doc_files, default=0)
        default_doc = doc_files[choice]

    DoksConfig(default_doc).to_file(doks_path)
    print(f"✅ Created .doks file with default documentation: {default_doc}", file=out)
    print(
        "📝 You can now use 'doksnet add' to create mappings between documentation and code",
        file=out,
    )
    return doks_path