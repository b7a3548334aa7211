"""The .doks project file: a default document plus documentation-code mappings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from doksnet.errors import DoksError

DOKS_FILE_NAME = ".doks"

_HEADER = "# .doks - Mapping doks to code \n"
_FORMAT_LINE = "# Format: id|doc_partition|code_partition|doc_hash|code_hash|description\n"
_DEFAULT_DOC_PREFIX = "default_doc="


@dataclass
class Mapping:
    """A link between a documentation partition and a code partition."""

    id: str
    doc_partition: str
    code_partition: str
    doc_hash: str
    code_hash: str
    description: str | None = None

    @classmethod
    def _from_line(cls, line: str) -> Mapping:
        parts = line.split("|")
        if len(parts) < 5:
            raise DoksError(f"Invalid mapping line: {line} (expected at least 5 parts)")
        description = parts[5].strip() if len(parts) > 5 else ""
        return cls(
            id=parts[0].strip(),
            doc_partition=parts[1].strip(),
            code_partition=parts[2].strip(),
            doc_hash=parts[3].strip(),
            code_hash=parts[4].strip(),
            description=description or None,
        )

    def _to_line(self) -> str:
        fields = (
            self.id,
            self.doc_partition,
            self.code_partition,
            self.doc_hash,
            self.code_hash,
            self.description or "",
        )
        return "|".join(fields)


@dataclass
class DoksConfig:
    """Contents of a .doks file."""

    default_doc: str
    mappings: list[Mapping] = field(default_factory=list)

    @classmethod
    def parse(cls, content: str) -> DoksConfig:
        """Parse the text of a .doks file."""
        default_doc = ""
        mappings: list[Mapping] = []
        for raw_line in content.split("\n"):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith(_DEFAULT_DOC_PREFIX):
                default_doc = line[len(_DEFAULT_DOC_PREFIX) :]
            elif "|" in line:
                mappings.append(Mapping._from_line(line))
        if not default_doc:
            raise DoksError("Missing default_doc in .doks file")
        return cls(default_doc, mappings)

    @classmethod
    def from_file(cls, path: str | Path) -> DoksConfig:
        """Read and parse a .doks file."""
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DoksError(f"Cannot read {path}: {exc}") from exc
        return cls.parse(content)

    def to_file(self, path: str | Path) -> None:
        """Write this configuration to ``path``."""
        try:
            with open(path, "w", encoding="utf-8", newline="") as handle:
                handle.write(self.to_text())
        except OSError as exc:
            raise DoksError(f"Cannot write {path}: {exc}") from exc

    def to_text(self) -> str:
        """Render the configuration in the .doks file format."""
        pieces = [_HEADER, f"{_DEFAULT_DOC_PREFIX}{self.default_doc}\n", "\n"]
        if self.mappings:
            pieces.append(_FORMAT_LINE)
            pieces.extend(f"{mapping._to_line()}\n" for mapping in self.mappings)
        return "".join(pieces)

    def add_mapping(self, mapping: Mapping) -> None:
        """Append a mapping."""
        self.mappings.append(mapping)

    def find_mapping_by_id(self, mapping_id: str) -> Mapping | None:
        """Return the mapping with exactly this id, or None."""
        return next((m for m in self.mappings if m.id == mapping_id), None)


def find_doks_file(start: str | Path | None = None) -> Path | None:
    """Search ``start`` (default: the working directory) and its parents for a .doks file."""
    current = Path(start).absolute() if start is not None else Path.cwd()
    for directory in (current, *current.parents):
        candidate = directory / DOKS_FILE_NAME
        if candidate.exists():
            return candidate
    return None