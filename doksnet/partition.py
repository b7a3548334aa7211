"""Partitions: a file, optionally narrowed to a line and column range."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from doksnet.errors import DoksError

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_number(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise DoksError(f"invalid digit found in string: {text!r}")
    return int(text)


def _parse_range(text: str, kind: str) -> tuple[int | None, int | None]:
    if not text:
        return None, None
    pieces = text.split("-")
    if len(pieces) == 1:
        value = _parse_number(pieces[0])
        return value, value
    if len(pieces) == 2:
        return _parse_number(pieces[0]), _parse_number(pieces[1])
    raise DoksError(f"Invalid {kind} range format")


def _split_lines(content: str) -> list[str]:
    pieces = content.split("\n")
    lines = [piece.removesuffix("\r") for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


@dataclass
class Partition:
    """A region of a file: ``path[:start[-end]][@col[-col]]``."""

    file_path: str
    start_line: int | None = None
    end_line: int | None = None
    start_col: int | None = None
    end_col: int | None = None

    @classmethod
    def parse(cls, partition_str: str) -> Partition:
        """Parse a partition specification string."""
        if not partition_str.strip():
            raise DoksError("Partition string cannot be empty")

        parts = partition_str.split(":")
        file_path = parts[0]
        if not file_path.strip():
            raise DoksError("File path cannot be empty")
        if len(parts) == 1:
            return cls(file_path)

        range_part = parts[1]
        if "@" in range_part:
            range_parts = range_part.split("@")
            line_range, col_range = range_parts[0], range_parts[1]
        else:
            line_range, col_range = range_part, None

        start_line, end_line = _parse_range(line_range, "line")
        start_col, end_col = (
            _parse_range(col_range, "column") if col_range is not None else (None, None)
        )
        return cls(file_path, start_line, end_line, start_col, end_col)

    def extract_content(self) -> str:
        """Read the file and return the text this partition covers."""
        path = Path(self.file_path)
        if not path.exists():
            raise DoksError(f"File not found: {self.file_path}")
        try:
            with path.open(encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DoksError(str(exc)) from exc

        if self.start_line is None or self.end_line is None:
            return content

        start, end = self.start_line, self.end_line
        lines = _split_lines(content)
        if start == 0 or end == 0:
            raise DoksError("Line numbers must be 1-indexed")
        if start > len(lines) or end > len(lines):
            raise DoksError("Line numbers exceed file length")
        if start > end:
            raise DoksError("Start line must be <= end line")

        selected = lines[start - 1 : end]
        if self.start_col is None or self.end_col is None:
            return "\n".join(selected)

        start_col, end_col = self.start_col, self.end_col
        if start_col == 0:
            raise DoksError("Column numbers must be 1-indexed")

        pieces = []
        for number, line in enumerate(selected, start=start):
            if number == start and number == end:
                if start_col > len(line) or end_col > len(line):
                    raise DoksError("Column numbers exceed line length")
                if start_col - 1 > end_col:
                    raise DoksError("Start column must be <= end column")
                pieces.append(line[start_col - 1 : end_col])
            elif number == start:
                if start_col > len(line):
                    raise DoksError("Start column exceeds line length")
                pieces.append(line[start_col - 1 :])
            elif number == end:
                if end_col > len(line):
                    raise DoksError("End column exceeds line length")
                pieces.append(line[:end_col])
            else:
                pieces.append(line)
        return "\n".join(pieces)

    def __str__(self) -> str:
        result = self.file_path
        if self.start_line is not None and self.end_line is not None:
            if self.start_line == self.end_line:
                result += f":{self.start_line}"
            else:
                result += f":{self.start_line}-{self.end_line}"
        if self.start_col is not None and self.end_col is not None:
            if self.start_col == self.end_col:
                result += f"@{self.start_col}"
            else:
                result += f"@{self.start_col}-{self.end_col}"
        return result