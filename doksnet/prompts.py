"""Line-based interactive prompts for text, yes/no answers and selections."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from doksnet.errors import DoksError


class Prompter:
    """Ask questions on a pair of text streams (standard input and output by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _ask(self, text: str) -> str:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise DoksError("Input ended before an answer was given")
        return line.rstrip("\r\n")

    def input_text(self, prompt: str, initial: str = "", allow_empty: bool = False) -> str:
        """Read a line of text; an empty answer takes ``initial`` when one is given."""
        suffix = f" [{initial}]" if initial else ""
        while True:
            answer = self._ask(f"{prompt}{suffix}: ")
            if answer:
                return answer
            if initial:
                return initial
            if allow_empty:
                return ""

    def confirm(self, prompt: str, default: bool = True) -> bool:
        """Ask a yes/no question; an empty answer takes ``default``."""
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._ask(f"{prompt} {hint} ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            print("Please answer y or n.", file=self.stdout)

    def select(self, prompt: str, items: Sequence[str], default: int = 0) -> int:
        """Let the user pick one of ``items`` by its number, counted from 0."""
        if not items:
            raise DoksError("Nothing to select from")
        print(f"{prompt}:", file=self.stdout)
        for number, item in enumerate(items):
            marker = ">" if number == default else " "
            print(f"{marker} {number}) {item}", file=self.stdout)
        while True:
            answer = self._ask(f"Selection [{default}]: ").strip()
            if not answer:
                return default
            if answer.isdigit() and int(answer) < len(items):
                return int(answer)
            print(f"Please enter a number from 0 to {len(items) - 1}.", file=self.stdout)