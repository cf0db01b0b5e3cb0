from __future__ import annotations

import logging
import re
from typing import Optional, Protocol, Sequence

from .errors import OperatorInputError

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_YES = re.compile(r"[Yy]")


class Prompter(Protocol):
    """Operator I/O: show a line of text, read a line of input."""

    def say(self, text: str) -> None:
        ...

    def ask(self, question: str) -> str:
        ...


class ConsolePrompter:
    def say(self, text: str) -> None:
        print(text, flush=True)

    def ask(self, question: str) -> str:
        try:
            return input(question)
        except EOFError as e:
            raise OperatorInputError("stdin closed while waiting for operator input") from e


def parse_choice(raw: str, count: int) -> Optional[int]:
    """Return the 0-based index for a 1-based menu answer, or None if invalid."""

    text = raw.strip()
    if not _DIGITS.fullmatch(text):
        return None
    # Bound the digit count before int(); huge inputs are simply out of range.
    text = text.lstrip("0") or "0"
    if len(text) > len(str(count)):
        return None
    n = int(text)
    if n < 1 or n > count:
        return None
    return n - 1


def choose_version(prompter: Prompter, versions: Sequence[str]) -> str:
    prompter.say("Available PHP versions:")
    for i, version in enumerate(versions, start=1):
        prompter.say(f"  {i}. PHP {version}")

    while True:
        raw = prompter.ask(f"Select PHP version (1-{len(versions)}): ")
        idx = parse_choice(raw, len(versions))
        if idx is not None:
            return versions[idx]
        logger.info("Rejected menu input %r", raw)
        prompter.say("Invalid selection. Please try again.")


def confirm(prompter: Prompter, question: str) -> bool:
    return bool(_YES.fullmatch(prompter.ask(f"{question} (y/n): ").strip()))
