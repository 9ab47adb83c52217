"""Shared strategy machinery for receipt text candidate parsing."""

import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from nestkeeper.domain.receipt import RawCandidate
from nestkeeper.runtime import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PatternStrategy(Generic[T]):
    """One way of recognizing a field on a single line.

    ``normalize`` turns a regex match into the parsed value, or returns None
    to drop the match. Without ``multi_match`` only the first match on a line
    is considered.
    """

    name: str
    pattern: re.Pattern[str]
    normalize: Callable[[re.Match[str]], T | None]
    multi_match: bool = False

    def candidates(self, line: str) -> Iterator[RawCandidate[T]]:
        if self.multi_match:
            matches: Iterable[re.Match[str]] = self.pattern.finditer(line)
        else:
            first = self.pattern.search(line)
            matches = [first] if first else []

        for match in matches:
            value = self.normalize(match)
            if value is None:
                logger.debug("Strategy %s dropped %r", self.name, match.group(0))
                continue
            yield RawCandidate(raw_text=match.group(0), parsed_value=value)


def split_lines(text: str) -> list[str]:
    """Return the non-empty, trimmed lines of OCR text."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def collect_candidates(lines: Sequence[str], strategies: Sequence[PatternStrategy[T]]) -> tuple[RawCandidate[T], ...]:
    """Run every strategy over every line, line-major, keeping discovery order."""
    return tuple(candidate for line in lines for strategy in strategies for candidate in strategy.candidates(line))


def bounded_name(value: str, min_length: int, max_length: int) -> str | None:
    """Trim a name candidate and drop it when its length is out of bounds."""
    cleaned = value.strip()
    if min_length <= len(cleaned) <= max_length:
        return cleaned
    return None
