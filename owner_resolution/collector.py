"""Accumulates rejected owner strings with their reason codes."""

from dataclasses import dataclass, field
from typing import List, Set, Tuple

from loguru import logger

from owner_resolution.models import InvalidOwnerEntry


@dataclass(slots=True)
class InvalidOwnerCollector:
    """Write-only during a run; read once when the output record is built.

    Entries are deduplicated on (whitespace-normalized lower-cased raw, reason).
    """

    _entries: List[InvalidOwnerEntry] = field(default_factory=list)
    _seen: Set[Tuple[str, str]] = field(default_factory=set)

    def add(self, raw: str, reason: str) -> None:
        key = (" ".join((raw or "").split()).lower(), reason)
        if key in self._seen:
            return
        self._seen.add(key)
        self._entries.append(InvalidOwnerEntry(raw=raw or "", reason=reason))
        logger.debug(f"Rejected owner text {raw!r}: {reason}")

    @property
    def entries(self) -> List[InvalidOwnerEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
