"""Single responsibility: a journal keeps entries, persistence lives elsewhere."""
import logging
from pathlib import Path
from typing import List, Union

from src.domain.core.exceptions import OutOfRangeError

logger = logging.getLogger(__name__)


class Journal:

    def __init__(self):
        self.entries: List[str] = []
        self._count = 0

    def add_entry(self, text: str) -> int:
        """Add an entry and return its running number."""
        self._count += 1
        self.entries.append(f"{self._count}: {text}")
        return self._count

    def remove_entry(self, position: int) -> None:
        if not 0 <= position < len(self.entries):
            raise OutOfRangeError(position, len(self.entries))
        del self.entries[position]

    def __str__(self) -> str:
        return "\n".join(self.entries)


class PersistenceManager:
    """Saves journals; the journal itself knows nothing about files."""

    @staticmethod
    def save_to_file(journal: Journal, path: Union[str, Path]) -> Path:
        target = Path(path)
        target.write_text(str(journal))
        logger.debug("Saved %d journal entries to %s", len(journal.entries), target)
        return target
