"""
JSON file store
Holds every ScoreRecord in memory, in append order, and rewrites the whole
file after each append.

Public methods:
- load() -> list[ScoreRecord]
- append(record) -> "saved" | "disabled" | "failed"
- records -> copy of the in-memory list
"""

import logging
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from .schemas import ScoreRecord
from .types import SaveStatus

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(List[ScoreRecord])


class ScoreStore:
    def __init__(self, path: Union[str, Path], enabled: bool = True) -> None:
        self.path = Path(path)
        # enabled=False means saving is disabled: append() never touches anything
        self.enabled = enabled
        self._records: List[ScoreRecord] = []

    @property
    def records(self) -> List[ScoreRecord]:
        return list(self._records)

    def load(self) -> List[ScoreRecord]:
        """
        Read the file into memory.
        Missing, unreadable or malformed content counts as "no history"; this
        never raises.
        """
        try:
            loaded = _records_adapter.validate_json(self.path.read_bytes())
        except FileNotFoundError:
            loaded = []
        except (OSError, ValueError, ValidationError) as exc:
            logger.debug("Ignoring unreadable score file %s: %s", self.path, exc)
            loaded = []

        self._records = loaded
        return list(loaded)

    def append(self, record: ScoreRecord) -> SaveStatus:
        if not self.enabled:
            return "disabled"

        self._records.append(record)
        try:
            self._write()
        except OSError as exc:
            # the record is dropped so memory keeps matching the last good write
            self._records.pop()
            logger.warning("Could not save scores to %s: %s", self.path, exc)
            return "failed"
        return "saved"

    def _write(self) -> None:
        self.path.write_bytes(
            _records_adapter.dump_json(self._records, indent=2, by_alias=True, exclude_none=True)
        )
