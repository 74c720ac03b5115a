"""DCDirectory Memory Store - In-Memory Record Store.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
import threading
from typing import Callable, Dict, Iterable, Optional, Tuple

from dcdirectory_core.errors import DuplicateIdError, NotFoundError, RecordValidationError
from dcdirectory_core.records.model import FacilityRecord
from dcdirectory_core.records.validation import validate_record, validate_structure
from dcdirectory_core.storage.backend import RecordStore, StoreConfig

logger = logging.getLogger(__name__)

class MemoryRecordStore(RecordStore):
    """In-memory record store.

    The collection is held as a tuple that is swapped whole on every write,
    under a lock, so a snapshot handed to a reader never changes.
    """

    def __init__(
        self,
        config: StoreConfig = None,
        records: Iterable[FacilityRecord] = (),
        validator: Optional[Callable[[FacilityRecord], None]] = None,
    ):
        super().__init__(config)
        self._validator = validator or validate_record
        self._lock = threading.RLock()
        self._records: Tuple[FacilityRecord, ...] = ()
        self._index: Dict[str, int] = {}
        self._version = 0
        records = tuple(records)
        if records:
            self.replace_all(records)

    @property
    def version(self) -> int:
        """Incremented on every successful write."""
        return self._version

    def _check(self, record: FacilityRecord) -> None:
        validator = self._validator if self.config.validate_ranges else validate_structure
        try:
            validator(record)
        except RecordValidationError as e:
            logger.warning(f"Rejected record: {e}")
            raise

    def _commit(self, records: Tuple[FacilityRecord, ...]) -> None:
        self._records = records
        self._index = {record.id: i for i, record in enumerate(records)}
        self._version += 1

    def snapshot(self) -> Tuple[FacilityRecord, ...]:
        return self._records

    def replace_all(self, records: Iterable[FacilityRecord]) -> None:
        records = tuple(records)
        seen = set()
        for record in records:
            if record.id in seen:
                logger.warning(f"Rejected bulk replace: duplicate id {record.id}")
                raise DuplicateIdError(record.id)
            seen.add(record.id)
            self._check(record)
        with self._lock:
            self._commit(records)
        logger.info(f"Replaced collection with {len(records)} records")

    def insert(self, record: FacilityRecord) -> None:
        self._check(record)
        with self._lock:
            if record.id in self._index:
                logger.warning(f"Rejected insert: duplicate id {record.id}")
                raise DuplicateIdError(record.id)
            self._commit(self._records + (record,))
        logger.debug(f"Inserted record: {record.id}")

    def update_by_id(self, record_id: str, record: FacilityRecord) -> None:
        self._check(record)
        with self._lock:
            position = self._index.get(record_id)
            if position is None:
                logger.warning(f"Rejected update: no record {record_id}")
                raise NotFoundError(record_id)
            if record.id != record_id and record.id in self._index:
                logger.warning(f"Rejected update: id {record.id} already taken")
                raise DuplicateIdError(record.id)
            records = list(self._records)
            records[position] = record
            self._commit(tuple(records))
        logger.debug(f"Updated record: {record_id}")

    def delete_by_id(self, record_id: str) -> bool:
        with self._lock:
            if record_id not in self._index:
                return False
            self._commit(tuple(r for r in self._records if r.id != record_id))
        logger.debug(f"Deleted record: {record_id}")
        return True

    def get(self, record_id: str) -> Optional[FacilityRecord]:
        with self._lock:
            position = self._index.get(record_id)
            return None if position is None else self._records[position]

    def exists(self, record_id: str) -> bool:
        return record_id in self._index

    def clear(self) -> None:
        with self._lock:
            self._commit(())

__all__ = ["MemoryRecordStore"]
