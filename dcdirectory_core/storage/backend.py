"""DCDirectory Store Backend - Abstract Record Store Interface.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from dcdirectory_core.records.model import FacilityRecord

@dataclass
class StoreConfig:
    """Record store configuration.

    With ``validate_ranges`` off only the structural checks run.
    """
    validate_ranges: bool = True

class RecordStore(ABC):
    """Owner of the canonical record collection.

    Readers get immutable snapshots; only the store's own write
    operations change the collection.
    """

    def __init__(self, config: StoreConfig = None):
        self.config = config or StoreConfig()

    @property
    @abstractmethod
    def version(self) -> int:
        """Changes whenever the collection changes."""
        pass

    @abstractmethod
    def snapshot(self) -> Tuple[FacilityRecord, ...]:
        pass

    @abstractmethod
    def replace_all(self, records: Iterable[FacilityRecord]) -> None:
        pass

    @abstractmethod
    def insert(self, record: FacilityRecord) -> None:
        pass

    @abstractmethod
    def update_by_id(self, record_id: str, record: FacilityRecord) -> None:
        pass

    @abstractmethod
    def delete_by_id(self, record_id: str) -> bool:
        pass

    def get(self, record_id: str) -> Optional[FacilityRecord]:
        for record in self.snapshot():
            if record.id == record_id:
                return record
        return None

    def exists(self, record_id: str) -> bool:
        return self.get(record_id) is not None

    def count(self) -> int:
        return len(self.snapshot())

    def ids(self) -> List[str]:
        return [record.id for record in self.snapshot()]

    def __len__(self) -> int:
        return self.count()

    def __iter__(self):
        return iter(self.snapshot())

__all__ = ["RecordStore", "StoreConfig"]
