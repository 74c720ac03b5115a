"""DCDirectory Storage Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from dcdirectory_core.storage.backend import RecordStore, StoreConfig
from dcdirectory_core.storage.memory import MemoryRecordStore

__all__ = ["RecordStore", "StoreConfig", "MemoryRecordStore"]
