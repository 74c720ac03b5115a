"""
Unit tests for the in-memory record store
"""
from dataclasses import replace

import pytest

from dcdirectory_core.errors import DuplicateIdError, NotFoundError, RecordValidationError
from dcdirectory_core.records.model import FacilityRecord, Quantity
from dcdirectory_core.storage.backend import StoreConfig
from dcdirectory_core.storage.memory import MemoryRecordStore


class TestInsert:
    """Tests for insert"""

    def test_insert_appends(self, record_factory):
        """Inserted records appear at the end of the collection"""
        store = MemoryRecordStore()
        store.insert(record_factory("a"))
        store.insert(record_factory("b"))
        assert store.ids() == ["a", "b"]

    def test_duplicate_rejected(self, record_factory):
        """Inserting a live id fails and leaves the collection unchanged"""
        store = MemoryRecordStore(records=[record_factory("a")])
        with pytest.raises(DuplicateIdError) as exc:
            store.insert(record_factory("a", name="Other"))
        assert exc.value.record_id == "a"
        assert store.count() == 1
        assert store.get("a").name == "Facility"

    def test_insert_after_delete(self, record_factory):
        """A deleted id can be reused"""
        store = MemoryRecordStore(records=[record_factory("a")])
        assert store.delete_by_id("a") is True
        store.insert(record_factory("a"))
        assert store.ids() == ["a"]

    def test_out_of_range_rejected(self, record_factory):
        """Validation runs before insert"""
        store = MemoryRecordStore()
        with pytest.raises(RecordValidationError):
            store.insert(record_factory("a", used=120))
        assert store.count() == 0

    def test_validation_can_be_disabled(self, record_factory):
        """With range checks off out-of-range values are admitted"""
        store = MemoryRecordStore(StoreConfig(validate_ranges=False))
        store.insert(record_factory("a", used=120))
        assert store.get("a").capacity.used == 120

    def test_structure_checked_without_ranges(self, record_factory):
        """A non-power unit is refused even with range checks off"""
        store = MemoryRecordStore(StoreConfig(validate_ranges=False))
        with pytest.raises(RecordValidationError) as exc:
            store.insert(record_factory("a", power=Quantity(20, "MVA")))
        assert exc.value.field == "specifications.power"
        assert store.count() == 0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_uptime_rejected(self, record_factory, value):
        """NaN and infinity never enter the store"""
        store = MemoryRecordStore()
        with pytest.raises(RecordValidationError) as exc:
            store.insert(record_factory("a", uptime=value))
        assert exc.value.field == "realTimeData.uptime"
        assert store.count() == 0

    def test_non_finite_value_from_data_file(self):
        """A "nan" string in loaded data is rejected at insert"""
        record = FacilityRecord.from_dict({"id": "x", "capacity": {"used": "nan"}})
        store = MemoryRecordStore()
        with pytest.raises(RecordValidationError) as exc:
            store.insert(record)
        assert exc.value.field == "capacity.used"


class TestUpdate:
    """Tests for update_by_id"""

    def test_update_keeps_position(self, records):
        """The replacement takes the original's place"""
        store = MemoryRecordStore(records=records)
        updated = replace(records[1], name="Renamed")
        store.update_by_id("dc-2", updated)
        assert store.ids() == ["dc-1", "dc-2", "dc-3"]
        assert store.get("dc-2").name == "Renamed"

    def test_update_missing_id(self, record_factory):
        """Updating an absent id fails and the collection is unchanged"""
        store = MemoryRecordStore()
        store.insert(record_factory("a"))
        store.insert(record_factory("b"))
        with pytest.raises(NotFoundError):
            store.update_by_id("c", record_factory("c"))
        assert store.count() == 2

    def test_update_to_taken_id(self, records):
        """A record cannot be renamed onto another live id"""
        store = MemoryRecordStore(records=records)
        with pytest.raises(DuplicateIdError):
            store.update_by_id("dc-1", replace(records[0], id="dc-2"))
        assert store.ids() == ["dc-1", "dc-2", "dc-3"]


class TestDelete:
    """Tests for delete_by_id"""

    def test_delete_reports_removal(self, records):
        """Returns True when a record was removed"""
        store = MemoryRecordStore(records=records)
        assert store.delete_by_id("dc-2") is True
        assert store.ids() == ["dc-1", "dc-3"]

    def test_delete_missing_is_noop(self, records):
        """Returns False when nothing matched"""
        store = MemoryRecordStore(records=records)
        version = store.version
        assert store.delete_by_id("nope") is False
        assert store.count() == 3
        assert store.version == version


class TestReplaceAll:
    """Tests for replace_all"""

    def test_replaces_collection(self, records, record_factory):
        """The old collection is discarded"""
        store = MemoryRecordStore(records=records)
        store.replace_all([record_factory("z")])
        assert store.ids() == ["z"]

    def test_duplicate_ids_rejected(self, records, record_factory):
        """A bulk replace with repeated ids is refused"""
        store = MemoryRecordStore(records=records)
        with pytest.raises(DuplicateIdError):
            store.replace_all([record_factory("x"), record_factory("x")])
        assert store.ids() == ["dc-1", "dc-2", "dc-3"]

    def test_clear(self, records):
        """Clearing empties the store and counts as a write"""
        store = MemoryRecordStore(records=records)
        before = store.snapshot()
        version = store.version
        store.clear()
        assert store.count() == 0
        assert store.get("dc-1") is None
        assert store.version == version + 1
        assert len(before) == 3


class TestSnapshots:
    """Tests for snapshot isolation"""

    def test_snapshot_unaffected_by_writes(self, records, record_factory):
        """A snapshot taken before a write does not change"""
        store = MemoryRecordStore(records=records)
        before = store.snapshot()
        store.insert(record_factory("dc-4"))
        store.delete_by_id("dc-1")
        assert [r.id for r in before] == ["dc-1", "dc-2", "dc-3"]
        assert store.ids() == ["dc-2", "dc-3", "dc-4"]

    def test_version_increments(self, record_factory):
        """Every successful write bumps the version"""
        store = MemoryRecordStore()
        start = store.version
        store.insert(record_factory("a"))
        store.update_by_id("a", record_factory("a", name="B"))
        store.delete_by_id("a")
        assert store.version == start + 3

    def test_iteration_and_len(self, records):
        """The store iterates over its current records"""
        store = MemoryRecordStore(records=records)
        assert len(store) == 3
        assert [r.id for r in store] == ["dc-1", "dc-2", "dc-3"]
        assert store.exists("dc-3")
        assert not store.exists("dc-9")
