"""
Unit tests for facet extraction
"""
from dcdirectory_core.facets.builder import FacetBuilder, collect_facets, distinct_values
from dcdirectory_core.records.model import Tier


class TestDistinctValues:
    """Tests for distinct_values"""

    def test_first_seen_order(self, records):
        """Values come back in the order they first appear"""
        assert distinct_values(records, "tier") == ["Tier 1", "Tier 3"]
        assert distinct_values(records, "location") == ["London", "Virginia", "Amsterdam"]

    def test_no_duplicates(self, records, record_factory):
        """Shared values appear once"""
        extra = records + (record_factory("dc-4", location="London"),)
        values = distinct_values(extra, "location")
        assert len(values) == len(set(values))
        assert values.count("London") == 1

    def test_callable_selector(self, records):
        """Selectors may be callables reaching into nested groups"""
        assert distinct_values(records, lambda r: r.capacity.status) == ["Limited", "Available", "Full"]

    def test_empty_collection(self):
        """No records, no values"""
        assert distinct_values((), "tier") == []


class TestFacetBuilder:
    """Tests for FacetBuilder"""

    def test_counts(self, records):
        """Each value is counted once per record"""
        result = FacetBuilder("tier").add_all(records).build()
        assert result.counts() == {"Tier 1": 1, "Tier 3": 2}
        assert result.total == 3
        assert result.missing == 0

    def test_sort_by_count(self, records):
        """Most frequent value first when requested"""
        result = FacetBuilder("tier").add_all(records).build(sort_by_count=True)
        assert result.labels() == ["Tier 3", "Tier 1"]

    def test_missing_values(self, records, record_factory):
        """Empty values are counted as missing"""
        extra = records + (record_factory("dc-4", location=""),)
        result = FacetBuilder("location").add_all(extra).build()
        assert result.missing == 1
        assert "" not in result.labels()

    def test_selected_flag(self, records):
        """The selected value is marked"""
        result = FacetBuilder("tier", selected="Tier 3").add_all(records).build()
        assert [v.selected for v in result.values] == [False, True]


class TestCollectFacets:
    """Tests for collect_facets"""

    def test_locations_and_tiers(self, records):
        """Both selection lists are built together"""
        facets = collect_facets(records, selected_tier=Tier.TIER_1)
        assert facets.locations.labels() == ["London", "Virginia", "Amsterdam"]
        assert facets.tiers.labels() == ["Tier 1", "Tier 3"]
        assert facets.tiers.values[0].selected is True
