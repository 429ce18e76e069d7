"""Tests for the mock catalog generator."""

from mocks.data_generator import MockDataGenerator
from src.ingestion.loader import CatalogLoader
from src.models.taxonomies import FOOD_TYPES, PICKUP_DAYS, PRICE_BUCKETS
from src.search.engine import FilterEngine


class TestMockDataGenerator:
    """Tests for MockDataGenerator."""

    def test_generated_catalog_is_valid(self):
        data = MockDataGenerator(seed=7).generate_catalog(25)

        loader = CatalogLoader()
        records = loader.load_data(data)

        assert len(records) == 25
        assert loader.stats["records_skipped"] == 0
        assert [r.id for r in records] == [str(i) for i in range(1, 26)]

    def test_values_come_from_taxonomies(self):
        for store in MockDataGenerator(seed=3).generate_catalog(30):
            assert store["foodType"] in FOOD_TYPES
            assert store["pickupDay"] in PICKUP_DAYS
            assert store["priceBucket"] in PRICE_BUCKETS
            assert 0 <= store["distanceMi"] <= 5.0
            assert store["discountedPrice"] < store["originalPrice"]

    def test_seed_is_reproducible(self):
        first = MockDataGenerator(seed=42).generate_catalog(5)
        second = MockDataGenerator(seed=42).generate_catalog(5)

        assert first == second

    def test_engine_filters_generated_catalog(self):
        """Test that every evaluated record honours the active filters."""
        records = CatalogLoader().load_data(MockDataGenerator(seed=11).generate_catalog(50))

        engine = FilterEngine()
        engine.set_field("pickup_day", "Today")
        engine.set_field("distance", 3.0)

        results = engine.evaluate(records)

        assert all(r.pickup_day == "Today" and r.distance_mi <= 3.0 for r in results)
        assert len(results) == sum(
            1 for r in records if r.pickup_day == "Today" and r.distance_mi <= 3.0
        )
