"""Tests for store access and seeding."""

from interval_lookup.config import settings
from interval_lookup.db.crud import get_interval_record, load_seed_file, seed_interval_records


class TestGetIntervalRecord:
    """Tests for get_interval_record."""

    async def test_returns_matching_record(self, seeded_store):
        async with seeded_store.session() as db:
            record = await get_interval_record(db, 15000)
        assert record is not None
        assert record.id == 15000
        assert record.engine_oil == [True, False, True]

    async def test_missing_returns_none(self, seeded_store):
        async with seeded_store.session() as db:
            assert await get_interval_record(db, 45000) is None


class TestSeedIntervalRecords:
    """Tests for seed_interval_records."""

    async def test_inserts_new_records(self, store, record_factory):
        async with store.session() as db:
            inserted = await seed_interval_records(db, [record_factory(5000), record_factory(10000)])
        assert inserted == 2

    async def test_existing_records_untouched(self, store, record_factory):
        async with store.session() as db:
            await seed_interval_records(db, [record_factory(5000, coolant=[True, True, True])])
        async with store.session() as db:
            inserted = await seed_interval_records(db, [record_factory(5000), record_factory(10000)])
        assert inserted == 1
        async with store.session() as db:
            record = await get_interval_record(db, 5000)
        assert record.coolant == [True, True, True]


class TestLoadSeedFile:
    """Tests for the bundled seed data."""

    def test_bundled_file_covers_every_bucket(self):
        records = load_seed_file(settings.SEED_FILE)
        assert [r.id for r in records] == [n * 5000 for n in range(1, 11)]

    def test_bundled_15000_engine_oil(self):
        records = {r.id: r for r in load_seed_file(settings.SEED_FILE)}
        assert records[15000].engine_oil == [True, False, True]
