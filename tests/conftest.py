"""
Shared fixtures for the service interval tests.

Each test gets its own file-backed SQLite store, so nothing leaks between
tests and no database server is needed.
"""
import httpx
import pytest

from interval_lookup.api.routes_server import get_store
from interval_lookup.db.crud import seed_interval_records
from interval_lookup.db.database import IntervalStore
from interval_lookup.main import app
from interval_lookup.schemas.intervals import IntervalRecordIn

ALL_DUE = [True, True, True]
NONE_DUE = [False, False, False]


def make_record(record_id: int, **overrides) -> IntervalRecordIn:
    """Build a seed record with nothing due unless overridden (snake_case field names)."""
    fields = {
        "engine_oil": NONE_DUE,
        "tire_rotation": NONE_DUE,
        "brake_fluid": NONE_DUE,
        "transmission_fluid": NONE_DUE,
        "differential_fluid": NONE_DUE,
        "coolant": NONE_DUE,
        "air_filter": NONE_DUE,
        "cabin_filter": NONE_DUE,
    }
    fields.update(overrides)
    return IntervalRecordIn(id=record_id, **fields)


SEED_RECORDS = [
    make_record(15000, engine_oil=[True, False, True], tire_rotation=ALL_DUE, cabin_filter=ALL_DUE),
    make_record(30000, engine_oil=[True, False, True], brake_fluid=ALL_DUE, coolant=[True, True, False]),
]


@pytest.fixture
async def store(tmp_path):
    """An empty store with tables created."""
    store = IntervalStore(f"sqlite+aiosqlite:///{tmp_path / 'intervals.db'}")
    await store.create_tables()
    yield store
    await store.dispose()


@pytest.fixture
async def seeded_store(store):
    async with store.session() as db:
        await seed_interval_records(db, SEED_RECORDS)
    return store


@pytest.fixture
def use_store():
    """Inject a store into the app for the duration of a test."""
    def _use(store):
        app.dependency_overrides[get_store] = lambda: store
    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
async def http_client():
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def client(seeded_store, use_store, http_client):
    use_store(seeded_store)
    return http_client


@pytest.fixture
def record_factory():
    return make_record
