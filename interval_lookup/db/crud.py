import json
import logging
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from interval_lookup.db.models import IntervalRecord, CATEGORY_FIELDS
from interval_lookup.schemas.intervals import IntervalRecordIn

logger = logging.getLogger(__name__)


# --- Lookup ---

async def get_interval_record(db: AsyncSession, record_id: int) -> IntervalRecord | None:
    result = await db.execute(select(IntervalRecord).where(IntervalRecord.id == record_id))
    return result.scalar_one_or_none()


# --- Seeding ---

def load_seed_file(path: Path) -> list[IntervalRecordIn]:
    """Read and validate interval records from a JSON seed file."""
    with open(path) as f:
        data = json.load(f)
    return [IntervalRecordIn.model_validate(item) for item in data]


async def seed_interval_records(db: AsyncSession, records: list[IntervalRecordIn]) -> int:
    """Insert records whose id is not stored yet. Returns the number inserted."""
    inserted = 0
    for record in records:
        existing = await db.get(IntervalRecord, record.id)
        if existing:
            continue
        db.add(IntervalRecord(
            id=record.id,
            **{field: list(getattr(record, field)) for field in CATEGORY_FIELDS},
        ))
        inserted += 1
    await db.commit()
    logger.info(f"Seeded {inserted} interval record(s), {len(records) - inserted} already present")
    return inserted
