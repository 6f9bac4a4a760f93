import logging

from sqlalchemy.exc import SQLAlchemyError

from interval_lookup.db.crud import get_interval_record
from interval_lookup.db.database import IntervalStore
from interval_lookup.db.models import CATEGORY_FIELDS
from interval_lookup.schemas.intervals import LookupResult

logger = logging.getLogger(__name__)


class StoreUnavailableError(Exception):
    """The interval record store could not answer a query."""


async def lookup_intervals(store: IntervalStore, record_id: int) -> list[LookupResult]:
    """Return the flags for one mileage bucket as a zero- or one-element list."""
    try:
        async with store.session() as db:
            record = await get_interval_record(db, record_id)
    except SQLAlchemyError as e:
        logger.error(f"Interval lookup for id={record_id} failed: {e}", exc_info=True)
        raise StoreUnavailableError(str(e)) from e

    if record is None:
        logger.debug(f"No interval record for id={record_id}")
        return []

    return [LookupResult(**{field: getattr(record, field) for field in CATEGORY_FIELDS})]
