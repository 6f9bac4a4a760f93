from fastapi import APIRouter, Depends, Request

from interval_lookup.db.database import IntervalStore
from interval_lookup.schemas.intervals import SelectionRequest, LookupResult
from interval_lookup.services.lookup import lookup_intervals

router = APIRouter(tags=["intervals"])


def get_store(request: Request) -> IntervalStore:
    return request.app.state.store


@router.post("/server", response_model=list[LookupResult])
async def lookup_service_intervals(selection: SelectionRequest, store: IntervalStore = Depends(get_store)):
    return await lookup_intervals(store, selection.id)
