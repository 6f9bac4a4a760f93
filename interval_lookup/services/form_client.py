import enum
import logging

import httpx

from interval_lookup.services.display import DisplayState, TableRow, render_rows

logger = logging.getLogger(__name__)

LOOKUP_PATH = "/server"


class ClientStatus(enum.Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class FormClient:
    """Submits mileage selections and keeps the display state for the result table.

    Every submit takes a sequence number. Only the response to the latest
    submit may replace the display state; earlier responses arriving late
    are dropped.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http
        self._sequence = 0
        self._in_flight = 0
        self.state = DisplayState()

    @property
    def status(self) -> ClientStatus:
        return ClientStatus.AWAITING_RESPONSE if self._in_flight else ClientStatus.IDLE

    async def submit(self, bucket_id: int | str) -> bool:
        """Look up one bucket. Returns False when the response was stale and discarded."""
        self._sequence += 1
        ticket = self._sequence
        self._in_flight += 1
        try:
            new_state = await self._fetch(bucket_id)
        finally:
            self._in_flight -= 1

        if ticket != self._sequence:
            logger.debug(f"Discarding stale response for submit #{ticket} (latest #{self._sequence})")
            return False
        self.state = new_state
        return True

    async def _fetch(self, bucket_id: int | str) -> DisplayState:
        try:
            response = await self._http.post(LOOKUP_PATH, json={"id": bucket_id})
            response.raise_for_status()
            return DisplayState.from_results(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # Failed lookups clear the table; the user submits again
            logger.warning(f"Lookup for bucket {bucket_id} failed: {e}")
            return DisplayState()

    def render_rows(self) -> list[TableRow]:
        return render_rows(self.state)
