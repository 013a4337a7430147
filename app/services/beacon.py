import asyncio
import logging
from collections.abc import Callable

import httpx

from app.schemas.beacon import BeaconEvent, BeaconResult

logger = logging.getLogger(__name__)

_TIMEOUT = 10.0

ResultCallback = Callable[[BeaconEvent, BeaconResult], None]


class BeaconService:
    """Best-effort analytics pings to the webhook. Never raises, never gates a response."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        on_result: ResultCallback | None = None,
    ):
        self._client = client
        self._url = url
        self._on_result = on_result
        self._pending: set[asyncio.Task] = set()

    async def send(self, event: BeaconEvent) -> BeaconResult:
        if not self._url:
            result = BeaconResult(ok=False, error="webhook not configured")
        else:
            result = await self._post(event)
        if self._on_result is not None:
            try:
                self._on_result(event, result)
            except Exception:
                logger.exception("Beacon result callback failed")
        return result

    async def _post(self, event: BeaconEvent) -> BeaconResult:
        try:
            resp = await self._client.post(
                self._url,
                content=event.model_dump_json(exclude_none=True),
                headers={"Content-Type": "application/json"},
                timeout=_TIMEOUT,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Beacon %s not delivered: %s", event.type, exc)
            return BeaconResult(ok=False, error=str(exc) or type(exc).__name__)

        if resp.status_code >= 400:
            logger.warning("Beacon %s rejected (status=%s)", event.type, resp.status_code)
            return BeaconResult(ok=False, status_code=resp.status_code, error=resp.text[:200])
        return BeaconResult(ok=True, status_code=resp.status_code)

    def fire(self, event: BeaconEvent) -> asyncio.Task:
        """Schedule ``send`` and return at once."""
        task = asyncio.create_task(self.send(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for in-flight beacons; used on shutdown and in tests."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
