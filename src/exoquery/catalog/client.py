from typing import Optional

import httpx
import structlog

from ..config import settings
from ..errors import FetchError, InvalidBodyRecordError
from ..models.bodies import CelestialBody

logger = structlog.get_logger(__name__)


class CatalogClient:
    """Fetches celestial body records from the Solar System OpenData API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.catalog_url
        self.timeout = timeout if timeout is not None else settings.catalog_timeout
        self.transport = transport

    async def fetch_bodies(self) -> list[CelestialBody]:
        """Fetch all bodies, returning an empty list on any failure.

        An empty result means no data is available; it is not distinguished
        from a catalog that lists zero bodies.
        """
        try:
            return await self.fetch_bodies_or_raise()
        except FetchError as e:
            logger.error("catalog_fetch_failed", url=self.base_url, error=e.reason)
            return []

    async def fetch_bodies_or_raise(self) -> list[CelestialBody]:
        """Fetch all bodies.

        Raises:
            FetchError: On transport errors, error status codes or malformed payloads
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.base_url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise FetchError(self.base_url, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise FetchError(self.base_url, f"invalid JSON ({e})") from e

        records = payload.get("bodies") if isinstance(payload, dict) else None
        if not isinstance(records, list):
            raise FetchError(self.base_url, "response has no 'bodies' list")

        bodies = []
        for index, record in enumerate(records):
            try:
                bodies.append(CelestialBody.from_record(record))
            except (TypeError, ValueError) as e:
                raise InvalidBodyRecordError(self.base_url, f"#{index}: {e}") from e

        logger.info("catalog_fetched", url=self.base_url, count=len(bodies))
        return bodies


async def fetch_bodies(base_url: Optional[str] = None) -> list[CelestialBody]:
    return await CatalogClient(base_url=base_url).fetch_bodies()
