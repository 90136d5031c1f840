"""Generic JSON resource fetching over HTTP."""

import asyncio
import logging
from typing import Generic, Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from ..errors import DecodeError, NetworkError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class NetworkResourceLoader(Generic[T]):
    """Fetch a single JSON resource and decode it into a pydantic model.

    Payload keys follow the web convention (snake_case), which is already the
    attribute convention of the models, so decoding is a direct validation.
    Date fields are parsed by the model itself from YYYY-MM-DD strings.

    One attempt per call: no retries, no caching and no timeout override.
    """

    def __init__(self, model: Type[T], session: Optional[aiohttp.ClientSession] = None):
        self.model = model
        self._session = session

    async def load_resource(self, url: str) -> T:
        """
        Fetch `url` and decode its body into the loader's model.

        Args:
            url: Absolute URL of the resource

        Returns:
            The decoded model instance

        Raises:
            NetworkError: On transport failure or a non-2xx response
            DecodeError: When the body is not valid JSON for the model
        """
        if self._session is not None:
            body = await self._get(self._session, url)
        else:
            async with aiohttp.ClientSession() as session:
                body = await self._get(session, url)
        return self.decode(url, body)

    async def _get(self, session: aiohttp.ClientSession, url: str) -> bytes:
        logger.debug("GET %s", url)
        try:
            async with session.get(url) as response:
                logger.debug("GET %s -> %s", url, response.status)
                if not 200 <= response.status < 300:
                    raise NetworkError(url, f"HTTP {response.status}", status=response.status)
                return await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e

    def decode(self, url: str, body: bytes) -> T:
        """Validate a raw JSON body against the model."""
        try:
            return self.model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(url, str(e)) from e
