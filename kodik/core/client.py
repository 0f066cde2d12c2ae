"""HTTP transport for the Kodik API."""

import logging
from typing import Any, List, NamedTuple, Sequence, Tuple, Type, TypeVar
from urllib.parse import urlparse

import niquests
from pydantic import BaseModel

from kodik.core.config import DEFAULT_API_URL, Settings, get_settings
from kodik.core.envelope import unwrap_envelope
from kodik.core.errors import HttpError, MalformedResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class OutboundRequest(NamedTuple):
    """A request ready to be sent: method, full URL and query pairs."""

    method: str
    url: str
    params: List[Tuple[str, str]]


class Client:
    """Kodik API client.

    Holds the access token, the base URL and one ``niquests.AsyncSession``.
    Nothing here changes after construction, so a single client can serve
    several concurrent queries.

    Example:
        async with Client("q8p5vnf9crt7xfyzke4iwc6r5rvsurv7") as client:
            page = await ListQuery(limit=10).execute(client)
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        *,
        proxy: str | None = None,
        timeout: int = 30,
        session: niquests.AsyncSession | None = None,
    ):
        if not api_key:
            raise ValueError("Kodik API key is required.")

        self._api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else niquests.AsyncSession()
        if proxy:
            self.session.proxies = {"http": proxy, "https": proxy}

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Client":
        """Build a client from environment-driven settings."""
        settings = settings or get_settings()
        return cls(
            settings.kodik_api_key,
            settings.kodik_api_url,
            proxy=settings.proxy,
            timeout=settings.request_timeout,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    def _is_absolute(self, target: str) -> bool:
        return urlparse(target).scheme in ("http", "https")

    def build_request(
        self, target: str, params: Sequence[Tuple[str, str]] = ()
    ) -> OutboundRequest:
        """Build a POST request for an endpoint path or a full URL.

        Paths such as ``/list`` are appended to the base URL. Absolute URLs,
        like the ``next_page`` links Kodik hands out, are used as they are.
        The ``token`` parameter is attached in both cases.
        """
        if target.startswith("//"):
            target = f"{urlparse(self.api_url).scheme}:{target}"

        url = target if self._is_absolute(target) else f"{self.api_url}{target}"
        return OutboundRequest(
            method="POST",
            url=url,
            params=[*params, ("token", self._api_key)],
        )

    async def send(self, request: OutboundRequest) -> niquests.Response:
        """Issue a request. Transport failures are raised as ``HttpError``."""
        logger.debug(
            "%s %s (%d params)", request.method, request.url, len(request.params)
        )
        try:
            return await self.session.request(
                request.method,
                request.url,
                params=request.params,
                timeout=self.timeout,
            )
        except niquests.exceptions.RequestException as exc:
            logger.error("Request to %s failed: %s", request.url, exc)
            raise HttpError(f"HTTP request to {request.url} failed: {exc}", exc) from exc

    async def fetch(self, request: OutboundRequest, response_model: Type[T]) -> T:
        """Send a request and decode its envelope into ``response_model``.

        Raises:
            HttpError: The request could not be completed.
            MalformedResponseError: The body is not a recognisable payload.
            KodikApiError: Kodik reported an error.
        """
        response = await self.send(request)
        status_code = response.status_code

        try:
            payload: Any = response.json()
        except ValueError as exc:
            logger.error(
                "Non-JSON response from %s (status %s)", request.url, status_code
            )
            raise MalformedResponseError(
                f"Response from {request.url} is not valid JSON (status {status_code})",
                exc,
                status_code=status_code,
            ) from exc

        return unwrap_envelope(payload, response_model, status_code)

    async def aclose(self) -> None:
        """Properly close the internal HTTP session."""
        if self.session:
            await self.session.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
