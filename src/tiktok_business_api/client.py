"""HTTP transport client for the TikTok Business API.

This module provides the single client every resource module talks
through. The client builds request URLs, attaches the access token,
executes the call and unwraps the response envelope.

Key Features:

- Access token sent in the ``Access-Token`` header, never the query string
- JSON request bodies built from Pydantic request models
- Envelope decoding with non-zero codes raised as :class:`APIError`
- Generic helpers that decode the envelope ``data`` into a typed model
- Sequential "fetch every page" aggregation for paginated endpoints

Examples:
    >>> async with Client("my-token") as client:
    ...     envelope = await client.get("/open_api/v1.3/tool/language/",
    ...                                 {"advertiser_id": "123"})
"""

import json
import logging
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Type,
    TypeVar,
)

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config.settings import Settings, get_settings
from .exceptions import (
    APIError,
    ConfigurationError,
    RequestEncodingError,
    ResponseDecodeError,
    TimeoutError,
    TransportError,
)
from .models.common import BaseAPIRequest, Envelope, PagedList
from .utils.params import QueryParams

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound=BaseModel)

ACCESS_TOKEN_HEADER = "Access-Token"
API_PREFIX = "/open_api/v1.3"


def create_timeout(seconds: float) -> httpx.Timeout:
    """Create the single per-request deadline used by the client.

    :param seconds: Timeout in seconds applied to connect, read, write and pool
    :type seconds: float
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(seconds)


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes.

    :param body: Request model, plain model, dict or list
    :type body: Any
    :return: UTF-8 encoded JSON
    :rtype: bytes
    :raises RequestEncodingError: If the body is not JSON serializable
    """
    if isinstance(body, BaseAPIRequest):
        body = body.to_body()
    elif isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True, by_alias=True)
    try:
        return json.dumps(body, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise RequestEncodingError(f"failed to marshal request body: {e}") from e


class Client:
    """Async client for the TikTok Business API.

    The client is immutable after construction and holds no per-call
    state, so one instance can serve concurrent calls.

    :param access_token: Token sent in the ``Access-Token`` header
    :type access_token: Optional[str]
    :param base_url: API host; defaults to the configured production or
        sandbox host
    :type base_url: Optional[str]
    :param http_client: Pre-configured httpx client; the caller keeps
        ownership and must close it
    :type http_client: Optional[httpx.AsyncClient]
    :param timeout: Request timeout in seconds when the client creates
        its own httpx client (default 30)
    :type timeout: Optional[float]
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        settings: Optional[Settings] = None
        if not base_url or (timeout is None and http_client is None):
            settings = get_settings()

        self._access_token = access_token or ""
        self._base_url = (base_url or settings.tiktok_api_base_url).rstrip("/")

        if http_client is None:
            seconds = timeout if timeout is not None else settings.tiktok_request_timeout
            self._http_client = httpx.AsyncClient(timeout=create_timeout(seconds))
            self._owns_http_client = True
        else:
            self._http_client = http_client
            self._owns_http_client = False

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "Client":
        """Build a client from environment configuration.

        :param settings: Settings to use; loaded from the environment if omitted
        :type settings: Optional[Settings]
        :param http_client: Optional pre-configured httpx client
        :type http_client: Optional[httpx.AsyncClient]
        :return: Configured client
        :rtype: Client
        :raises ConfigurationError: If no access token is configured
        """
        settings = settings or get_settings()
        if not settings.tiktok_access_token:
            raise ConfigurationError(
                "TIKTOK_ACCESS_TOKEN is not set", setting="tiktok_access_token"
            )
        return cls(
            access_token=settings.tiktok_access_token,
            base_url=settings.tiktok_api_base_url,
            http_client=http_client,
            timeout=settings.tiktok_request_timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        body: Any = None,
        access_token: Optional[str] = None,
        authenticate: bool = True,
    ) -> Envelope:
        """Execute one API call and return its decoded envelope.

        :param method: HTTP method
        :type method: str
        :param path: Path appended to the base URL
        :type path: str
        :param params: Query parameters
        :type params: Optional[QueryParams]
        :param body: Optional JSON body
        :type body: Any
        :param access_token: Token to use for this call instead of the
            client's own
        :type access_token: Optional[str]
        :param authenticate: Send no ``Access-Token`` header when False
        :type authenticate: bool
        :return: Decoded envelope with ``code == 0``
        :rtype: Envelope
        :raises RequestEncodingError: If the body cannot be serialized
        :raises TransportError: If the HTTP exchange fails
        :raises ResponseDecodeError: If the response is not a valid envelope
        :raises APIError: If the envelope carries a non-zero code
        """
        url = self._base_url + path
        headers: Dict[str, str] = {}
        if authenticate:
            headers[ACCESS_TOKEN_HEADER] = access_token or self._access_token

        content: Optional[bytes] = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s", method, path)
        try:
            response = await self._http_client.request(
                method,
                url,
                params=params or None,
                content=content,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(f"request to {path} timed out", original_error=e) from e
        except httpx.InvalidURL as e:
            raise TransportError(f"failed to create request: {e}", original_error=e) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"failed to execute request: {e}", original_error=e
            ) from e

        envelope = self._decode_envelope(response)
        logger.debug(
            "%s %s -> code=%s request_id=%s",
            method,
            path,
            envelope.code,
            envelope.request_id,
        )

        if not envelope.is_success:
            logger.warning(
                "API error on %s %s: code=%s message=%s request_id=%s",
                method,
                path,
                envelope.code,
                envelope.message,
                envelope.request_id,
            )
            raise APIError(
                code=envelope.code,
                message=envelope.message or "",
                request_id=envelope.request_id,
            )

        return envelope

    @staticmethod
    def _decode_envelope(response: httpx.Response) -> Envelope:
        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"failed to unmarshal response: {e}",
                status_code=response.status_code,
                response_body=response.text,
            ) from e
        try:
            return Envelope.model_validate(payload)
        except PydanticValidationError as e:
            raise ResponseDecodeError(
                f"failed to unmarshal response: {e}",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

    async def get(self, path: str, params: Optional[QueryParams] = None) -> Envelope:
        """Perform a GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self, path: str, params: Optional[QueryParams] = None, body: Any = None
    ) -> Envelope:
        """Perform a POST request."""
        return await self.request("POST", path, params=params, body=body)

    async def put(
        self, path: str, params: Optional[QueryParams] = None, body: Any = None
    ) -> Envelope:
        """Perform a PUT request."""
        return await self.request("PUT", path, params=params, body=body)

    async def delete(self, path: str, params: Optional[QueryParams] = None) -> Envelope:
        """Perform a DELETE request."""
        return await self.request("DELETE", path, params=params)

    async def aclose(self) -> None:
        """Close the underlying httpx client if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def decode_data(data: Any, result_type: Type[T]) -> T:
    """Validate an envelope ``data`` payload into ``result_type``.

    A missing payload decodes as an empty object so models whose fields
    all have defaults still come back populated.

    :param data: Raw ``data`` value from the envelope
    :type data: Any
    :param result_type: Pydantic model class or any type pydantic can validate
    :type result_type: Type[T]
    :return: Decoded value
    :rtype: T
    :raises ResponseDecodeError: If the payload does not match the type
    """
    if data is None:
        data = {}
    try:
        if isinstance(result_type, type) and issubclass(result_type, BaseModel):
            return result_type.model_validate(data)
        return TypeAdapter(result_type).validate_python(data)
    except PydanticValidationError as e:
        raise ResponseDecodeError(f"failed to unmarshal response: {e}") from e


async def do_get(
    client: Client,
    path: str,
    params: Optional[QueryParams],
    result_type: Type[T],
    **kwargs: Any,
) -> T:
    """GET ``path`` and decode the envelope data into ``result_type``.

    :param client: Transport client
    :type client: Client
    :param path: API path
    :type path: str
    :param params: Query parameters
    :type params: Optional[QueryParams]
    :param result_type: Type to decode ``data`` into
    :type result_type: Type[T]
    :param kwargs: Extra arguments passed to :meth:`Client.request`
    :return: Decoded result
    :rtype: T
    """
    envelope = await client.request("GET", path, params=params, **kwargs)
    return decode_data(envelope.data, result_type)


async def do_post(
    client: Client,
    path: str,
    body: Any,
    result_type: Type[T],
    **kwargs: Any,
) -> T:
    """POST ``body`` to ``path`` and decode the envelope data into ``result_type``.

    :param client: Transport client
    :type client: Client
    :param path: API path
    :type path: str
    :param body: Request body
    :type body: Any
    :param result_type: Type to decode ``data`` into
    :type result_type: Type[T]
    :param kwargs: Extra arguments passed to :meth:`Client.request`
    :return: Decoded result
    :rtype: T
    """
    envelope = await client.request("POST", path, body=body, **kwargs)
    return decode_data(envelope.data, result_type)


async def collect_all_pages(
    fetch: Callable[[R], Awaitable[PagedList[T]]],
    request: R,
    page_size: int = 100,
) -> List[T]:
    """Fetch every page of a paginated endpoint, one after another.

    Starts at page 1 and stops once the reported ``total_page`` is
    reached. The caller's request is copied, not modified. A failure
    on any page propagates and discards what was already fetched.

    :param fetch: Resource method returning one page
    :type fetch: Callable[[R], Awaitable[PagedList[T]]]
    :param request: Request model with ``page`` and ``page_size`` fields
    :type request: R
    :param page_size: Page size to request
    :type page_size: int
    :return: Items from all pages, in page order
    :rtype: List[T]
    """
    items: List[T] = []
    page = 1
    while True:
        page_request = request.model_copy(update={"page": page, "page_size": page_size})
        try:
            result = await fetch(page_request)
        except Exception:
            logger.debug("Aborting pagination at page %d", page)
            raise
        items.extend(result.items)
        if page >= result.page_info.total_page:
            break
        page += 1
    return items


def api_path(endpoint: str) -> str:
    """Return the versioned path for an ``/open_api/v1.3`` endpoint."""
    return f"{API_PREFIX}/{endpoint.strip('/')}/"


__all__ = [
    "ACCESS_TOKEN_HEADER",
    "Client",
    "api_path",
    "collect_all_pages",
    "create_timeout",
    "decode_data",
    "do_get",
    "do_post",
    "encode_body",
]
