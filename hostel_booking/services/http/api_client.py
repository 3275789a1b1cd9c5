"""
HTTP client for the hostel booking REST API.

Attaches the session's bearer token, (de)serializes JSON, and turns
non-2xx responses into ``APIError`` with the backend's message. Every
request is bounded by a timeout; nothing is retried here.
"""

import logging
from typing import Any, Dict, Optional, Union

import httpx

from hostel_booking.config.settings import Settings, settings as default_settings
from hostel_booking.core.exceptions import (
    APIError,
    InvalidResponseError,
    NetworkError,
    RequestTimeoutError,
)
from hostel_booking.core.session import AuthSession, default_session

logger = logging.getLogger(__name__)

JSONBody = Union[Dict[str, Any], list]


def extract_error_message(response: httpx.Response) -> str:
    """
    Best-effort human readable message from an error response.

    Uses the JSON body's ``message`` (joined when the backend returns a
    list of validation messages), falling back to the status line.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, list):
            message = "; ".join(str(item) for item in message if item)
        if message:
            return str(message)

    return f"HTTP {response.status_code}: {response.reason_phrase}"


def extract_error_code(response: httpx.Response) -> Optional[str]:
    """Structured error code from the error body, when the backend sends one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    code = body.get("code") or body.get("errorCode")
    return str(code) if code else None


class ApiClient:
    """
    Thin async wrapper over ``httpx.AsyncClient``.

    ``transport`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[AuthSession] = None,
        timeout: Optional[httpx.Timeout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        config: Optional[Settings] = None,
    ):
        config = config or default_settings
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.session = session or default_session
        self.timeout = timeout or httpx.Timeout(
            config.REQUEST_TIMEOUT_SECONDS,
            connect=config.CONNECT_TIMEOUT_SECONDS,
        )
        self._transport = transport

    def _get_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers"""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        headers.update(self.session.authorization_header())
        if extra_headers:
            headers.update(extra_headers)
        return headers

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[JSONBody] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON body"""
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}", extra={"method": method, "path": path})

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    params=params,
                    json=data,
                    headers=self._get_headers(headers),
                )
            except httpx.TimeoutException as e:
                logger.error(f"Request to {path} timed out: {e}", extra={"method": method, "path": path})
                raise RequestTimeoutError(timeout_seconds=self.timeout.read) from e
            except httpx.RequestError as e:
                logger.error(f"Request error calling {path}: {e}", extra={"method": method, "path": path})
                raise NetworkError(details={"path": path, "reason": str(e)}) from e

        if response.is_error:
            message = extract_error_message(response)
            logger.error(
                f"API error {response.status_code} on {method} {path}: {message}",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            try:
                payload = response.json()
            except ValueError:
                payload = None
            raise APIError(
                message,
                status_code=response.status_code,
                backend_code=extract_error_code(response),
                payload=payload if isinstance(payload, dict) else None,
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Invalid JSON in response from {path}",
                details={"path": path, "status_code": response.status_code},
            ) from e

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(self, path: str, data: Optional[JSONBody] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self.request("POST", path, data=data, headers=headers)

    async def put(self, path: str, data: Optional[JSONBody] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self.request("PUT", path, data=data, headers=headers)

    async def patch(self, path: str, data: Optional[JSONBody] = None, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self.request("PATCH", path, data=data, headers=headers)

    async def delete(self, path: str, headers: Optional[Dict[str, str]] = None) -> Any:
        return await self.request("DELETE", path, headers=headers)
