"""HTTP client for the bconomy data endpoint.

Every call is a single synchronous POST of a request descriptor. There is
no retry or backoff: a failure surfaces immediately as a typed error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import orjson
import requests

from bcncli.services.request_descriptor import RequestDescriptor
from bcncli.shared.constants import APIConfig, HTTPStatusCodes
from bcncli.shared.errors import (
    ErrorCode,
    ErrorContext,
    ParseError,
    RemoteError,
    TransportError,
    create_auth_error,
)

log = logging.getLogger(__name__)


class BconomyClient:
    """POSTs request descriptors to the bconomy API.

    Args:
        api_key: Value of the ``x-api-key`` header. May be empty; the
            missing key is only reported when a request is attempted.
        url: Endpoint URL
        session: Optional requests session (connection reuse, testing)
        timeout: Request timeout in seconds, ``None`` to wait indefinitely

    Example:
        >>> client = BconomyClient("my-key")
        >>> raw = client.fetch(RequestDescriptor("pet", {"id": 42}))  # doctest: +SKIP
    """

    def __init__(
        self,
        api_key: str | None,
        url: str = APIConfig.URL,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key or ""
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch(self, descriptor: RequestDescriptor | Mapping[str, Any]) -> bytes:
        """Send one request and return the raw response body.

        Raises:
            AuthError: No API key is configured (nothing is sent)
            TransportError: The request did not produce an HTTP response
            RemoteError: The endpoint answered with a non-2xx status
        """
        if not isinstance(descriptor, RequestDescriptor):
            descriptor = RequestDescriptor.from_mapping(descriptor)

        if not self.api_key:
            raise create_auth_error(operation="fetch")

        payload = descriptor.to_payload()
        context = ErrorContext(
            operation="fetch",
            additional_data={"request_type": descriptor.type},
        )
        log.debug("POST %s type=%s", self.url, descriptor.type)

        try:
            response = self._session.post(
                self.url,
                data=orjson.dumps(payload),
                headers={
                    "Content-Type": APIConfig.CONTENT_TYPE,
                    APIConfig.API_KEY_HEADER: self.api_key,
                },
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(
                ErrorCode.NETWORK_ERROR,
                f"Request to {self.url} failed: {e}",
                context,
                original_error=e,
            ) from e

        if not HTTPStatusCodes.is_success(response.status_code):
            raise RemoteError(
                ErrorCode.API_REQUEST_FAILED,
                f"API returned status {response.status_code} {response.reason or ''}".rstrip(),
                status_code=response.status_code,
                context=context,
            )

        log.debug("Received %d bytes for type=%s", len(response.content), descriptor.type)
        return response.content

    def fetch_json(self, descriptor: RequestDescriptor | Mapping[str, Any]) -> Any:
        """Fetch and decode the JSON response body.

        Raises:
            ParseError: The body is not valid JSON
        """
        raw = self.fetch(descriptor)
        return decode_json(raw, operation="fetch_json")

    def close(self) -> None:
        self._session.close()


def decode_json(raw: bytes | None, operation: str | None = None) -> Any:
    """Decode a JSON document, raising ParseError when it is absent or malformed."""
    if not raw:
        raise ParseError(
            ErrorCode.INVALID_JSON,
            "Empty response body",
            ErrorContext(operation=operation),
        )
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise ParseError(
            ErrorCode.INVALID_JSON,
            f"Malformed JSON: {e}",
            ErrorContext(operation=operation),
            original_error=e,
        ) from e
