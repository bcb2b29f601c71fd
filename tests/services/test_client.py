"""Tests for the bconomy HTTP client."""

from __future__ import annotations

from unittest.mock import Mock

import orjson
import pytest
import requests

from bcncli.services.client import BconomyClient, decode_json
from bcncli.services.request_descriptor import RequestDescriptor
from bcncli.shared.constants import APIConfig
from bcncli.shared.errors import AuthError, ErrorCode, ParseError, RemoteError, TransportError


def make_response(status_code: int = 200, content: bytes = b"{}", reason: str = "OK") -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.reason = reason
    return response


@pytest.fixture
def session(mocker) -> Mock:
    return mocker.Mock(spec=requests.Session)


class TestFetch:
    def test_posts_descriptor_with_api_key(self, session: Mock) -> None:
        session.post.return_value = make_response(content=b'{"id": 42}')
        client = BconomyClient("secret", session=session, timeout=5.0)

        raw = client.fetch(RequestDescriptor("pet", {"id": 42}))

        assert raw == b'{"id": 42}'
        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args == (APIConfig.URL,)
        assert orjson.loads(kwargs["data"]) == {"type": "pet", "id": 42}
        assert kwargs["headers"] == {"Content-Type": "application/json", "x-api-key": "secret"}
        assert kwargs["timeout"] == 5.0

    def test_accepts_plain_mapping(self, session: Mock) -> None:
        session.post.return_value = make_response()
        client = BconomyClient("secret", session=session)

        client.fetch({"type": "marketPreview"})

        assert orjson.loads(session.post.call_args.kwargs["data"]) == {"type": "marketPreview"}

    @pytest.mark.parametrize("api_key", ["", None])
    def test_missing_api_key_never_touches_network(self, session: Mock, api_key: str | None) -> None:
        client = BconomyClient(api_key, session=session)

        with pytest.raises(AuthError) as exc_info:
            client.fetch(RequestDescriptor("itemData"))

        assert exc_info.value.code == ErrorCode.API_KEY_MISSING
        session.post.assert_not_called()

    @pytest.mark.parametrize("status_code", [400, 401, 404, 500, 503])
    def test_non_success_status_raises_remote_error(self, session: Mock, status_code: int) -> None:
        session.post.return_value = make_response(status_code=status_code, reason="Nope")
        client = BconomyClient("secret", session=session)

        with pytest.raises(RemoteError) as exc_info:
            client.fetch(RequestDescriptor("pet", {"id": 1}))

        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == f"API returned status {status_code} Nope"

    def test_any_2xx_is_success(self, session: Mock) -> None:
        session.post.return_value = make_response(status_code=204, content=b"")
        client = BconomyClient("secret", session=session)

        assert client.fetch(RequestDescriptor("pet", {"id": 1})) == b""

    @pytest.mark.parametrize(
        "exception",
        [requests.exceptions.ConnectionError("refused"), requests.exceptions.Timeout("slow")],
    )
    def test_transport_failure(self, session: Mock, exception: Exception) -> None:
        session.post.side_effect = exception
        client = BconomyClient("secret", session=session)

        with pytest.raises(TransportError) as exc_info:
            client.fetch(RequestDescriptor("pet", {"id": 1}))

        assert exc_info.value.code == ErrorCode.NETWORK_ERROR
        assert exc_info.value.original_error is exception

    def test_fetch_json(self, session: Mock) -> None:
        session.post.return_value = make_response(content=b'{"pets": [], "eggs": []}')
        client = BconomyClient("secret", session=session)

        assert client.fetch_json(RequestDescriptor("userPetsAndEggs", {"id": 1})) == {"pets": [], "eggs": []}

    def test_close_closes_session(self, session: Mock) -> None:
        BconomyClient("secret", session=session).close()

        session.close.assert_called_once()


class TestDecodeJson:
    @pytest.mark.parametrize("raw", [b"", None])
    def test_empty_body(self, raw: bytes | None) -> None:
        with pytest.raises(ParseError) as exc_info:
            decode_json(raw)
        assert exc_info.value.code == ErrorCode.INVALID_JSON

    def test_malformed_body(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            decode_json(b"{not json", operation="profile")

        assert exc_info.value.context.operation == "profile"

    def test_valid_body(self) -> None:
        assert decode_json(b"[1, 2]") == [1, 2]
