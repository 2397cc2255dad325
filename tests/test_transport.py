# tests/test_transport.py
import pytest
import requests

from binsta.config import ClientConfig
from binsta.exceptions import NotFoundError, UnknownError
from binsta.transport import Transport
from tests.conftest import TEST_ANON_KEY, TEST_API_URL, make_response


@pytest.fixture
def transport(session):
    config = ClientConfig(api_url=TEST_API_URL, anon_key=TEST_ANON_KEY)
    return Transport(config, token="test-token", session=session)


def test_get_sends_bearer_token(transport, session):
    session.request.return_value = make_response(200, {"id": "abc"})

    body = transport.get("/meta/files/abc")

    assert body == {"id": "abc"}
    session.request.assert_called_once_with(
        "GET",
        f"{TEST_API_URL}/meta/files/abc",
        json=None,
        data=None,
        files=None,
        headers={"authorization": "Bearer test-token"},
    )


def test_post_sends_json_body(transport, session):
    transport.post("/meta/files", json={"name": "a"})

    _, kwargs = session.request.call_args
    assert session.request.call_args.args == ("POST", f"{TEST_API_URL}/meta/files")
    assert kwargs["json"] == {"name": "a"}


def test_missing_token_is_forwarded_as_is(session):
    transport = Transport(ClientConfig(api_url=TEST_API_URL), session=session)

    transport.get("/meta/folders/root")

    assert session.request.call_args.kwargs["headers"] == {"authorization": "Bearer None"}


def test_absolute_urls_are_not_prefixed(transport, session):
    transport.put("https://storage.example.com/upload?token=t", data=b"x", headers={})

    assert session.request.call_args.args == (
        "PUT",
        "https://storage.example.com/upload?token=t",
    )
    assert session.request.call_args.kwargs["headers"] == {}


def test_anon_headers_use_anon_key(transport):
    assert transport.anon_headers == {"authorization": f"Bearer {TEST_ANON_KEY}"}


@pytest.mark.parametrize(
    "content, expected",
    [(b"", None), (b'{"ok": true}', {"ok": True}), (b"plain text", "plain text")],
)
def test_response_body_parsing(transport, session, content, expected):
    session.request.return_value = make_response(200, content)

    assert transport.get("/anything") == expected


def test_error_response_is_classified(transport, session):
    session.request.return_value = make_response(
        404, {"type": "NOT_FOUND", "message": "File not found"}
    )

    with pytest.raises(NotFoundError, match="File not found"):
        transport.get("/meta/files/missing")


def test_connection_error_becomes_unknown_error(transport, session):
    failure = requests.ConnectionError("connection refused")
    session.request.side_effect = failure

    with pytest.raises(UnknownError) as exc_info:
        transport.get("/meta/files/abc")

    assert exc_info.value.status_code is None
    assert exc_info.value.__cause__ is failure


def test_context_manager_closes_session(transport, session):
    with transport:
        pass

    session.close.assert_called_once()
