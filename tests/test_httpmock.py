import io

import pytest

from utilbox.httpmock import RequestData, mock_request, new_http_request


def echo_app(environ, start_response):
    start_response("200 OK", [("Content-Type", "text/plain")])
    length = int(environ.get("CONTENT_LENGTH") or 0)
    body = environ["wsgi.input"].read(length) if length else b""
    return [b"hello!", body]


def header_app(environ, start_response):
    start_response("404 Not Found", [("x-reply", "yes")])
    return [environ.get("HTTP_X_HEAD", "").encode(), environ["PATH_INFO"].encode()]


def test_mock_request():
    w = mock_request(echo_app, "GET", "/", None)
    assert w.text == "hello!"

    w = mock_request(echo_app, "POST", "/", RequestData(body_string="body"))
    assert w.text == "hello!body"

    w = mock_request(echo_app, "POST", "/", RequestData(body=io.BytesIO(b"BODY")))
    assert w.text == "hello!BODY"


def test_mock_request_headers_and_status():
    w = mock_request(header_app, "GET", "/some/path", RequestData(headers={"x-head": "val"}))
    assert w.status_code == 404
    assert w.headers["X-Reply"] == "yes"
    assert w.text == "val/some/path"


def test_new_http_request_headers_and_before_send():
    seen = []
    req = new_http_request(
        "POST",
        "/path?a=1",
        RequestData(headers={"x-head": "val"}, body_string="data", before_send=seen.append),
    )
    assert req.headers == {"X-Head": "val"}
    assert req.body == b"data"
    assert req.request_uri == "/path?a=1"
    assert seen == [req]


def test_new_http_request_without_data():
    req = new_http_request("", "/", None)
    assert req.method == "GET"
    assert req.body is None


def test_new_http_request_invalid_method():
    with pytest.raises(ValueError):
        new_http_request("BAD METHOD", "/", None)