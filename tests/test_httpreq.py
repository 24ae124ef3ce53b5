import email.message
import io
import json
import threading
import urllib.request
import urllib.response
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from utilbox import httpreq


class _EchoHandler(BaseHTTPRequestHandler):
    def _reply(self):
        if self.path == "/missing":
            self.send_response(404)
            self.send_header("Content-Length", "0")
            self.end_headers()
            return
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length).decode("utf-8")
        payload = json.dumps(
            {
                "method": self.command,
                "path": self.path,
                "body": body,
                "content_type": self.headers.get("Content-Type"),
                "x_test": self.headers.get("X-Test"),
            }
        ).encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = _reply
    do_POST = _reply

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join()


def test_send_get_with_body(server_url):
    resp = (
        httpreq.HttpReq(server_url)
        .string_body("hi")
        .content_type(httpreq.CT_JSON)
        .with_header("X-Test", "1")
        .send("/get")
    )
    sc = resp.status
    assert httpreq.is_ok(sc)
    assert httpreq.is_successful(sc)
    assert not httpreq.is_redirect(sc)
    assert not httpreq.is_forbidden(sc)
    assert not httpreq.is_not_found(sc)
    assert not httpreq.is_client_error(sc)
    assert not httpreq.is_server_error(sc)

    data = json.loads(resp.read())
    assert data["method"] == "GET"
    assert data["path"] == "/get"
    assert data["body"] == "hi"
    assert data["content_type"] == httpreq.CT_JSON
    assert data["x_test"] == "1"


def test_must_send_post(server_url):
    resp = httpreq.HttpReq(server_url).bytes_body(b"hi").method("POST").must_send("/post")
    assert httpreq.is_ok(resp.status)
    data = json.loads(resp.read())
    assert data["method"] == "POST"
    assert data["body"] == "hi"


def test_send_not_found_returns_response(server_url):
    resp = httpreq.HttpReq(server_url).send("/missing")
    assert resp.status == 404
    assert httpreq.is_not_found(resp.status)
    assert httpreq.is_client_error(resp.status)


def test_absolute_url_ignores_base(server_url):
    resp = httpreq.HttpReq("http://invalid.example.com").send(server_url + "/abs")
    assert json.loads(resp.read())["path"] == "/abs"


def test_invalid_url_raises():
    with pytest.raises(ValueError):
        httpreq.HttpReq().send("not a url")


def test_custom_client_callable():
    captured = []

    def do(req):
        captured.append(req)
        return "response"

    result = (
        httpreq.HttpReq()
        .base_url("http://example.com")
        .client(do)
        .method("PUT")
        .with_headers({"X-A": "a"})
        .before_send(lambda r: r.add_header("X-Extra", "1"))
        .send("/path")
    )
    assert result == "response"
    req = captured[0]
    assert req.full_url == "http://example.com/path"
    assert req.get_method() == "PUT"
    assert req.get_header("X-a") == "a"
    assert req.get_header("X-extra") == "1"


def test_custom_client_object_and_bodies():
    class Client:
        def __init__(self):
            self.requests = []

        def do(self, req):
            self.requests.append(req)
            return 42

    client = Client()
    assert httpreq.HttpReq("http://example.com").client(client).json_bytes_body(b"{}").send("/j") == 42
    assert client.requests[0].data == b"{}"
    assert client.requests[0].get_header("Content-type") == httpreq.CT_JSON

    httpreq.HttpReq("http://example.com").client(client).with_body(io.BytesIO(b"data")).send("/b")
    assert client.requests[1].data == b"data"


@pytest.mark.parametrize(
    "code, ok, success, redirect, client_err, server_err",
    [
        (200, True, True, False, False, False),
        (204, False, True, False, False, False),
        (301, False, False, True, False, False),
        (302, False, False, True, False, False),
        (303, False, False, True, False, False),
        (307, False, False, True, False, False),
        (404, False, False, False, True, False),
        (500, False, False, False, False, True),
        (600, False, False, False, False, True),
    ],
)
def test_status_helpers(code, ok, success, redirect, client_err, server_err):
    assert httpreq.is_ok(code) is ok
    assert httpreq.is_successful(code) is success
    assert httpreq.is_redirect(code) is redirect
    assert httpreq.is_client_error(code) is client_err
    assert httpreq.is_server_error(code) is server_err


def test_forbidden_and_not_found():
    assert httpreq.is_forbidden(403) is True
    assert httpreq.is_forbidden(404) is False
    assert httpreq.is_not_found(404) is True


def test_build_basic_auth():
    password = "password"
    assert httpreq.build_basic_auth("user", password) == "Basic dXNlcjpwYXNzd29yZA=="


def test_add_headers_to_request():
    req = urllib.request.Request("http://abc.example.com")
    httpreq.add_headers_to_request(req, {"key0": ["val0"], "X-Multi": ["1", "2"]})
    assert req.get_header("Key0") == "val0"
    assert req.get_header("X-multi") == "1, 2"


def test_to_query_values():
    assert httpreq.to_query_values({"a": "1"}) == {"a": ["1"]}
    assert httpreq.to_query_values({"a": ["1", "2"]}) == {"a": ["1", "2"]}
    assert httpreq.to_query_values(42) == {}


def test_request_to_string():
    req = urllib.request.Request(
        "http://example.com/x", data=b"body", method="POST", headers={"X-Test": "1"}
    )
    assert httpreq.request_to_string(req) == "POST http://example.com/x\nX-test: 1\n\nbody"


def test_request_to_string_without_body():
    req = urllib.request.Request("http://example.com/")
    assert httpreq.request_to_string(req) == "GET http://example.com/\n"


def test_response_to_string():
    headers = email.message.Message()
    headers["Content-Type"] = "text/plain"
    resp = urllib.response.addinfourl(io.BytesIO(b"hello"), headers, "http://example.com/", 200)
    assert httpreq.response_to_string(resp) == "HTTP/1.1 200 OK\nContent-Type: text/plain\n\nhello"