import socket
from unittest import mock

import pytest

from lyrickit.http import (
    USER_AGENT,
    HttpRequestError,
    build_request,
    http_get,
    http_post,
)


class FakeSocket:
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.sent = b""
        self.closed = False

    def sendall(self, data):
        self.sent += data

    def recv(self, size):
        return self.chunks.pop(0) if self.chunks else b""

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


def test_request_carries_source_user_agent():
    request = build_request("music.example.com/p", "a=1", False)
    expected = (
        "User-Agent: Mozilla/5.0 (Windows; U; Windows NT 5.1; zh-CN; rv:1.9.2.3) "
        "Gecko/20100401 Firefox/3.6.3\r\n"
    )
    assert expected in request


def test_build_get_request():
    request = build_request("music.example.com/api/search", "s=abc&limit=5", False)
    assert request == (
        "GET /api/search?s=abc&limit=5 HTTP/1.0\r\n"
        "Host: music.example.com\r\n"
        f"User-Agent: {USER_AGENT}\r\n"
        "Connection:close\r\n\r\n"
    )


def test_build_post_request():
    parameter = "s=abc&type=1"
    request = build_request("music.example.com/api/search", parameter, True)
    assert request == (
        "POST /api/search HTTP/1.0\r\n"
        "Host: music.example.com\r\n"
        f"User-Agent: {USER_AGENT}\r\n"
        "Content-Type:application/x-www-form-urlencoded\r\n"
        f"Content-Length:{len(parameter)}\r\n"
        "Connection:close\r\n\r\n"
        f"{parameter}"
    )


def test_post_content_length_counts_bytes():
    parameter = "s=你好"
    request = build_request("music.example.com/x", parameter, True)
    assert f"Content-Length:{len(parameter.encode('utf-8'))}\r\n" in request
    assert request.endswith(parameter)


def test_build_request_without_path():
    with pytest.raises(ValueError):
        build_request("music.example.com", "a=1", False)


def test_http_get_sends_request_and_joins_reply():
    fake = FakeSocket([b"HTTP/1.0 200 OK\r\n\r\n", "你好".encode("utf-8")])
    with mock.patch("socket.create_connection", return_value=fake) as connect:
        reply = http_get("music.example.com/path", "id=1")
    connect.assert_called_once_with(("music.example.com", 80))
    assert fake.sent == build_request("music.example.com/path", "id=1", False).encode("utf-8")
    assert reply == "HTTP/1.0 200 OK\r\n\r\n你好"
    assert fake.closed


def test_http_post_sends_body():
    fake = FakeSocket([b"HTTP/1.0 200 OK\r\n\r\nok"])
    with mock.patch("socket.create_connection", return_value=fake):
        reply = http_post("music.example.com/login", "name=a")
    assert fake.sent.endswith(b"name=a")
    assert fake.sent.startswith(b"POST /login HTTP/1.0\r\n")
    assert reply.endswith("ok")


def test_reply_stops_at_nul_byte():
    fake = FakeSocket([b"head\x00rest"])
    with mock.patch("socket.create_connection", return_value=fake):
        assert http_get("music.example.com/p", "") == "head"


def test_empty_reply():
    fake = FakeSocket([])
    with mock.patch("socket.create_connection", return_value=fake):
        assert http_get("music.example.com/p", "") == ""


def test_unresolvable_host_raises():
    with mock.patch("socket.create_connection", side_effect=socket.gaierror("no host")):
        with pytest.raises(HttpRequestError):
            http_get("nowhere.example.com/p", "a=1")


def test_refused_connection_raises():
    with mock.patch("socket.create_connection", side_effect=ConnectionRefusedError()):
        with pytest.raises(HttpRequestError):
            http_post("music.example.com/p", "a=1")