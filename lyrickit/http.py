"""Minimal HTTP/1.0 GET and POST over a plain socket."""

from __future__ import annotations

import socket

HTTP_PORT = 80
HTTP_DATA_BLOCK_SIZE = 1024 * 10

USER_AGENT = (
    "Mozilla/5.0 (Windows; U; Windows NT 5.1; zh-CN; rv:1.9.2.3) "
    "Gecko/20100401 Firefox/3.6.3"
)


class HttpRequestError(Exception):
    """Raised when the host cannot be resolved or reached."""


def _split_url(url: str) -> tuple[str, str]:
    slash = url.find("/")
    if slash == -1:
        raise ValueError(f"url {url!r} has no path; expected 'host/path'")
    return url[:slash], url[slash:]


def build_request(url: str, parameter: str, is_post: bool) -> str:
    """Build the raw request for ``url`` given as ``host/path``.

    A GET carries ``parameter`` as the query string; a POST sends it as a
    form-encoded body.
    """
    host, path = _split_url(url)
    if is_post:
        return (
            f"POST {path} HTTP/1.0\r\n"
            f"Host: {host}\r\n"
            f"User-Agent: {USER_AGENT}\r\n"
            "Content-Type:application/x-www-form-urlencoded\r\n"
            f"Content-Length:{len(parameter.encode('utf-8'))}\r\n"
            "Connection:close\r\n\r\n"
            f"{parameter}"
        )
    return (
        f"GET {path}?{parameter} HTTP/1.0\r\n"
        f"Host: {host}\r\n"
        f"User-Agent: {USER_AGENT}\r\n"
        "Connection:close\r\n\r\n"
    )


def _send(host: str, request: str) -> str:
    """Send ``request`` to ``host`` and return the whole reply, headers included."""
    received = bytearray()
    try:
        with socket.create_connection((host, HTTP_PORT)) as sock:
            sock.sendall(request.encode("utf-8"))
            while chunk := sock.recv(HTTP_DATA_BLOCK_SIZE):
                received.extend(chunk)
    except OSError as exc:
        raise HttpRequestError(f"request to {host!r} failed: {exc}") from exc

    # The reply is treated as a C string: it ends at the first NUL byte.
    end = received.find(0)
    if end != -1:
        del received[end:]
    return received.decode("utf-8", errors="replace")


def http_get(url: str, parameter: str) -> str:
    """Send a GET to ``url`` (``host/path``) and return the raw reply as text."""
    host, _ = _split_url(url)
    return _send(host, build_request(url, parameter, False))


def http_post(url: str, parameter: str) -> str:
    """Send a POST to ``url`` (``host/path``) and return the raw reply as text."""
    host, _ = _split_url(url)
    return _send(host, build_request(url, parameter, True))