"""Requests to a local whitelisting service over plain HTTP."""

from __future__ import annotations

SERVICE_PORT = 26762
OK_RESPONSE = '["OK"]'

_ACTIONS = ("add", "remove")
_HEADER_ENDS = ("\r\n\r\n", "\n\r\n\r")


def parse_url(url: str) -> tuple[str, str, str]:
    """Split a URL into server name, file path and file name."""
    if url.startswith("http://"):
        url = url[len("http://"):]
    if url.startswith("https://"):
        url = url[len("https://"):]
    slash = url.find("/")
    if slash < 0:
        return url, "/", ""
    server = url[:slash]
    filepath = url[slash:]
    filename = filepath[filepath.rfind("/") + 1:]
    return server, filepath, filename


def header_length(content: str) -> int:
    """Length of the HTTP header including its blank line, or -1 if absent."""
    for end in _HEADER_ENDS:
        position = content.find(end)
        if position >= 0:
            return position + len(end)
    return -1


def strip_header(response: str) -> str:
    """The body of a raw response, cut at the first NUL character.

    A response without a header end yields an empty body.
    """
    length = header_length(response)
    if length < 0:
        return ""
    return response[length:].split("\0", 1)[0]


def whitelist_path(action: str, pid: int) -> str:
    """The service URL that adds or removes process ``pid``."""
    if action not in _ACTIONS:
        raise ValueError(f"unknown whitelist action: {action!r}")
    if pid < 0:
        raise ValueError(f"invalid process id: {pid}")
    return f"http://localhost/api/v1/hidguardian/whitelist/{action}/{pid}"