"""
Error types for the storage client plus the status gate every response passes through.
All failures surface as StorageError subclasses; nothing here retries or recovers.
"""
import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping

import requests


class StorageError(Exception):
    """Base error for every storage client failure."""


class ConfigError(StorageError):
    """Missing or invalid client configuration."""


class MissingParameterError(StorageError):
    """A required request parameter was never supplied."""

    def __init__(self, parameter: str):
        super().__init__(f"required parameter '{parameter}' is not set")
        self.parameter = parameter


class TransportError(StorageError):
    """The HTTP exchange itself failed (connection, TLS, timeout)."""


class ResponseParseError(StorageError):
    """The response had the expected status but its headers or body could not be read."""


class UnexpectedStatusError(StorageError):
    """The service answered with a status other than the one the operation expects."""

    def __init__(
        self,
        expected: int,
        status_code: int,
        headers: Mapping[str, str] | None = None,
        body: bytes = b"",
    ):
        self.expected = int(expected)
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.body = body
        self.code, self.message = _parse_error_body(body)
        detail = f"expected status {self.expected}, got {status_code}"
        if self.code:
            detail += f" ({self.code}: {self.message})"
        super().__init__(detail)


def _parse_error_body(body: bytes) -> tuple[str | None, str | None]:
    """
    Pull Code/Message out of the service's <Error> document.
    Error bodies are informational only, so anything unreadable yields (None, None).
    """
    if not body:
        return None, None
    try:
        root = ET.fromstring(body.decode("utf-8-sig"))
    except (ET.ParseError, UnicodeDecodeError):
        return None, None
    if root.tag != "Error":
        return None, None
    return root.findtext("Code"), root.findtext("Message")


def check_status_extract_headers_and_body(
    response: requests.Response, expected_status: int
) -> tuple[Mapping[str, str], bytes]:
    """
    Gate a response on its status code.
    Returns (headers, body) when the status matches; otherwise raises
    UnexpectedStatusError without attempting to interpret the body as a success payload.
    """
    body = response.content or b""
    if response.status_code != expected_status:
        logging.warning(
            f"Unexpected status {response.status_code} for "
            f"{response.url} (expected {int(expected_status)})"
        )
        raise UnexpectedStatusError(expected_status, response.status_code, response.headers, body)
    return response.headers, body
