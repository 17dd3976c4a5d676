"""Shared pytest fixtures for the storage client tests."""

from __future__ import annotations

import base64
from collections.abc import Iterator

import pytest

from api.client import StorageClient
from api.handle_requests import RequestHandler

ACCOUNT = "myaccount"
ACCESS_KEY = base64.b64encode(b"test-account-key-material").decode("ascii")
CONTAINER_URL = f"https://{ACCOUNT}.blob.core.windows.net/images"

ACL_BODY = (
    b"\xef\xbb\xbf<?xml version=\"1.0\" encoding=\"utf-8\"?>"
    b"<SignedIdentifiers>"
    b"<SignedIdentifier><Id>read-only</Id><AccessPolicy>"
    b"<Start>2018-08-01T00:00:00.0000000Z</Start>"
    b"<Expiry>2018-09-01T12:30:00.1234567Z</Expiry>"
    b"<Permission>rl</Permission>"
    b"</AccessPolicy></SignedIdentifier>"
    b"<SignedIdentifier><Id>no-policy</Id></SignedIdentifier>"
    b"</SignedIdentifiers>"
)


def acl_headers(**overrides: str) -> dict[str, str]:
    headers = {
        "ETag": '"0x8D60C0E1B2C3D4E"',
        "Last-Modified": "Mon, 27 Aug 2018 10:10:10 GMT",
        "x-ms-request-id": "3a1b7c2e-0001-0000-0000-000000000000",
        "x-ms-version": "2018-03-28",
        "Date": "Mon, 27 Aug 2018 10:15:00 GMT",
        "x-ms-blob-public-access": "container",
    }
    headers.update(overrides)
    return headers


@pytest.fixture()
def http() -> Iterator[RequestHandler]:
    handler = RequestHandler(requests_per_second=100, connect_retries=0)
    yield handler
    handler.close()


@pytest.fixture()
def client(http: RequestHandler) -> StorageClient:
    return StorageClient(ACCOUNT, access_key=ACCESS_KEY, http=http)


@pytest.fixture()
def anonymous_client(http: RequestHandler) -> StorageClient:
    return StorageClient(ACCOUNT, http=http)
