from __future__ import annotations

import uuid

import pytest

from api.containers import GetACLBuilder
from api.errors import MissingParameterError, StorageError
from data.models.lease import LeaseId

from tests.conftest import CONTAINER_URL

LEASE = "0f4a8c1e-3b2d-4e5f-9a6b-7c8d9e0f1a2b"


def test_url_without_optional_parameters(client) -> None:
    builder = client.containers.get_acl().with_container_name("images")

    assert builder.url() == f"{CONTAINER_URL}?restype=container&comp=acl"


def test_get_acl_accepts_container_name_directly(client) -> None:
    assert client.containers.get_acl("images").url() == f"{CONTAINER_URL}?restype=container&comp=acl"


def test_custom_service_host(http) -> None:
    from api.client import StorageClient

    client = StorageClient("devacct", service_host="blob.core.chinacloudapi.cn", http=http)

    assert client.containers.get_acl("logs").url() == (
        "https://devacct.blob.core.chinacloudapi.cn/logs?restype=container&comp=acl"
    )


@pytest.mark.parametrize(
    "build",
    [
        lambda b: b.with_timeout(30).with_container_name("images").with_lease_id(LEASE),
        lambda b: b.with_container_name("images").with_client_request_id("abc").with_timeout(30),
        lambda b: b.with_lease_id(LEASE).with_client_request_id("abc").with_timeout(30).with_container_name("images"),
    ],
)
def test_timeout_appended_once_regardless_of_order(client, build) -> None:
    url = build(client.containers.get_acl()).url()

    assert url == f"{CONTAINER_URL}?restype=container&comp=acl&timeout=30"
    assert url.count("timeout=") == 1


def test_timeout_set_twice_keeps_last_value(client) -> None:
    url = client.containers.get_acl("images").with_timeout(5).with_timeout(60).url()

    assert url.endswith("&timeout=60")
    assert url.count("timeout=") == 1


def test_header_options_do_not_change_url(client) -> None:
    plain = client.containers.get_acl("images")
    decorated = plain.with_client_request_id("trace-1").with_lease_id(LEASE)

    assert decorated.url() == plain.url()


def test_header_options_add_exactly_one_header_each(client) -> None:
    headers: dict = {}
    client.containers.get_acl("images").with_client_request_id("trace-1").with_lease_id(LEASE)._add_headers(headers)

    assert headers == {"x-ms-client-request-id": "trace-1", "x-ms-lease-id": LEASE}


def test_no_header_options_add_nothing(client) -> None:
    headers: dict = {}
    client.containers.get_acl("images")._add_headers(headers)

    assert headers == {}


def test_setters_return_new_builders(client) -> None:
    original = client.containers.get_acl()
    named = original.with_container_name("images")
    timed = named.with_timeout(10)

    assert original.container_name is None
    assert named.timeout is None
    assert timed.timeout == 10
    assert timed is not named
    assert isinstance(timed, GetACLBuilder)


def test_lease_id_accepts_string_uuid_and_lease(client) -> None:
    builder = client.containers.get_acl("images")
    as_uuid = uuid.UUID(LEASE)

    assert builder.with_lease_id(LEASE).lease_id == LeaseId(as_uuid)
    assert builder.with_lease_id(as_uuid).lease_id == LeaseId(as_uuid)
    assert builder.with_lease_id(LeaseId(as_uuid)).lease_id == LeaseId(as_uuid)


def test_invalid_lease_id_rejected(client) -> None:
    with pytest.raises(ValueError):
        client.containers.get_acl("images").with_lease_id("not-a-lease")


@pytest.mark.parametrize("timeout", [-1, 1.5, "30", True])
def test_invalid_timeout_rejected(client, timeout) -> None:
    with pytest.raises(ValueError):
        client.containers.get_acl("images").with_timeout(timeout)


def test_empty_container_name_rejected(client) -> None:
    with pytest.raises(ValueError):
        client.containers.get_acl().with_container_name("")


def test_url_requires_container_name(client) -> None:
    builder = client.containers.get_acl().with_timeout(30)

    with pytest.raises(MissingParameterError) as excinfo:
        builder.url()

    assert excinfo.value.parameter == "container_name"
    assert isinstance(excinfo.value, StorageError)


@pytest.mark.parametrize("name", ["$root", "$logs", "$web"])
def test_reserved_container_names_are_not_escaped(client, name) -> None:
    assert client.containers.get_acl(name).url() == (
        f"https://myaccount.blob.core.windows.net/{name}?restype=container&comp=acl"
    )
