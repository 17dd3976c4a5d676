"""
Containers API module: request builders for container-level operations.
"""
import asyncio
import logging
from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import TYPE_CHECKING
from urllib.parse import quote

from api.errors import MissingParameterError, check_status_extract_headers_and_body
from api.options import ClientRequestIdOption, LeaseIdOption, TimeoutOption
from data.models.acl import GetACLResponse
from data.models.lease import LeaseId

if TYPE_CHECKING:
    from api.client import StorageClient


@dataclass(frozen=True)
class GetACLBuilder(TimeoutOption, ClientRequestIdOption, LeaseIdOption):
    """
    Builder for GET /{container}?restype=container&comp=acl.

    Every setter returns a new builder; the container name is the only required field
    and finalize() refuses to run without it.
    """

    client: "StorageClient"
    container_name: str | None = None
    timeout: int | None = None
    client_request_id: str | None = None
    lease_id: LeaseId | None = None

    def with_container_name(self, container_name: str) -> "GetACLBuilder":
        if not container_name:
            raise ValueError("container_name must be a non-empty string")
        return replace(self, container_name=container_name)

    def url(self) -> str:
        if self.container_name is None:
            raise MissingParameterError("container_name")
        uri = f"{self.client.base_url()}/{quote(self.container_name, safe='$')}?restype=container&comp=acl"
        timeout_param = self.to_uri_parameter()
        if timeout_param:
            uri = f"{uri}&{timeout_param}"
        return uri

    def _add_headers(self, headers: dict) -> None:
        self.add_client_request_id_header(headers)
        self.add_lease_id_header(headers)

    async def finalize(self) -> GetACLResponse:
        """
        Issue the request and parse the ACL.
        Raises MissingParameterError before any I/O when no container name was given;
        transport, status and parse failures propagate as StorageError subclasses.
        """
        uri = self.url()
        logging.debug(f"Fetching ACL for container {self.container_name}")
        response = await asyncio.to_thread(
            self.client.perform_request, uri, "GET", self._add_headers
        )
        headers, body = check_status_extract_headers_and_body(response, HTTPStatus.OK)
        return GetACLResponse.from_response(body, headers)


class ContainersAPI:
    """Container endpoints."""

    def __init__(self, client: "StorageClient"):
        self.client = client

    def get_acl(self, container_name: str | None = None) -> GetACLBuilder:
        """Start a get-ACL request, optionally with the container name already set."""
        builder = GetACLBuilder(self.client)
        if container_name is not None:
            builder = builder.with_container_name(container_name)
        return builder
