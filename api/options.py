"""
Optional request parameters shared by request builders.
Each mixin contributes a fluent setter returning a new builder, plus the hook that
places the value on the wire (query parameter or header).
"""
import dataclasses
import uuid

from data.enums import HEADER_CLIENT_REQUEST_ID, HEADER_LEASE_ID
from data.models.lease import LeaseId


class TimeoutOption:
    timeout: int | None

    def with_timeout(self, timeout: int):
        """Server-side timeout in seconds, sent as the `timeout` query parameter."""
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 0:
            raise ValueError(f"timeout must be a non-negative integer, got {timeout!r}")
        return dataclasses.replace(self, timeout=timeout)

    def to_uri_parameter(self) -> str | None:
        if self.timeout is None:
            return None
        return f"timeout={self.timeout}"


class ClientRequestIdOption:
    client_request_id: str | None

    def with_client_request_id(self, client_request_id: str):
        if not client_request_id:
            raise ValueError("client_request_id must be a non-empty string")
        return dataclasses.replace(self, client_request_id=client_request_id)

    def add_client_request_id_header(self, headers: dict) -> None:
        if self.client_request_id is not None:
            headers[HEADER_CLIENT_REQUEST_ID] = self.client_request_id


class LeaseIdOption:
    lease_id: LeaseId | None

    def with_lease_id(self, lease_id: "LeaseId | uuid.UUID | str"):
        return dataclasses.replace(self, lease_id=LeaseId.parse(lease_id))

    def add_lease_id_header(self, headers: dict) -> None:
        if self.lease_id is not None:
            headers[HEADER_LEASE_ID] = str(self.lease_id)
