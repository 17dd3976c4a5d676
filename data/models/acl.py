import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from api.errors import ResponseParseError
from data.enums import (
    HEADER_BLOB_PUBLIC_ACCESS,
    HEADER_ETAG,
    HEADER_LAST_MODIFIED,
    HEADER_REQUEST_ID,
    HEADER_RESPONSE_DATE,
    HEADER_VERSION,
    PublicAccess,
)
from utils.time import parse_iso_utc, parse_rfc1123


@dataclass
class AccessPolicy:
    start: datetime | None = None
    expiry: datetime | None = None
    permission: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start.isoformat() if self.start else None,
            "expiry": self.expiry.isoformat() if self.expiry else None,
            "permission": self.permission,
        }


@dataclass
class SignedIdentifier:
    id: str
    access_policy: AccessPolicy = field(default_factory=AccessPolicy)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "access_policy": self.access_policy.to_dict()}


def _optional_time(elem: ET.Element, tag: str) -> datetime | None:
    text = elem.findtext(tag)
    if not text:
        return None
    try:
        return parse_iso_utc(text.strip())
    except ValueError as e:
        raise ResponseParseError(f"invalid {tag} timestamp in access policy: {text!r}") from e


def parse_signed_identifiers(body: bytes) -> list[SignedIdentifier]:
    """
    Parse the <SignedIdentifiers> document returned by the get-ACL call.
    An empty body means the container has no stored access policies.
    """
    if not body or not body.strip():
        return []
    try:
        root = ET.fromstring(body.decode("utf-8-sig"))
    except (ET.ParseError, UnicodeDecodeError) as e:
        raise ResponseParseError(f"malformed ACL body: {e}") from e
    if root.tag != "SignedIdentifiers":
        raise ResponseParseError(f"unexpected ACL root element <{root.tag}>")

    identifiers: list[SignedIdentifier] = []
    for elem in root.findall("SignedIdentifier"):
        ident = elem.findtext("Id")
        if not ident:
            raise ResponseParseError("signed identifier without an Id")
        policy_elem = elem.find("AccessPolicy")
        policy = AccessPolicy()
        if policy_elem is not None:
            policy = AccessPolicy(
                start=_optional_time(policy_elem, "Start"),
                expiry=_optional_time(policy_elem, "Expiry"),
                permission=policy_elem.findtext("Permission") or None,
            )
        identifiers.append(SignedIdentifier(id=ident, access_policy=policy))
    return identifiers


@dataclass
class GetACLResponse:
    public_access: PublicAccess
    etag: str
    last_modified: datetime
    request_id: str
    date: datetime
    version: str | None = None
    signed_identifiers: list[SignedIdentifier] = field(default_factory=list)

    @staticmethod
    def from_response(body: bytes, headers: Mapping[str, str]) -> "GetACLResponse":
        h = {k.lower(): v for k, v in headers.items()}

        def required(name: str) -> str:
            value = h.get(name.lower())
            if not value:
                raise ResponseParseError(f"missing response header {name}")
            return value

        def http_date(name: str) -> datetime:
            raw = required(name)
            try:
                return parse_rfc1123(raw)
            except ValueError as e:
                raise ResponseParseError(f"invalid {name} header: {raw!r}") from e

        access_raw = h.get(HEADER_BLOB_PUBLIC_ACCESS)
        if access_raw:
            try:
                public_access = PublicAccess(access_raw.lower())
            except ValueError as e:
                raise ResponseParseError(f"unknown public access level: {access_raw!r}") from e
        else:
            public_access = PublicAccess.NONE

        return GetACLResponse(
            public_access=public_access,
            etag=required(HEADER_ETAG),
            last_modified=http_date(HEADER_LAST_MODIFIED),
            request_id=required(HEADER_REQUEST_ID),
            date=http_date(HEADER_RESPONSE_DATE),
            version=h.get(HEADER_VERSION),
            signed_identifiers=parse_signed_identifiers(body),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "public_access": self.public_access.value,
            "etag": self.etag,
            "last_modified": self.last_modified.isoformat(),
            "request_id": self.request_id,
            "date": self.date.isoformat(),
            "version": self.version,
            "signed_identifiers": [s.to_dict() for s in self.signed_identifiers],
        }
