"""
Shared Key request signing for the blob service.
Builds the canonical string-to-sign from verb, standard headers, x-ms-* headers and
the canonicalized resource, then signs it with HMAC-SHA256 under the account key.
"""
import base64
import binascii
import hashlib
import hmac
from collections.abc import Mapping
from urllib.parse import parse_qsl, urlsplit

from api.errors import ConfigError

# Order is fixed by the service.
STANDARD_HEADERS = (
    "content-encoding",
    "content-language",
    "content-length",
    "content-md5",
    "content-type",
    "date",
    "if-modified-since",
    "if-match",
    "if-none-match",
    "if-unmodified-since",
    "range",
)


def canonicalized_headers(headers: Mapping[str, str]) -> str:
    xms = sorted(
        (k.lower(), v.strip()) for k, v in headers.items() if k.lower().startswith("x-ms-")
    )
    return "".join(f"{k}:{v}\n" for k, v in xms)


def canonicalized_resource(url: str, account: str) -> str:
    parts = urlsplit(url)
    resource = f"/{account}{parts.path or '/'}"
    params: dict[str, list[str]] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        params.setdefault(key.lower(), []).append(value)
    for key in sorted(params):
        resource += f"\n{key}:{','.join(sorted(params[key]))}"
    return resource


def string_to_sign(method: str, url: str, headers: Mapping[str, str], account: str) -> str:
    lowered = {k.lower(): v for k, v in headers.items()}
    standard = []
    for name in STANDARD_HEADERS:
        value = lowered.get(name, "")
        if name == "content-length" and value == "0":
            value = ""
        standard.append(value)
    return (
        method.upper()
        + "\n"
        + "\n".join(standard)
        + "\n"
        + canonicalized_headers(headers)
        + canonicalized_resource(url, account)
    )


def sign(payload: str, access_key: str) -> str:
    try:
        key = base64.b64decode(access_key, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigError("storage access key is not valid base64") from e
    digest = hmac.new(key, payload.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def authorization_header(
    method: str, url: str, headers: Mapping[str, str], account: str, access_key: str
) -> str:
    signature = sign(string_to_sign(method, url, headers, account), access_key)
    return f"SharedKey {account}:{signature}"
