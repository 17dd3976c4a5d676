"""
Storage client: holds account credentials and the shared HTTP handler, signs and sends
requests, and mounts the container sub-API.
"""
import logging
from collections.abc import Callable

import requests

from api.containers import ContainersAPI
from api.errors import ConfigError, TransportError
from api.handle_requests import RequestHandler
from data.enums import DEFAULT_SERVICE_HOST, HEADER_AUTHORIZATION, HEADER_DATE, HEADER_VERSION, SERVICE_VERSION
from utils.signing import authorization_header
from utils.time import utc_now_rfc1123


class StorageClient:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(
        self,
        account: str,
        access_key: str = "",
        service_host: str = DEFAULT_SERVICE_HOST,
        http: RequestHandler | None = None,
    ):
        if not account:
            raise ConfigError("storage account name is required")
        self._account = account
        self._access_key = access_key
        self.service_host = service_host
        self.http = http or RequestHandler()
        self.containers = ContainersAPI(self)

    @property
    def account(self) -> str:
        return self._account

    def base_url(self) -> str:
        return f"https://{self._account}.{self.service_host}"

    def perform_request(
        self,
        uri: str,
        method: str,
        headers_func: Callable[[dict], None] | None = None,
        body: bytes | None = None,
    ) -> requests.Response:
        """
        Sign and send a request.
        headers_func receives the header dict before signing so option headers are covered
        by the signature. Anonymous (unsigned) when the client has no access key.
        """
        headers = {
            HEADER_DATE: utc_now_rfc1123(),
            HEADER_VERSION: SERVICE_VERSION,
        }
        if body is not None:
            headers["Content-Length"] = str(len(body))
        if headers_func is not None:
            headers_func(headers)
        if self._access_key:
            headers[HEADER_AUTHORIZATION] = authorization_header(
                method, uri, headers, self._account, self._access_key
            )

        logging.debug(f"Performing {method} {uri}")
        try:
            return self.http.request(method, uri, headers=headers, data=body)
        except requests.RequestException as e:
            raise TransportError(f"{method} {uri} failed: {e}") from e
