"""
HTTP request handler with client-side rate limiting.
Only failed connection attempts are retried; every HTTP answer, 429 and 5xx included,
is handed back unchanged so the caller's status check sees the real outcome.
"""
import logging

import requests
from pyrate_limiter import Duration, Limiter, MemoryListBucket, RequestRate
from requests.adapters import HTTPAdapter
from requests_ratelimiter import LimiterSession
from urllib3.util.retry import Retry


class RequestHandler:
    def __init__(
        self,
        requests_per_second: int = 20,
        connect_retries: int = 2,
        backoff_factor: float = 0.8,
        request_timeout: float | tuple[float, float] | None = None,
    ):
        self.request_timeout = request_timeout
        self.limiter = Limiter(
            RequestRate(requests_per_second, Duration.SECOND),
            bucket_class=MemoryListBucket,
        )
        self.session = LimiterSession(limiter=self.limiter, per_host=False)
        self.retry = Retry(
            total=connect_retries,
            connect=connect_retries, read=0, status=0, other=0,
            backoff_factor=backoff_factor,
            respect_retry_after_header=False,
            raise_on_status=False,
        )
        self.adapter = HTTPAdapter(max_retries=self.retry)
        self.session.mount("https://", self.adapter)
        self.session.mount("http://", self.adapter)

    def request(self, method: str, url: str, headers: dict | None = None, data: bytes | None = None) -> requests.Response:
        """
        Send one request through the rate-limited session.
        requests exceptions propagate; mapping them is the client's job.
        """
        resp = self.session.request(method, url, headers=headers, data=data, timeout=self.request_timeout)
        logging.debug(f"{method} {url} -> {resp.status_code}")
        return resp

    def close(self) -> None:
        self.session.close()
