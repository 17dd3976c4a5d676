import logging

from api.client import StorageClient
from api.handle_requests import RequestHandler
from app.settings import StorageSettings


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format="%(asctime)s - %(levelname)s - %(message)s")


def build_client(settings: StorageSettings, http: RequestHandler | None = None) -> StorageClient:
    if not settings.access_key:
        logging.info(f"No access key configured; requests to {settings.account} will be anonymous")
    client = StorageClient(
        settings.account,
        access_key=settings.access_key,
        service_host=settings.service_host,
        http=http,
    )
    logging.debug(f"Storage client ready for {client.base_url()}")
    return client
