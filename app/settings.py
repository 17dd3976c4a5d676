import os
from collections.abc import Mapping
from dataclasses import dataclass

from api.errors import ConfigError
from data.enums import DEFAULT_SERVICE_HOST


@dataclass(frozen=True)
class StorageSettings:
    account: str
    access_key: str = ""
    service_host: str = DEFAULT_SERVICE_HOST
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "StorageSettings":
        """Read settings from the environment (call load_dotenv() first to pick up .env)."""
        env = os.environ if environ is None else environ
        account = env.get("STORAGE_ACCOUNT", "").strip()
        if not account:
            raise ConfigError("STORAGE_ACCOUNT not found in environment")
        return StorageSettings(
            account=account,
            access_key=env.get("STORAGE_ACCESS_KEY", "").strip(),
            service_host=env.get("STORAGE_SERVICE_HOST", "").strip() or DEFAULT_SERVICE_HOST,
            log_level=env.get("STORAGE_LOG_LEVEL", "").strip().upper() or "INFO",
        )
