import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env at import-time so uvicorn and streamlit processes pick them up
load_dotenv()

DEFAULT_BACKEND_URL = "http://localhost:8000/generate"
DEFAULT_PROXY_URL = "http://localhost:3000/api/generate"
DEFAULT_LOGO_BASE_URL = "https://via.placeholder.com/256x256.png"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Process configuration. Components receive it explicitly instead of reading os.environ."""
    backend_url: str = DEFAULT_BACKEND_URL
    proxy_url: str = DEFAULT_PROXY_URL
    request_timeout: float = 10.0
    app_port: int = 8000
    proxy_port: int = 3000
    logo_base_url: str = DEFAULT_LOGO_BASE_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            backend_url=os.getenv("BACKEND_URL") or DEFAULT_BACKEND_URL,
            proxy_url=os.getenv("PROXY_URL") or DEFAULT_PROXY_URL,
            request_timeout=float(os.getenv("REQUEST_TIMEOUT") or "10"),
            app_port=int(os.getenv("APP_PORT") or "8000"),
            proxy_port=int(os.getenv("PROXY_PORT") or "3000"),
            logo_base_url=os.getenv("LOGO_BASE_URL") or DEFAULT_LOGO_BASE_URL,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger for the running process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
