import logging
from datetime import datetime
from typing import Optional

import requests
import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from autofoundr.config import Settings, configure_logging
from autofoundr.errors import ProxyError
from autofoundr.schemas import ErrorResponse

PROXY_FAILED = "backend proxy failed"

logger = logging.getLogger("autofoundr.proxy")


class BackendProxy:
    """Relays a client body to the generation service and hands back its JSON.

    Never retries. Every failure (transport, non-2xx, undecodable body) is
    logged here and surfaces to the caller as a single ProxyError.
    """

    def __init__(self, target_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.target_url = target_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def forward(self, body: bytes):
        headers = {"Content-Type": "application/json"}
        try:
            resp = self.session.post(self.target_url, data=body if body.strip() else b"{}", headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.exceptions.RequestException as e:
            # JSON decode errors from requests are RequestException subclasses too
            logger.error("proxy to %s failed: %s", self.target_url, e)
            raise ProxyError(PROXY_FAILED) from e
        except ValueError as e:
            logger.error("proxy to %s returned invalid JSON: %s", self.target_url, e)
            raise ProxyError(PROXY_FAILED) from e


def create_proxy_app(settings: Settings, session: Optional[requests.Session] = None) -> FastAPI:
    """Build the proxy app. The backend target comes from `settings`, never from the environment."""
    proxy = BackendProxy(settings.backend_url, timeout=settings.request_timeout, session=session)
    app = FastAPI(title="AutoFoundr — Proxy")
    app.state.proxy = proxy

    @app.post("/api/generate", responses={500: {"model": ErrorResponse}})
    async def proxy_generate(request: Request):
        body = await request.body()
        try:
            data = await run_in_threadpool(proxy.forward, body)
        except ProxyError as e:
            return JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())
        return JSONResponse(status_code=200, content=data)

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "service": "proxy",
            "backend_url": proxy.target_url,
        }

    return app


settings = Settings.from_env()
app = create_proxy_app(settings)


@app.on_event("startup")
def setup_logging():
    configure_logging(settings.log_level)


if __name__ == "__main__":
    uvicorn.run("autofoundr.proxy:app", host="0.0.0.0", port=settings.proxy_port, reload=True)
