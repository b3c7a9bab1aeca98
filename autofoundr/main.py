import logging
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI

from autofoundr.config import Settings, configure_logging
from autofoundr.generator import ContentGenerator
from autofoundr.schemas import GenerateRequest, GenerateResponse

DEFAULT_IDEA = "cool product"

logger = logging.getLogger("autofoundr.service")


def create_app(generator: Optional[ContentGenerator] = None) -> FastAPI:
    """Build the generation service around `generator` (a fresh unseeded one by default)."""
    generator = generator or ContentGenerator()
    app = FastAPI(title="AutoFoundr — Generation Service")

    @app.post("/generate", response_model=GenerateResponse)
    def generate(payload: GenerateRequest):
        base = payload.idea or DEFAULT_IDEA
        logger.debug("generating bundle for idea=%r", base)
        return generator.generate(base)

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "service": "generation",
        }

    return app


settings = Settings.from_env()
app = create_app(ContentGenerator(logo_base_url=settings.logo_base_url))


@app.on_event("startup")
def setup_logging():
    configure_logging(settings.log_level)


if __name__ == "__main__":
    uvicorn.run("autofoundr.main:app", host="0.0.0.0", port=settings.app_port, reload=True)
