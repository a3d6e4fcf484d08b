# 📦 main.py

from fastapi import FastAPI
from prometheus_client import start_http_server
from pydantic_settings import BaseSettings
import structlog
import uvicorn

from api import handlers
from api.handlers import router as api_router
from utils.fetch_creators import fetch_creators, CreatorFetchError

log = structlog.get_logger()

# ─────────────────────────────
# Settings
class Settings(BaseSettings):
    app_name: str = "Hush Match Engine"
    version: str = handlers.VERSION
    host: str = "0.0.0.0"
    port: int = 8000
    prometheus_port: int = 0

settings = Settings()

# ─────────────────────────────
# API Setup
app = FastAPI(title=settings.app_name, version=settings.version)
app.include_router(api_router)

# ─────────────────────────────
# Startup event
@app.on_event("startup")
async def startup_event():
    if settings.prometheus_port:
        start_http_server(settings.prometheus_port)
    try:
        handlers.set_creators(await fetch_creators())
    except CreatorFetchError as e:
        log.warning("Starting with empty creator cache", error=str(e))

# ─────────────────────────────
# Main entrypoint
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
    )
