"""FastAPI application entrypoint."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.database import init_db
from app.errors import ProvisioningError
from app.routers import templates

# ── Logging setup ────────────────────────────────────────────────────
_log_level = os.environ.get("ALERTPROV_LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await init_db()

    # ── Load provisioning files into DB ──────────────────────────
    if settings.sync_on_startup:
        try:
            from app.database import async_session
            from app.services.template_service import sync_templates_from_disk
            async with async_session() as session:
                result = await sync_templates_from_disk(session)
                if result["created"] or result["updated"]:
                    logger.info("Template sync: %d created, %d updated",
                                len(result["created"]), len(result["updated"]))
                if result["failed"]:
                    logger.warning("Template sync: %d failed: %s",
                                   len(result["failed"]), result["failed"])
        except Exception as exc:
            logger.warning("Template disk sync failed (non-fatal): %s", exc)

    yield


app = FastAPI(
    title="Alerting provisioning",
    description="Provisioning API for alert notification message templates",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(ProvisioningError)
async def provisioning_error_handler(request: Request, exc: ProvisioningError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Mount routers
app.include_router(templates.router, prefix="/api/provisioning/templates", tags=["provisioning"])


@app.get("/health")
async def health():
    return {"status": "ok", "service": "alertprov"}
