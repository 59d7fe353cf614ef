"""
Entrypoint for the Alertmanager manifest service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from config import config, constants
from middleware.error_handlers import general_exception_handler, validation_exception_handler
from middleware.limits import RequestSizeLimitMiddleware
from routers.alertmanager import alertmanager_manifest_router

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("alertmanager_manifest")

app = FastAPI(
    title="Alertmanager Manifest",
    description="Desired-state manifests for Prometheus Alertmanager hosts",
    version="1.0.0",
    docs_url="/docs" if config.ENABLE_API_DOCS else None,
    redoc_url="/redoc" if config.ENABLE_API_DOCS else None,
    openapi_url="/openapi.json" if config.ENABLE_API_DOCS else None,
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)
app.add_middleware(RequestSizeLimitMiddleware, max_bytes=config.MAX_REQUEST_BYTES)

app.include_router(alertmanager_manifest_router, prefix="/internal/v1")


@app.get("/health")
async def health() -> dict:
    return {"status": constants.STATUS_HEALTHY, "service": constants.SERVICE_NAME}


if __name__ == "__main__":
    import asyncio

    import uvicorn
    import uvloop

    asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())
    logger.info("Starting %s on %s:%s", constants.SERVICE_NAME, config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, loop="uvloop", log_level=config.LOG_LEVEL)
