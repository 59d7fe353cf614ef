"""
Router for the Alertmanager manifest endpoints: defaults lookup, rendered configuration preview and the full desired-state manifest for a host.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict, Optional
import logging

from fastapi import APIRouter, Body, Query
from fastapi.concurrency import run_in_threadpool

from middleware.error_handlers import handle_route_errors
from models.alertmanager.requests import ManifestRequest, ManifestResponse, RenderedConfigResponse
from services.alertmanager_service import alertmanager_manifest_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/alertmanager", tags=["alertmanager"])


@router.get("/defaults")
@handle_route_errors()
async def get_defaults(
    os: Optional[str] = Query(None, description="Host operating system"),
    arch: Optional[str] = Query(None, description="Host architecture"),
) -> Dict[str, Any]:
    return alertmanager_manifest_service.defaults(os, arch)


@router.post("/config", response_model=RenderedConfigResponse)
@handle_route_errors()
async def render_config(payload: ManifestRequest = Body(...)) -> RenderedConfigResponse:
    params = await run_in_threadpool(
        alertmanager_manifest_service.resolve, payload.parameters, payload.os, payload.arch
    )
    content = await run_in_threadpool(alertmanager_manifest_service.render_config, params)
    return RenderedConfigResponse(path=params.config_file, content=content)


@router.post("/manifest", response_model=ManifestResponse)
@handle_route_errors()
async def build_manifest(payload: ManifestRequest = Body(...)) -> ManifestResponse:
    manifest = await run_in_threadpool(
        alertmanager_manifest_service.plan_for, payload.parameters, payload.os, payload.arch
    )
    logger.info("Served manifest with %d resources", len(manifest.resources))
    return ManifestResponse(
        downloadUrl=manifest.download_url,
        options=manifest.options,
        resources=manifest.to_document(),
    )
