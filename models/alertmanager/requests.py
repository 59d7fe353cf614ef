"""
Request models for the Alertmanager manifest API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ManifestRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    os: Optional[str] = None
    arch: Optional[str] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)


class ManifestResponse(BaseModel):
    downloadUrl: str
    options: str
    resources: List[Dict[str, Any]] = Field(default_factory=list)


class RenderedConfigResponse(BaseModel):
    path: str
    content: str
