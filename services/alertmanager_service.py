"""
Service fronting the Alertmanager manifest operations: defaults lookup, parameter resolution, download URL and launch option computation, configuration rendering and resource-graph emission. Each evaluation is a single synchronous pass that builds a fresh parameter record and hands back a description of desired host state; nothing here touches the host.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Any, Dict, Mapping, Optional

from config import config
from models.alertmanager.params import AlertmanagerParams
from models.alertmanager.resources import Manifest
from services.alertmanager.config_yaml import render_config_yaml
from services.alertmanager.defaults import lookup_defaults
from services.alertmanager.manifest import build_manifest, download_url_for, launch_options_for
from services.alertmanager.resolution import resolve_params

logger = logging.getLogger(__name__)


class AlertmanagerManifestService:
    def __init__(self) -> None:
        self.logger = logger
        self.config = config

    def defaults(self, os_name: Optional[str] = None, arch: Optional[str] = None) -> Dict[str, Any]:
        return dict(lookup_defaults(os_name, arch))

    def resolve(
        self,
        overrides: Optional[Mapping[str, Any]] = None,
        os_name: Optional[str] = None,
        arch: Optional[str] = None,
    ) -> AlertmanagerParams:
        return resolve_params(overrides, os_name=os_name, arch=arch)

    def download_url(self, params: AlertmanagerParams) -> str:
        return download_url_for(params)

    def launch_options(self, params: AlertmanagerParams) -> str:
        return launch_options_for(params)

    def render_config(self, params: AlertmanagerParams) -> str:
        return render_config_yaml(params)

    def plan(self, params: AlertmanagerParams) -> Manifest:
        return build_manifest(params)

    def plan_for(
        self,
        overrides: Optional[Mapping[str, Any]] = None,
        os_name: Optional[str] = None,
        arch: Optional[str] = None,
    ) -> Manifest:
        return self.plan(self.resolve(overrides, os_name=os_name, arch=arch))


alertmanager_manifest_service = AlertmanagerManifestService()
