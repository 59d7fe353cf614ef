"""
Resource-graph emission for an Alertmanager installation. Translates a validated parameter record into the ordered desired-state declarations the reconciliation engine applies: configuration directory, configuration file, the legacy service shutdown, the storage directory and the daemon installer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import List, Optional

from models.alertmanager.params import AlertmanagerParams
from models.alertmanager.resources import (
    AnyResource,
    DaemonResource,
    DirectoryResource,
    FileResource,
    Manifest,
    ResourceRef,
    ServiceResource,
)
from services.alertmanager.config_yaml import render_config_yaml
from services.alertmanager.download_url import resolve_download_url
from services.alertmanager.options import compose_launch_options

logger = logging.getLogger(__name__)

DAEMON_NAME = "alertmanager"
STORAGE_DIR_MODE = "0755"
# Service unit name used by releases before 0.3.0
LEGACY_SERVICE_NAME = "alert_manager"
MANAGED_SERVICE = ResourceRef(kind="service", title=DAEMON_NAME)


def download_url_for(params: AlertmanagerParams) -> str:
    return resolve_download_url(
        version=params.version,
        download_url_base=params.download_url_base,
        package_name=params.package_name,
        os_name=params.os,
        arch=params.arch,
        download_extension=params.download_extension,
        download_url=params.download_url,
    )


def launch_options_for(params: AlertmanagerParams) -> str:
    return compose_launch_options(params.config_file, params.storage_path, params.extra_options)


def _restart_targets(params: AlertmanagerParams) -> List[ResourceRef]:
    return [MANAGED_SERVICE] if params.restart_on_change else []


def config_dir_resource(params: AlertmanagerParams) -> DirectoryResource:
    return DirectoryResource(
        title=params.config_dir,
        owner=params.user,
        group=params.group,
        purge=params.purge_config_dir,
        recurse=params.purge_config_dir,
    )


def config_file_resource(params: AlertmanagerParams, config_dir: DirectoryResource) -> FileResource:
    return FileResource(
        title=params.config_file,
        owner=params.user,
        group=params.group,
        mode=params.config_mode,
        content=render_config_yaml(params),
        require=[config_dir.ref()],
        notify=_restart_targets(params),
    )


def legacy_service_resource() -> ServiceResource:
    return ServiceResource(title=LEGACY_SERVICE_NAME, ensure="stopped")


def storage_dir_resource(params: AlertmanagerParams) -> Optional[DirectoryResource]:
    if not params.has_storage_path:
        return None
    return DirectoryResource(
        title=params.storage_path,
        owner=params.user,
        group=params.group,
        mode=STORAGE_DIR_MODE,
    )


def daemon_resource(params: AlertmanagerParams, download_url: str, options: str) -> DaemonResource:
    return DaemonResource(
        title=DAEMON_NAME,
        installMethod=params.install_method,
        version=params.version,
        downloadExtension=params.download_extension,
        os=params.os,
        arch=params.arch,
        downloadUrl=download_url,
        binDir=params.bin_dir,
        notifyService=MANAGED_SERVICE if params.restart_on_change else None,
        packageName=params.package_name,
        packageEnsure=params.package_ensure,
        manageUser=params.manage_user,
        user=params.user,
        extraGroups=list(params.extra_groups),
        group=params.group,
        manageGroup=params.manage_group,
        purge=params.purge_config_dir,
        options=options,
        initStyle=params.init_style,
        serviceEnsure=params.service_ensure,
        serviceEnable=params.service_enable,
        manageService=params.manage_service,
    )


def build_manifest(params: AlertmanagerParams) -> Manifest:
    """Emit the desired-state declarations for one Alertmanager host.

    Declarations come out in apply order. Optional entries (the storage
    directory) are produced as None and filtered before hand-off, so the
    order of the remaining entries never changes.
    """
    download_url = download_url_for(params)
    options = launch_options_for(params)

    config_dir = config_dir_resource(params)
    candidates: List[Optional[AnyResource]] = [
        config_dir,
        config_file_resource(params, config_dir),
        legacy_service_resource(),
        storage_dir_resource(params),
        daemon_resource(params, download_url, options),
    ]
    resources = [resource for resource in candidates if resource is not None]

    logger.info(
        "Built Alertmanager manifest version=%s resources=%d restart_on_change=%s",
        params.version,
        len(resources),
        params.restart_on_change,
    )
    return Manifest(downloadUrl=download_url, options=options, resources=resources)
