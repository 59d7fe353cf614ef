"""
Module defines the Pydantic parameter record describing one Alertmanager installation on a host: release and download metadata, filesystem layout, system identity, service control and the alerting sections rendered into the daemon's configuration file. The record is frozen once built; every change produces a new record and a new evaluation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from collections.abc import Mapping as MappingABC
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

DESC_VERSION = "Alertmanager release version"
DESC_PACKAGE_NAME = "Package or archive name of the daemon"
DESC_PACKAGE_ENSURE = "Desired package state when installing from a package"
DESC_ARCH = "Release architecture (amd64, 386, arm64, ...)"
DESC_OS = "Release operating system (linux, darwin, ...)"
DESC_DOWNLOAD_EXTENSION = "Release archive extension"
DESC_DOWNLOAD_URL_BASE = "Base URL of the upstream release page"
DESC_DOWNLOAD_URL = "Explicit download URL overriding the computed one"
DESC_CONFIG_DIR = "Directory holding the configuration file and templates"
DESC_CONFIG_FILE = "Path of the rendered configuration file"
DESC_CONFIG_MODE = "File mode of the configuration file"
DESC_BIN_DIR = "Directory the daemon binary is placed in"
DESC_STORAGE_PATH = "Data directory passed as -storage.path"
DESC_PURGE_CONFIG_DIR = "Remove unmanaged files from the configuration directory"
DESC_TEMPLATES = "Notification template globs"
DESC_USER = "System user running the daemon"
DESC_GROUP = "System group running the daemon"
DESC_EXTRA_GROUPS = "Additional groups for the daemon user"
DESC_MANAGE_USER = "Whether the user is created and managed"
DESC_MANAGE_GROUP = "Whether the group is created and managed"
DESC_INIT_STYLE = "Service manager flavour (systemd, sysv, launchd, ...)"
DESC_INSTALL_METHOD = "How the daemon is installed"
DESC_MANAGE_SERVICE = "Whether the service unit is managed"
DESC_SERVICE_ENABLE = "Whether the service starts at boot"
DESC_SERVICE_ENSURE = "Desired running state of the service"
DESC_RESTART_ON_CHANGE = "Restart the service when configuration changes"
DESC_GLOBAL = "Global section of the Alertmanager configuration"
DESC_ROUTE = "Routing tree of the Alertmanager configuration"
DESC_RECEIVERS = "Receivers of the Alertmanager configuration"
DESC_INHIBIT_RULES = "Inhibition rules of the Alertmanager configuration"
DESC_EXTRA_OPTIONS = "Extra command line flags appended verbatim"


def freeze(value: Any) -> Any:
    if isinstance(value, MappingABC):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


class InstallMethod(str, Enum):
    URL = "url"
    PACKAGE = "package"


class ServiceEnsure(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class AlertmanagerParams(BaseModel):
    version: str = Field(..., description=DESC_VERSION)
    package_name: str = Field(..., alias="packageName", description=DESC_PACKAGE_NAME)
    package_ensure: str = Field("latest", alias="packageEnsure", description=DESC_PACKAGE_ENSURE)
    arch: str = Field(..., description=DESC_ARCH)
    os: str = Field(..., description=DESC_OS)
    download_extension: str = Field(..., alias="downloadExtension", description=DESC_DOWNLOAD_EXTENSION)
    download_url_base: str = Field(..., alias="downloadUrlBase", description=DESC_DOWNLOAD_URL_BASE)
    download_url: Optional[str] = Field(None, alias="downloadUrl", description=DESC_DOWNLOAD_URL)

    config_dir: str = Field(..., alias="configDir", description=DESC_CONFIG_DIR)
    config_file: str = Field(..., alias="configFile", description=DESC_CONFIG_FILE)
    config_mode: str = Field(..., alias="configMode", description=DESC_CONFIG_MODE)
    bin_dir: str = Field(..., alias="binDir", description=DESC_BIN_DIR)
    storage_path: Optional[str] = Field(None, alias="storagePath", description=DESC_STORAGE_PATH)
    purge_config_dir: StrictBool = Field(True, alias="purgeConfigDir", description=DESC_PURGE_CONFIG_DIR)
    templates: Tuple[str, ...] = Field(default_factory=tuple, description=DESC_TEMPLATES)

    user: str = Field(..., description=DESC_USER)
    group: str = Field(..., description=DESC_GROUP)
    extra_groups: Tuple[str, ...] = Field(default_factory=tuple, alias="extraGroups", description=DESC_EXTRA_GROUPS)
    manage_user: StrictBool = Field(True, alias="manageUser", description=DESC_MANAGE_USER)
    manage_group: StrictBool = Field(True, alias="manageGroup", description=DESC_MANAGE_GROUP)

    init_style: str = Field(..., alias="initStyle", description=DESC_INIT_STYLE)
    install_method: InstallMethod = Field(InstallMethod.URL, alias="installMethod", description=DESC_INSTALL_METHOD)
    manage_service: StrictBool = Field(True, alias="manageService", description=DESC_MANAGE_SERVICE)
    service_enable: StrictBool = Field(True, alias="serviceEnable", description=DESC_SERVICE_ENABLE)
    service_ensure: ServiceEnsure = Field(ServiceEnsure.RUNNING, alias="serviceEnsure", description=DESC_SERVICE_ENSURE)
    restart_on_change: StrictBool = Field(True, alias="restartOnChange", description=DESC_RESTART_ON_CHANGE)

    global_: Mapping[str, Any] = Field(default_factory=dict, alias="global", description=DESC_GLOBAL)
    route: Mapping[str, Any] = Field(default_factory=dict, description=DESC_ROUTE)
    receivers: Tuple[Mapping[str, Any], ...] = Field(default_factory=tuple, description=DESC_RECEIVERS)
    inhibit_rules: Tuple[Mapping[str, Any], ...] = Field(default_factory=tuple, alias="inhibitRules", description=DESC_INHIBIT_RULES)

    extra_options: str = Field("", alias="extraOptions", description=DESC_EXTRA_OPTIONS)

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True, frozen=True, extra="forbid", validate_default=True)

    @field_validator("global_", "route", "receivers", "inhibit_rules")
    @classmethod
    def _freeze_alerting_sections(cls, value: Any) -> Any:
        # nested sections are read-only as well
        return freeze(value)

    @property
    def has_storage_path(self) -> bool:
        return bool(self.storage_path)
