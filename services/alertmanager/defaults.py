"""
Default parameter table for Alertmanager installations, keyed by the host's operating system and architecture. Host facts are normalized to the naming used by upstream release archives, and the table is handed out as a read-only mapping so callers always build a fresh parameter record from it.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import platform
from types import MappingProxyType
from typing import Any, Mapping, Optional

from config import config

logger = logging.getLogger(__name__)

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "386": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "armv7",
    "armv6l": "armv6",
}

_INIT_STYLES = {
    "linux": "systemd",
    "darwin": "launchd",
}
_FALLBACK_INIT_STYLE = "sysv"


def normalize_os(value: Optional[str]) -> str:
    return str(value or "").strip().lower()


def normalize_arch(value: Optional[str]) -> str:
    normalized = str(value or "").strip().lower()
    return _ARCH_ALIASES.get(normalized, normalized)


def init_style_for(os_name: str) -> str:
    return _INIT_STYLES.get(normalize_os(os_name), _FALLBACK_INIT_STYLE)


def detect_host_facts() -> tuple[str, str]:
    os_name = config.HOST_OS or platform.system()
    arch = config.HOST_ARCH or platform.machine()
    return normalize_os(os_name), normalize_arch(arch)


def lookup_defaults(os_name: Optional[str] = None, arch: Optional[str] = None) -> Mapping[str, Any]:
    """Return the read-only defaults table for a host.

    Missing host facts are detected from the running platform (or the
    HOST_OS/HOST_ARCH settings). The table is rebuilt on every call so no
    two evaluations share nested values.
    """
    detected_os, detected_arch = detect_host_facts()
    resolved_os = normalize_os(os_name) or detected_os
    resolved_arch = normalize_arch(arch) or detected_arch
    config_dir = "/etc/alertmanager"

    table = {
        "version": config.ALERTMANAGER_DEFAULT_VERSION,
        "package_name": "alertmanager",
        "package_ensure": "latest",
        "arch": resolved_arch,
        "os": resolved_os,
        "download_extension": "tar.gz",
        "download_url_base": config.ALERTMANAGER_DOWNLOAD_URL_BASE,
        "download_url": None,
        "config_dir": config_dir,
        "config_file": f"{config_dir}/alertmanager.yaml",
        "config_mode": "0660",
        "bin_dir": config.ALERTMANAGER_BIN_DIR,
        "storage_path": "/var/lib/alertmanager",
        "purge_config_dir": True,
        "templates": [f"{config_dir}/*.tmpl"],
        "user": "alertmanager",
        "group": "alertmanager",
        "extra_groups": [],
        "manage_user": True,
        "manage_group": True,
        "init_style": init_style_for(resolved_os),
        "install_method": "url",
        "manage_service": True,
        "service_enable": True,
        "service_ensure": "running",
        "restart_on_change": True,
        "global": {
            "smtp_smarthost": "localhost:25",
            "smtp_from": "alertmanager@localhost",
        },
        "route": {
            "group_by": ["alertname", "cluster", "service"],
            "group_wait": "30s",
            "group_interval": "5m",
            "repeat_interval": "3h",
            "receiver": "Admin",
        },
        "receivers": [
            {"name": "Admin", "email_configs": [{"to": "root@localhost"}]},
        ],
        "inhibit_rules": [
            {
                "source_match": {"severity": "critical"},
                "target_match": {"severity": "warning"},
                "equal": ["alertname", "cluster", "service"],
            },
        ],
        "extra_options": "",
    }
    logger.debug("Built defaults for os=%s arch=%s", resolved_os, resolved_arch)
    return MappingProxyType(table)
