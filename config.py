"""
Configuration management for the application, loading settings from environment variables with support for defaults, type conversion, and validation. This module defines a `Config` class that encapsulates the server settings of the manifest API and the site-wide values that seed the Alertmanager defaults table: host-fact overrides, the release download location, the default release version, the binary directory and the name of the legacy service unit that is stopped on every host.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
import os
from typing import Optional

from packaging.version import InvalidVersion, Version

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = {"critical", "error", "warning", "info", "debug"}


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _env_name() -> str:
    return (os.getenv("APP_ENV") or os.getenv("ENVIRONMENT") or "development").strip().lower()


def _is_production_env() -> bool:
    return _env_name() in {"prod", "production"}


class Config:
    def __init__(self) -> None:
        self.APP_ENV: str = _env_name()
        self.IS_PRODUCTION: bool = _is_production_env()

        # Server configuration
        self.HOST: str = os.getenv("HOST", "127.0.0.1")
        self.PORT: int = int(os.getenv("PORT", "4321"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info").strip().lower()
        self.ENABLE_API_DOCS: bool = _to_bool(os.getenv("ENABLE_API_DOCS"), default=not self.IS_PRODUCTION)

        # Request protection
        self.MAX_REQUEST_BYTES: int = int(os.getenv("MAX_REQUEST_BYTES", "1048576"))

        # Host facts; empty means detect from the running platform
        self.HOST_OS: Optional[str] = os.getenv("HOST_OS") or None
        self.HOST_ARCH: Optional[str] = os.getenv("HOST_ARCH") or None

        # Alertmanager site defaults
        self.ALERTMANAGER_DEFAULT_VERSION: str = os.getenv("ALERTMANAGER_DEFAULT_VERSION", "0.5.1").strip()
        self.ALERTMANAGER_DOWNLOAD_URL_BASE: str = os.getenv(
            "ALERTMANAGER_DOWNLOAD_URL_BASE",
            "https://github.com/prometheus/alertmanager/releases",
        ).strip()
        self.ALERTMANAGER_BIN_DIR: str = os.getenv("ALERTMANAGER_BIN_DIR", "/usr/local/bin").strip()

        self.validate()

    def validate(self) -> None:
        if self.LOG_LEVEL not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Unsupported LOG_LEVEL '{self.LOG_LEVEL}'. Allowed values: {sorted(_VALID_LOG_LEVELS)}"
            )

        if not (1 <= self.PORT <= 65535):
            raise ValueError("PORT must be between 1 and 65535")

        if self.MAX_REQUEST_BYTES <= 0:
            raise ValueError("MAX_REQUEST_BYTES must be greater than 0")

        try:
            Version(self.ALERTMANAGER_DEFAULT_VERSION)
        except InvalidVersion as exc:
            raise ValueError(
                f"ALERTMANAGER_DEFAULT_VERSION '{self.ALERTMANAGER_DEFAULT_VERSION}' is not a valid version"
            ) from exc

        if not self.ALERTMANAGER_DOWNLOAD_URL_BASE.startswith(("http://", "https://")):
            raise ValueError("ALERTMANAGER_DOWNLOAD_URL_BASE must be an http(s) URL")

        if self.IS_PRODUCTION and self.ENABLE_API_DOCS:
            logger.warning("API docs are enabled in production; set ENABLE_API_DOCS=false to hide them")


class Constants:
    STATUS_HEALTHY: str = "healthy"
    SERVICE_NAME: str = "alertmanager-manifest"


config = Config()
constants = Constants()
