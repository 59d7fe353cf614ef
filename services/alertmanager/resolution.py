"""
Parameter intake for Alertmanager installations: merges the host's defaults table with caller overrides, validates the merged shape and builds the frozen parameter record. Override keys may be given as field names or as their camelCase aliases.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from models.alertmanager.params import AlertmanagerParams
from services.alertmanager.defaults import lookup_defaults, normalize_arch, normalize_os
from services.alertmanager.validators import ParameterValidationError, validate_params

logger = logging.getLogger(__name__)


def _field_key(name: str) -> str:
    return "global" if name == "global_" else name


def _known_keys() -> Dict[str, str]:
    keys: Dict[str, str] = {}
    for name, info in AlertmanagerParams.model_fields.items():
        canonical = _field_key(name)
        keys[canonical] = canonical
        if info.alias:
            keys[info.alias] = canonical
    return keys


def canonicalize_overrides(overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    known = _known_keys()
    canonical: Dict[str, Any] = {}
    for key, value in (overrides or {}).items():
        name = known.get(str(key))
        if name is None:
            raise ParameterValidationError(str(key), "a known parameter", value)
        canonical[name] = value
    return canonical


def resolve_params(
    overrides: Optional[Mapping[str, Any]] = None,
    os_name: Optional[str] = None,
    arch: Optional[str] = None,
    defaults: Optional[Mapping[str, Any]] = None,
) -> AlertmanagerParams:
    """Build the parameter record for one evaluation.

    Host facts given explicitly are normalized and win over the ones in
    the defaults table; an explicit `os`/`arch` override wins over both.
    """
    merged: Dict[str, Any] = dict(defaults if defaults is not None else lookup_defaults(os_name, arch))
    if os_name:
        merged["os"] = normalize_os(os_name)
    if arch:
        merged["arch"] = normalize_arch(arch)
    merged.update(canonicalize_overrides(overrides))

    validate_params(merged)
    merged["global_"] = merged.pop("global", {})

    params = AlertmanagerParams.model_validate(merged)
    logger.debug(
        "Resolved Alertmanager parameters version=%s os=%s arch=%s install_method=%s",
        params.version,
        params.os,
        params.arch,
        params.install_method,
    )
    return params
