"""
Rendering of the Alertmanager configuration file from the alerting sections of a parameter record. The document is a structural translation of the inputs: mappings stay mappings, sequences keep their order, and camelCase structural keys are spelled the way the daemon's schema expects. Label maps, HTTP headers and receiver details are user data and are copied untouched.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, Dict, List, Set

import yaml

from models.alertmanager.params import AlertmanagerParams

logger = logging.getLogger(__name__)

TOP_LEVEL_KEYS = ("global", "route", "receivers", "inhibit_rules", "templates")

_VERBATIM_KEYS = frozenset({
    "match",
    "match_re",
    "source_match",
    "source_match_re",
    "target_match",
    "target_match_re",
    "headers",
    "details",
})
_KEY_ALIASES = {"equal_fields": "equal"}
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_key(key: object) -> object:
    if not isinstance(key, str):
        return key
    converted = _CAMEL_BOUNDARY.sub(r"_\1", key).lower() if key != key.lower() else key
    return _KEY_ALIASES.get(converted, converted)


def _translate(value: Any) -> Any:
    if isinstance(value, Mapping):
        translated: Dict[Any, Any] = {}
        for key, item in value.items():
            name = snake_key(key)
            if name in _VERBATIM_KEYS and isinstance(item, Mapping):
                translated[name] = {k: _plain(v) for k, v in item.items()}
            else:
                translated[name] = _translate(item)
        return translated
    if isinstance(value, (list, tuple)):
        return [_translate(item) for item in value]
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def route_receiver_names(route: Mapping) -> List[str]:
    names: List[str] = []
    receiver = route.get("receiver")
    if receiver:
        names.append(str(receiver))
    for child in route.get("routes") or []:
        if isinstance(child, Mapping):
            names.extend(route_receiver_names(child))
    return names


def dangling_receivers(document: Mapping) -> List[str]:
    declared: Set[str] = {
        str(r.get("name")) for r in document.get("receivers") or [] if isinstance(r, Mapping)
    }
    return [name for name in route_receiver_names(document.get("route") or {}) if name not in declared]


def build_config_document(params: AlertmanagerParams) -> Dict[str, Any]:
    document = {
        "global": _translate(params.global_),
        "route": _translate(params.route),
        "receivers": _translate(params.receivers),
        "inhibit_rules": _translate(params.inhibit_rules),
        "templates": list(params.templates),
    }
    for name in dangling_receivers(document):
        logger.warning("Route references receiver '%s' which is not declared in receivers", name)
    return document


def render_config_yaml(params: AlertmanagerParams) -> str:
    return yaml.safe_dump(
        build_config_document(params),
        default_flow_style=False,
        explicit_start=True,
        sort_keys=False,
    )
