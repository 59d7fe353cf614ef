"""
Shape validation for Alertmanager parameters. Every check runs before a parameter record is built or a resource is emitted; the first violation aborts the whole evaluation with an error naming the offending field.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from models.alertmanager.params import InstallMethod, ServiceEnsure

BOOLEAN_FIELDS = (
    "purge_config_dir",
    "manage_user",
    "manage_group",
    "manage_service",
    "service_enable",
    "restart_on_change",
)
SEQUENCE_FIELDS = ("templates", "receivers", "inhibit_rules", "extra_groups")
MAPPING_FIELDS = ("global", "route")
ENUM_FIELDS = {
    "install_method": frozenset(m.value for m in InstallMethod),
    "service_ensure": frozenset(s.value for s in ServiceEnsure),
}


class ParameterValidationError(ValueError):
    def __init__(self, field: str, expected: str, actual: Any) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Parameter '{field}' must be {expected}, got {type(actual).__name__}: {actual!r}"
        )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def validate_params(params: Mapping[str, Any]) -> None:
    """Raise ParameterValidationError for the first malformed field.

    `params` is keyed by field name, with `global` spelled as in the
    rendered configuration.
    """
    for field in BOOLEAN_FIELDS:
        if field in params and not isinstance(params[field], bool):
            raise ParameterValidationError(field, "a boolean", params[field])

    for field in SEQUENCE_FIELDS:
        if field in params and not _is_sequence(params[field]):
            raise ParameterValidationError(field, "a sequence", params[field])

    for field in MAPPING_FIELDS:
        if field in params and not isinstance(params[field], Mapping):
            raise ParameterValidationError(field, "a mapping", params[field])

    for field, allowed in ENUM_FIELDS.items():
        if field in params and _enum_value(params[field]) not in allowed:
            raise ParameterValidationError(field, f"one of {sorted(allowed)}", params[field])
