"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

try:
    from ._env import ensure_test_env
except ImportError:
    from tests._env import ensure_test_env
ensure_test_env()

import pytest

from services.alertmanager.options import compose_launch_options
from services.alertmanager.validators import ParameterValidationError, validate_params


def test_compose_launch_options_with_storage_path():
    options = compose_launch_options("/etc/am/config.yml", "/var/lib/alertmanager", "-x")
    assert options == "-config.file=/etc/am/config.yml -storage.path=/var/lib/alertmanager -x"


def test_compose_launch_options_without_storage_path():
    assert compose_launch_options("/etc/am/config.yml", None, "-x") == "-config.file=/etc/am/config.yml -x"
    assert "-storage.path" not in compose_launch_options("/etc/am/config.yml", "", "-x")


def test_compose_launch_options_appends_extra_options_verbatim():
    options = compose_launch_options("/etc/am/config.yml", None, "  -web.listen-address=':9093' ")
    assert options == "-config.file=/etc/am/config.yml   -web.listen-address=':9093' "


def test_validate_params_rejects_string_boolean():
    with pytest.raises(ParameterValidationError) as excinfo:
        validate_params({"purge_config_dir": "true"})
    assert excinfo.value.field == "purge_config_dir"
    assert "boolean" in str(excinfo.value)


def test_validate_params_rejects_mapping_for_receivers():
    with pytest.raises(ParameterValidationError) as excinfo:
        validate_params({"receivers": {"name": "Admin"}})
    assert excinfo.value.field == "receivers"
    assert "sequence" in str(excinfo.value)


@pytest.mark.parametrize("field", ["templates", "inhibit_rules"])
def test_validate_params_rejects_scalar_for_sequences(field):
    with pytest.raises(ParameterValidationError) as excinfo:
        validate_params({field: "/etc/alertmanager/*.tmpl"})
    assert excinfo.value.field == field


@pytest.mark.parametrize("field", ["global", "route"])
def test_validate_params_rejects_sequence_for_mappings(field):
    with pytest.raises(ParameterValidationError) as excinfo:
        validate_params({field: [{"receiver": "Admin"}]})
    assert excinfo.value.field == field


def test_validate_params_checks_enums():
    with pytest.raises(ParameterValidationError):
        validate_params({"install_method": "tarball"})
    with pytest.raises(ParameterValidationError):
        validate_params({"service_ensure": "restarted"})


def test_validate_params_accepts_well_formed_values():
    validate_params({
        "purge_config_dir": False,
        "manage_user": True,
        "manage_service": True,
        "restart_on_change": False,
        "templates": ("/etc/am/*.tmpl",),
        "receivers": [{"name": "Admin"}],
        "inhibit_rules": [],
        "global": {"smtp_from": "am@example.com"},
        "route": {"receiver": "Admin"},
        "install_method": "package",
        "service_ensure": "stopped",
    })


def test_validation_error_is_a_value_error():
    assert issubclass(ParameterValidationError, ValueError)
