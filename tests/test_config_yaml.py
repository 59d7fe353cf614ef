"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import unittest

try:
    from ._env import ensure_test_env
except ImportError:
    from tests._env import ensure_test_env

ensure_test_env()

import yaml

from services.alertmanager.config_yaml import (
    TOP_LEVEL_KEYS,
    build_config_document,
    render_config_yaml,
    snake_key,
)
from services.alertmanager.resolution import resolve_params


def _params(**overrides):
    return resolve_params(overrides, os_name="linux", arch="amd64")


class ConfigYamlTests(unittest.TestCase):
    def test_top_level_keys_in_order(self):
        document = yaml.safe_load(render_config_yaml(_params()))
        self.assertEqual(list(document.keys()), list(TOP_LEVEL_KEYS))

    def test_templates_and_receivers_survive_rendering(self):
        receivers = [
            {"name": "Admin", "email_configs": [{"to": "root@localhost"}]},
            {"name": "Pager", "pagerduty_configs": [{"service_key": "abc"}]},
        ]
        params = _params(
            templates=["/etc/am/*.tmpl"],
            receivers=receivers,
            route={"receiver": "Admin", "group_by": ["cluster", "alertname"]},
        )
        document = yaml.safe_load(render_config_yaml(params))

        self.assertEqual(document["templates"], ["/etc/am/*.tmpl"])
        self.assertEqual(document["receivers"], receivers)
        self.assertEqual(document["receivers"][0]["name"], "Admin")
        self.assertEqual(document["route"]["receiver"], "Admin")
        self.assertEqual(document["route"]["group_by"], ["cluster", "alertname"])

    def test_inhibit_rule_keys_are_snake_cased(self):
        params = _params(inhibit_rules=[
            {"sourceMatch": {"severity": "critical"}, "targetMatch": {"severity": "warning"}, "equalFields": ["alertname"]},
        ])
        rule = build_config_document(params)["inhibit_rules"][0]
        self.assertEqual(rule, {
            "source_match": {"severity": "critical"},
            "target_match": {"severity": "warning"},
            "equal": ["alertname"],
        })

    def test_label_maps_are_copied_verbatim(self):
        params = _params(route={
            "receiver": "Admin",
            "groupWait": "10s",
            "routes": [{"receiver": "Admin", "match": {"serviceName": "api"}, "matchRe": {"envName": "prod.*"}}],
        })
        route = build_config_document(params)["route"]
        self.assertEqual(route["group_wait"], "10s")
        self.assertEqual(route["routes"][0]["match"], {"serviceName": "api"})
        self.assertEqual(route["routes"][0]["match_re"], {"envName": "prod.*"})

    def test_receiver_details_are_copied_verbatim(self):
        details = {"firingAlerts": "x", "Team": "ops"}
        params = _params(receivers=[
            {"name": "Admin", "email_configs": [{"to": "root@localhost", "headers": {"X-Team": "ops"}}]},
            {"name": "Pager", "pagerdutyConfigs": [{"routingKey": "abc", "details": details}]},
            {"name": "Genie", "opsgenieConfigs": [{"apiKey": "def", "details": {"runBook": "https://wiki/am"}}]},
        ])
        document = yaml.safe_load(render_config_yaml(params))
        admin, pager, genie = document["receivers"]

        self.assertEqual(admin["email_configs"][0]["headers"], {"X-Team": "ops"})
        self.assertEqual(pager["pagerduty_configs"][0], {"routing_key": "abc", "details": details})
        self.assertEqual(genie["opsgenie_configs"][0], {"api_key": "def", "details": {"runBook": "https://wiki/am"}})

    def test_snake_key(self):
        self.assertEqual(snake_key("groupBy"), "group_by")
        self.assertEqual(snake_key("emailConfigs"), "email_configs")
        self.assertEqual(snake_key("smtp_smarthost"), "smtp_smarthost")
        self.assertEqual(snake_key(42), 42)

    def test_dangling_receiver_is_logged_not_rejected(self):
        params = _params(route={"receiver": "Missing"})
        with self.assertLogs("services.alertmanager.config_yaml", level="WARNING") as logs:
            content = render_config_yaml(params)
        self.assertIn("Missing", "".join(logs.output))
        self.assertEqual(yaml.safe_load(content)["route"]["receiver"], "Missing")

    def test_rendering_does_not_reorder_sequences(self):
        templates = ["/b/*.tmpl", "/a/*.tmpl", "/c/*.tmpl"]
        document = yaml.safe_load(render_config_yaml(_params(templates=templates)))
        self.assertEqual(document["templates"], templates)


if __name__ == "__main__":
    unittest.main()
