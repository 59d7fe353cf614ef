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

from services.alertmanager.download_url import (
    InvalidVersionError,
    release_tag,
    resolve_download_url,
)

BASE = "https://github.com/prometheus/alertmanager/releases"


def _resolve(version: str, **overrides) -> str:
    kwargs = dict(
        version=version,
        download_url_base=BASE,
        package_name="alertmanager",
        os_name="linux",
        arch="amd64",
        download_extension="tar.gz",
    )
    kwargs.update(overrides)
    return resolve_download_url(**kwargs)


class DownloadUrlTests(unittest.TestCase):
    def test_versions_before_tag_prefix_use_bare_release_path(self):
        self.assertEqual(
            _resolve("0.2.1"),
            f"{BASE}/download/0.2.1/alertmanager-0.2.1.linux-amd64.tar.gz",
        )

    def test_versions_from_0_3_0_use_v_prefixed_release_path(self):
        self.assertEqual(
            _resolve("0.3.0"),
            f"{BASE}/download/v0.3.0/alertmanager-0.3.0.linux-amd64.tar.gz",
        )
        self.assertEqual(
            _resolve("0.5.1"),
            f"{BASE}/download/v0.5.1/alertmanager-0.5.1.linux-amd64.tar.gz",
        )

    def test_comparison_is_numeric_not_lexicographic(self):
        self.assertEqual(release_tag("0.10.0"), "v0.10.0")
        self.assertEqual(release_tag("0.2.10"), "0.2.10")

    def test_archive_name_always_uses_bare_version(self):
        for version in ("0.1.0", "0.3.0", "0.15.3"):
            url = _resolve(version)
            self.assertTrue(url.endswith(f"/alertmanager-{version}.linux-amd64.tar.gz"), url)

    def test_explicit_override_wins(self):
        override = "https://mirror.example.com/am.tgz"
        self.assertEqual(_resolve("0.5.1", download_url=override), override)
        self.assertEqual(_resolve("not-a-version", download_url=override), override)

    def test_malformed_version_fails_fast(self):
        with self.assertRaises(InvalidVersionError):
            _resolve("latest")
        with self.assertRaises(ValueError):
            _resolve("0.x.1")

    def test_v_prefixed_version_is_rejected(self):
        for version in ("v0.5.1", "V0.2.0"):
            with self.assertRaises(InvalidVersionError):
                _resolve(version)

    def test_version_with_surrounding_whitespace_is_rejected(self):
        for version in (" 0.5.1", "0.5.1 ", "0.5.1\n"):
            with self.assertRaises(InvalidVersionError):
                _resolve(version)

    def test_pre_release_version_is_accepted(self):
        self.assertEqual(
            _resolve("0.15.0-rc.0"),
            f"{BASE}/download/v0.15.0-rc.0/alertmanager-0.15.0-rc.0.linux-amd64.tar.gz",
        )

    def test_trailing_slash_on_base_is_ignored(self):
        self.assertEqual(_resolve("0.5.1", download_url_base=BASE + "/"), _resolve("0.5.1"))


if __name__ == "__main__":
    unittest.main()
