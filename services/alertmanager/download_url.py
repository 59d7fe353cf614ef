"""
Download URL resolution for Alertmanager release archives. Upstream switched the release path to a `v`-prefixed tag at 0.3.0 while keeping the bare version in the archive file name.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import re
from typing import Optional

from packaging.version import InvalidVersion, Version

TAG_PREFIX_SINCE = Version("0.3.0")
# Release versions as they appear in archive names: dotted numbers, optional pre-release suffix
_RELEASE_VERSION = re.compile(r"\d+(\.\d+)*(-[0-9A-Za-z.]+)?")


class InvalidVersionError(ValueError):
    pass


def parse_version(value: str) -> Version:
    text = value if isinstance(value, str) else ""
    if not _RELEASE_VERSION.fullmatch(text):
        raise InvalidVersionError(f"Invalid Alertmanager version {value!r}")
    try:
        return Version(text)
    except InvalidVersion as exc:
        raise InvalidVersionError(f"Invalid Alertmanager version {value!r}") from exc


def release_tag(version: str) -> str:
    if parse_version(version) < TAG_PREFIX_SINCE:
        return version
    return f"v{version}"


def resolve_download_url(
    version: str,
    download_url_base: str,
    package_name: str,
    os_name: str,
    arch: str,
    download_extension: str,
    download_url: Optional[str] = None,
) -> str:
    if download_url:
        return download_url

    base = download_url_base.rstrip("/")
    archive = f"{package_name}-{version}.{os_name}-{arch}.{download_extension}"
    return f"{base}/download/{release_tag(version)}/{archive}"
