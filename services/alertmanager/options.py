"""
Launch options for the Alertmanager daemon.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Optional


def compose_launch_options(config_file: str, storage_path: Optional[str], extra_options: str) -> str:
    # extra_options is caller-owned: appended as given, never quoted
    if storage_path:
        return f"-config.file={config_file} -storage.path={storage_path} {extra_options}"
    return f"-config.file={config_file} {extra_options}"
