# Alertmanager subpackage: manifest operations
"""Init module."""
from . import config_yaml, defaults, download_url, manifest, options, resolution, validators

__all__ = ["config_yaml", "defaults", "download_url", "manifest", "options", "resolution", "validators"]
