"""
Module defines Pydantic models for the desired-state declarations handed to the external reconciliation engine: directories, files, services and the daemon installer, plus the ordered manifest that carries them.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

DESC_RESOURCE_TITLE = "Unique title of the resource within its kind"
DESC_OWNER = "Owning user"
DESC_GROUP = "Owning group"
DESC_MODE = "Permission mode"
DESC_REQUIRE = "Resources that must be applied first"
DESC_NOTIFY = "Resources refreshed when this resource changes"


class ResourceRef(BaseModel):
    kind: str
    title: str
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.kind.capitalize()}[{self.title}]"


class Resource(BaseModel):
    title: str = Field(..., description=DESC_RESOURCE_TITLE)
    require: List[ResourceRef] = Field(default_factory=list, description=DESC_REQUIRE)
    notify: List[ResourceRef] = Field(default_factory=list, description=DESC_NOTIFY)
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_serializer("require", "notify")
    def _serialize_refs(self, refs: List[ResourceRef]) -> List[str]:
        return [str(ref) for ref in refs]

    def ref(self) -> ResourceRef:
        return ResourceRef(kind=self.kind, title=self.title)


class DirectoryResource(Resource):
    kind: Literal["directory"] = "directory"
    ensure: Literal["directory"] = "directory"
    owner: str = Field(..., description=DESC_OWNER)
    group: str = Field(..., description=DESC_GROUP)
    mode: Optional[str] = Field(None, description=DESC_MODE)
    purge: bool = Field(False, description="Remove files not declared by the manifest")
    recurse: bool = Field(False, description="Apply management recursively")


class FileResource(Resource):
    kind: Literal["file"] = "file"
    ensure: Literal["present"] = "present"
    owner: str = Field(..., description=DESC_OWNER)
    group: str = Field(..., description=DESC_GROUP)
    mode: str = Field(..., description=DESC_MODE)
    content: str = Field(..., description="Rendered file content")


class ServiceResource(Resource):
    kind: Literal["service"] = "service"
    ensure: Literal["running", "stopped"] = "stopped"


class DaemonResource(Resource):
    kind: Literal["daemon"] = "daemon"
    install_method: str = Field(..., alias="installMethod")
    version: str
    download_extension: str = Field(..., alias="downloadExtension")
    os: str
    arch: str
    download_url: str = Field(..., alias="downloadUrl")
    bin_dir: str = Field(..., alias="binDir")
    notify_service: Optional[ResourceRef] = Field(None, alias="notifyService")
    package_name: str = Field(..., alias="packageName")
    package_ensure: str = Field(..., alias="packageEnsure")
    manage_user: bool = Field(..., alias="manageUser")
    user: str
    extra_groups: List[str] = Field(default_factory=list, alias="extraGroups")
    group: str
    manage_group: bool = Field(..., alias="manageGroup")
    purge: bool
    options: str
    init_style: str = Field(..., alias="initStyle")
    service_ensure: str = Field(..., alias="serviceEnsure")
    service_enable: bool = Field(..., alias="serviceEnable")
    manage_service: bool = Field(..., alias="manageService")

    @field_serializer("notify_service")
    def _serialize_notify_service(self, ref: Optional[ResourceRef]) -> Optional[str]:
        return str(ref) if ref is not None else None


AnyResource = Union[DirectoryResource, FileResource, ServiceResource, DaemonResource]


class Manifest(BaseModel):
    download_url: str = Field(..., alias="downloadUrl", description="Resolved release download URL")
    options: str = Field(..., description="Launch options passed to the daemon")
    resources: List[AnyResource] = Field(default_factory=list, description="Declarations in apply order")
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def find(self, kind: str, title: str) -> Optional[AnyResource]:
        for resource in self.resources:
            if resource.kind == kind and resource.title == title:
                return resource
        return None

    def to_document(self) -> List[Dict[str, Any]]:
        return [resource.model_dump(by_alias=True) for resource in self.resources]
