import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from .base_model import BaseModel
from .binding import Binding, parse_binding


class WorkerMetadata(BaseModel):
    author_email: Optional[str] = None
    author_id: Optional[str] = None
    created_on: Optional[datetime.datetime] = None
    modified_on: Optional[datetime.datetime] = None
    source: Optional[str] = None


class Annotations(BaseModel):
    message: Optional[str] = Field(default=None, alias="workers/message")
    tag: Optional[str] = Field(default=None, alias="workers/tag")
    triggered_by: Optional[str] = Field(default=None, alias="workers/triggered_by")


class WorkerVersion(BaseModel):
    id: str
    metadata: WorkerMetadata = Field(default_factory=WorkerMetadata)
    number: Optional[int] = None


class VersionScript(BaseModel):
    etag: Optional[str] = None
    handlers: list[str] = []
    placement_mode: Optional[str] = None
    last_deployed_from: Optional[str] = None


class ScriptRuntime(BaseModel):
    compatibility_date: Optional[str] = None
    compatibility_flags: Optional[list[str]] = None
    usage_model: Optional[str] = None
    limits: Optional[dict[str, Any]] = None


class VersionResources(BaseModel):
    bindings: list[Binding] = []
    script: VersionScript = Field(default_factory=VersionScript)
    script_runtime: ScriptRuntime = Field(default_factory=ScriptRuntime)

    @field_validator("bindings", mode="before")
    @classmethod
    def _parse_bindings(cls, value):
        return [parse_binding(raw) for raw in value or []]


class VersionDetails(WorkerVersion):
    annotations: Optional[Annotations] = None
    resources: VersionResources = Field(default_factory=VersionResources)
