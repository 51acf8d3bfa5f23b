from typing import Any, Optional

from pydantic import Field, field_validator

from .base_model import BaseModel
from .binding import Binding, parse_binding
from .module import Module


class WorkerInit(BaseModel):
    """Everything needed to upload a new version of a Worker."""

    name: str
    main: Module
    modules: list[Module] = []
    raw_bindings: list[Binding] = []
    compatibility_date: Optional[str] = None
    compatibility_flags: Optional[list[str]] = None
    usage_model: Optional[str] = None
    keep_vars: bool = False
    keep_secrets: bool = False
    logpush: Optional[bool] = None
    placement: Optional[dict[str, str]] = None
    tail_consumers: Optional[list[dict[str, Any]]] = None
    limits: Optional[dict[str, Any]] = None
    annotations: dict[str, str] = Field(default_factory=dict)

    @field_validator("raw_bindings", mode="before")
    @classmethod
    def _parse_bindings(cls, value):
        return [parse_binding(raw) for raw in value or []]


class VersionUploadResponse(BaseModel):
    id: Optional[str] = None
    etag: Optional[str] = None
    pipeline_hash: Optional[str] = None
    mutable_pipeline_id: Optional[str] = None
    deployment_id: Optional[str] = None
    available_on_subdomain: bool = False
