""" Assembling a new version from an existing one """

import json
from typing import Optional

from worker_tools.contract import (
    SECRET_TEXT,
    Binding,
    ModuleType,
    ScriptSettings,
    SecretTextBinding,
    VersionDetails,
    WorkerInit,
)

from .content import VersionModules

SMART_PLACEMENT = "smart"
MESSAGE_ANNOTATION = "workers/message"
TAG_ANNOTATION = "workers/tag"


def merge_secret_binding(bindings: list[Binding], key: str, value: str) -> list[Binding]:
    """
    Replace every secret binding with a single one for ``key``.

    Secrets that are not re-specified are inherited from the previous version
    because the upload asks the API to keep them.
    """

    merged = [binding for binding in bindings if binding.type != SECRET_TEXT]
    merged.append(SecretTextBinding(name=key, text=value))
    return merged


def build_worker(
    script_name: str,
    details: VersionDetails,
    settings: ScriptSettings,
    sources: VersionModules,
    key: str,
    value: str,
    message: Optional[str] = None,
    tag: Optional[str] = None,
) -> WorkerInit:
    runtime = details.resources.script_runtime
    annotations = {MESSAGE_ANNOTATION: message if message is not None else f"Updated secret {key}"}
    if tag is not None:
        annotations[TAG_ANNOTATION] = tag
    return WorkerInit(
        name=script_name,
        main=sources.main,
        modules=sources.modules,
        raw_bindings=merge_secret_binding(details.resources.bindings, key, value),
        compatibility_date=runtime.compatibility_date,
        compatibility_flags=runtime.compatibility_flags,
        usage_model=runtime.usage_model,
        # every var is re-specified, only secrets are inherited
        keep_vars=False,
        keep_secrets=True,
        logpush=settings.logpush,
        placement={"mode": SMART_PLACEMENT} if details.resources.script.placement_mode == SMART_PLACEMENT else None,
        tail_consumers=settings.tail_consumers,
        limits=runtime.limits,
        annotations=annotations,
    )


def worker_metadata(worker: WorkerInit) -> dict:
    metadata = {}
    if ModuleType(worker.main.type) == ModuleType.COMMONJS:
        metadata["body_part"] = worker.main.name
    else:
        metadata["main_module"] = worker.main.name
    metadata["bindings"] = [binding.to_metadata() for binding in worker.raw_bindings]
    for field in ("compatibility_date", "compatibility_flags", "usage_model", "limits", "placement", "tail_consumers", "logpush"):
        value = getattr(worker, field)
        if value is not None:
            metadata[field] = value
    keep_bindings = []
    if worker.keep_vars:
        keep_bindings.extend(["plain_text", "json"])
    if worker.keep_secrets:
        keep_bindings.extend(["secret_text", "secret_key"])
    if keep_bindings:
        metadata["keep_bindings"] = keep_bindings
    if worker.annotations:
        metadata["annotations"] = worker.annotations
    return metadata


def create_worker_upload_form(worker: WorkerInit) -> list:
    """Multipart fields for ``requests``: the metadata part, then one part per module."""
    files = [("metadata", (None, json.dumps(worker_metadata(worker)), "application/json"))]
    for module in [worker.main, *worker.modules]:
        files.append((module.name, (module.name, module.content, module.mime_type)))
    return files
