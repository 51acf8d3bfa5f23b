""" Request, response and record models for the Workers API """

from .dto.base_model import BaseModel
from .dto.binding import (
    SECRET_TEXT,
    Binding,
    KVNamespaceBinding,
    OpaqueBinding,
    PlainTextBinding,
    SecretTextBinding,
    parse_binding,
)
from .dto.deployment import Deployment, DeploymentVersion
from .dto.identity import WorkerIdentity
from .dto.module import Module, ModuleType
from .dto.request.secret_delete import SecretDeleteRequest
from .dto.request.secret_put import SecretPutRequest
from .dto.script_settings import ScriptSettings
from .dto.version import Annotations, ScriptRuntime, VersionDetails, VersionResources, VersionScript, WorkerVersion
from .dto.worker import VersionUploadResponse, WorkerInit
