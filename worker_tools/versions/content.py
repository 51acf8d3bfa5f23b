""" Rebuilding the source modules of an uploaded version """

import logging
from email.message import Message
from email.utils import collapse_rfc2231_value

from requests_toolbelt.multipart.decoder import (
    ImproperBodyPartContentException,
    MultipartDecoder,
    NonMultipartContentTypeException,
)

from worker_tools.contract import BaseModel, Module, ModuleType, WorkerIdentity

from ..exceptions import FatalError, UserError

STATIC_CONTENT_MANIFEST = "__STATIC_CONTENT_MANIFEST"
ENTRYPOINT_HEADER = "cf-entrypoint"
DEFAULT_SCRIPT_NAME = "index.js"

logger = logging.getLogger(__name__)


class VersionModules(BaseModel):
    main: Module
    modules: list[Module] = []


def parse_modules(session, ident: WorkerIdentity, version_id: str) -> VersionModules:
    response = session.version_content(ident, version_id)
    content_type = response.headers.get("content-type")
    if content_type and content_type.lower().startswith("multipart/form-data"):
        return modules_from_form_data(response)
    return module_from_script(response)


def modules_from_form_data(response) -> VersionModules:
    header = Message()
    header["content-type"] = response.headers.get("content-type", "")
    if not header.get_param("boundary"):
        raise FatalError("Got form-data without a multipart boundary")
    try:
        decoder = MultipartDecoder.from_response(response)
    except (ImproperBodyPartContentException, NonMultipartContentTypeException) as e:
        raise FatalError(f"Could not parse form-data: {e}") from e
    parts = [_FormPart(part, decoder.encoding) for part in decoder.parts]

    if any(part.name == STATIC_CONTENT_MANIFEST for part in parts):
        raise UserError("Workers Sites is not supported for `versions secret put` today.")

    entrypoint = response.headers.get(ENTRYPOINT_HEADER)
    if entrypoint is None:
        raise FatalError(f"Got modules without {ENTRYPOINT_HEADER} header")

    entrypoint_part = next((part for part in parts if part.name == entrypoint), None)
    if entrypoint_part is None:
        raise FatalError("Could not find entrypoint in form-data")

    main = Module(
        name=entrypoint_part.filename or entrypoint_part.name,
        content=entrypoint_part.content,
        type=ModuleType.from_mime_type(entrypoint_part.content_type),
    )
    modules = [
        Module(name=part.name, content=part.content, type=ModuleType.from_mime_type(part.content_type))
        for part in parts
        if part.name != entrypoint
    ]
    logger.debug(f"Entrypoint {main.name} with {len(modules)} additional module(s)")
    return VersionModules(main=main, modules=modules)


def module_from_script(response) -> VersionModules:
    # Service Worker format, no additional modules
    content_type = response.headers.get("content-type")
    if content_type is None:
        raise FatalError("No content-type header was provided for non-module Worker content")
    main = Module(name=DEFAULT_SCRIPT_NAME, content=response.content, type=ModuleType.from_mime_type(content_type))
    return VersionModules(main=main)


class _FormPart:
    def __init__(self, part, encoding):
        disposition = part.headers.get(b"Content-Disposition", b"").decode(encoding)
        header = Message()
        header["content-disposition"] = disposition
        self.name = _param(header, "name")
        if not self.name:
            raise FatalError("Got a form-data part without a name")
        self.filename = _param(header, "filename")
        self.content_type = part.headers.get(b"Content-Type", b"application/octet-stream").decode(encoding)
        self.content = part.content


def _param(header, name):
    value = header.get_param(name, header="content-disposition")
    if value is None:
        return None
    return collapse_rfc2231_value(value)
