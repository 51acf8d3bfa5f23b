from enum import Enum

from ...exceptions import FatalError
from .base_model import BaseModel


class ModuleType(str, Enum):
    ESM = "esm"
    COMMONJS = "commonjs"
    COMPILED_WASM = "compiled-wasm"
    BUFFER = "buffer"
    TEXT = "text"
    PYTHON = "python"
    PYTHON_REQUIREMENT = "python-requirement"

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "ModuleType":
        """Map a part's media type, ignoring any parameters, to a module type."""
        essence = mime_type.split(";", 1)[0].strip().lower()
        for module_type, candidate in _MIME_TYPES.items():
            if candidate == essence:
                return module_type
        raise FatalError(f"Unsupported mime type: {mime_type}")


_MIME_TYPES = {
    ModuleType.ESM: "application/javascript+module",
    ModuleType.COMMONJS: "application/javascript",
    ModuleType.COMPILED_WASM: "application/wasm",
    ModuleType.BUFFER: "application/octet-stream",
    ModuleType.TEXT: "text/plain",
    ModuleType.PYTHON: "text/x-python",
    ModuleType.PYTHON_REQUIREMENT: "text/x-python-requirement",
}


class Module(BaseModel):
    name: str
    content: bytes
    type: ModuleType

    @property
    def mime_type(self) -> str:
        return ModuleType(self.type).mime_type
