from typing import Any, Literal, Union

from pydantic import ConfigDict, ValidationError

from .base_model import BaseModel

SECRET_TEXT = "secret_text"


class _BindingModel(BaseModel):
    # Fields the API adds later must survive a re-upload.
    model_config = ConfigDict(extra="allow")

    def to_metadata(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SecretTextBinding(_BindingModel):
    type: Literal["secret_text"] = SECRET_TEXT
    name: str
    text: str


class PlainTextBinding(_BindingModel):
    type: Literal["plain_text"]
    name: str
    text: str


class KVNamespaceBinding(_BindingModel):
    type: Literal["kv_namespace"]
    name: str
    namespace_id: str


class OpaqueBinding(_BindingModel):
    """Any binding kind not modelled above, carried through untouched."""

    type: str


Binding = Union[SecretTextBinding, PlainTextBinding, KVNamespaceBinding, OpaqueBinding]

_BINDING_TYPES = {
    SECRET_TEXT: SecretTextBinding,
    "plain_text": PlainTextBinding,
    "kv_namespace": KVNamespaceBinding,
}


def parse_binding(raw: Union[dict, Binding]) -> Binding:
    if isinstance(raw, _BindingModel):
        return raw
    model = _BINDING_TYPES.get(raw.get("type"))
    if model is not None:
        try:
            return model.model_validate(raw)
        except ValidationError:
            pass
    return OpaqueBinding.model_validate(raw)
