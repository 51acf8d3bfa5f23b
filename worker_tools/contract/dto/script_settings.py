from typing import Any, Optional

from .base_model import BaseModel


class ScriptSettings(BaseModel):
    logpush: bool = False
    tail_consumers: Optional[list[dict[str, Any]]] = None
